from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from team_formation.domain.crew import CrewMember
from team_formation.domain.team import CAPACITY, AircraftType, Team
from team_formation.domain.warnings import AllocationWarning, WarningCode
from team_formation.preprocessing.cohorts import Cohorts
from team_formation.preprocessing.eligibility import can_crew

logger = logging.getLogger(__name__)


@dataclass
class BuildOutcome:
    teams: List[Team]
    leftover: Optional[CrewMember] = None
    warnings: List[AllocationWarning] = field(default_factory=list)


def pair_small_teams(
    people: Sequence[CrewMember],
    first_number: int,
) -> tuple[List[Team], List[CrewMember]]:
    """
    Cut `people` into consecutive small-type teams of exactly two.
    Returns (teams, rest) where rest holds at most one member.
    """
    size = CAPACITY[AircraftType.SMALL].max_crew
    teams: List[Team] = []
    cursor = 0

    while len(people) - cursor >= size:
        team = Team.create(AircraftType.SMALL, first_number + len(teams))
        team.members.extend(people[cursor:cursor + size])
        teams.append(team)
        cursor += size

    return teams, list(people[cursor:])


def place_leftover(member: CrewMember, teams: Sequence[Team]) -> Optional[Team]:
    """
    Put a single unpaired member into the first large team (by number)
    with room to spare. Returns the host team, or None if there is none.
    """
    if not can_crew(member, AircraftType.LARGE):
        return None

    max_crew = CAPACITY[AircraftType.LARGE].max_crew
    large_teams = sorted(
        (t for t in teams if t.aircraft_type == AircraftType.LARGE),
        key=lambda t: t.number,
    )
    for team in large_teams:
        if team.size < max_crew:
            team.members.append(member)
            return team
    return None


def build_teams(cohorts: Cohorts, large_team_count: int) -> BuildOutcome:
    """
    Greedy construction:
      1. large-type teams of `min_crew` from the large-qualified list
      2. everyone left is paired into small-type teams
      3. a single leftover joins a large team with room, if it can
    """
    min_crew = CAPACITY[AircraftType.LARGE].min_crew
    qualified = cohorts.large_qualified
    teams: List[Team] = []
    warnings: List[AllocationWarning] = []

    # --- Large-type teams ---
    cursor = 0
    for i in range(1, large_team_count + 1):
        if len(qualified) - cursor < min_crew:
            # not enough for a full team: nothing is taken, stop here
            formed = i - 1
            warnings.append(
                AllocationWarning(
                    code=WarningCode.INSUFFICIENT_POOL_FOR_LARGE_TYPE_COUNT,
                    message=(
                        f"Requested {large_team_count} {AircraftType.LARGE.value} teams "
                        f"but only {formed} could be formed "
                        f"({len(qualified)} qualified crew, {min_crew} needed per team)"
                    ),
                )
            )
            break
        team = Team.create(AircraftType.LARGE, i)
        team.members.extend(qualified[cursor:cursor + min_crew])
        teams.append(team)
        cursor += min_crew

    # --- Small-type teams from the overflow pool ---
    overflow = qualified[cursor:] + cohorts.small_only
    small_teams, rest = pair_small_teams(overflow, first_number=1)
    teams.extend(small_teams)

    # --- Odd one out ---
    leftover: Optional[CrewMember] = None
    if rest:
        member = rest[0]
        host = place_leftover(member, teams)
        if host is None:
            leftover = member
        else:
            logger.debug("leftover %s joined %s", member.crew_id, host.team_id)

    logger.debug(
        "built %d large and %d small teams (leftover=%s)",
        sum(1 for t in teams if t.aircraft_type == AircraftType.LARGE),
        len(small_teams),
        leftover.crew_id if leftover else None,
    )
    return BuildOutcome(teams=teams, leftover=leftover, warnings=warnings)


def unassigned_warning(member: CrewMember) -> AllocationWarning:
    return AllocationWarning(
        code=WarningCode.OVERFLOW_UNASSIGNED,
        message=(
            f"{member.name or member.crew_id} ({member.crew_id}) could not be "
            f"placed in any team"
        ),
        crew_ids=(member.crew_id,),
    )
