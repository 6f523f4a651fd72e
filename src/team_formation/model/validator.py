from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from team_formation.domain.crew import CrewMember
from team_formation.domain.team import AircraftType, Team
from team_formation.domain.warnings import AllocationWarning, WarningCode
from team_formation.model.team_builder import pair_small_teams, place_leftover, unassigned_warning
from team_formation.preprocessing.eligibility import can_crew

logger = logging.getLogger(__name__)


@dataclass
class ValidationOutcome:
    unassigned: List[CrewMember] = field(default_factory=list)
    warnings: List[AllocationWarning] = field(default_factory=list)


def _remove_unqualified(teams: List[Team]) -> List[CrewMember]:
    violators: List[CrewMember] = []
    for team in teams:
        if team.aircraft_type != AircraftType.LARGE:
            continue
        bad = [m for m in team.members if not can_crew(m, AircraftType.LARGE)]
        if bad:
            logger.debug(
                "%s: removing unqualified crew %s", team.team_id, [m.crew_id for m in bad]
            )
            team.members = [m for m in team.members if can_crew(m, AircraftType.LARGE)]
            violators.extend(bad)
    return violators


def validate_teams(teams: List[Team]) -> ValidationOutcome:
    """
    Enforce the hard invariants on a repaired team list (mutated in place).

    - no member on a large-type team without the large-type rating;
      offenders are re-paired into new small-type teams
    - small-type teams hold exactly two members; excess is trimmed
    - anything that cannot be fixed is returned as a warning
    """
    outcome = ValidationOutcome()

    # --- Qualification ---
    violators = _remove_unqualified(teams)
    if violators:
        next_number = 1 + max(
            (t.number for t in teams if t.aircraft_type == AircraftType.SMALL),
            default=0,
        )
        new_teams, rest = pair_small_teams(violators, first_number=next_number)
        teams.extend(new_teams)
        for member in rest:
            if place_leftover(member, teams) is None:
                outcome.unassigned.append(member)
                outcome.warnings.append(unassigned_warning(member))

    # --- Sizes ---
    for team in teams:
        cap = team.capacity
        if team.aircraft_type == AircraftType.SMALL and team.size > cap.max_crew:
            excess = team.members[cap.max_crew:]
            team.members = team.members[:cap.max_crew]
            outcome.unassigned.extend(excess)
            outcome.warnings.append(
                AllocationWarning(
                    code=WarningCode.VALIDATOR_TRIMMED_EXCESS,
                    message=(
                        f"{team.name} had {cap.max_crew + len(excess)} members; "
                        f"removed {', '.join(m.crew_id for m in excess)}"
                    ),
                    crew_ids=tuple(m.crew_id for m in excess),
                )
            )
        elif team.size < cap.min_crew:
            outcome.warnings.append(
                AllocationWarning(
                    code=WarningCode.VALIDATOR_UNDERSIZED_TEAM,
                    message=(
                        f"{team.name} has {team.size} members "
                        f"(minimum {cap.min_crew})"
                    ),
                    crew_ids=tuple(team.member_ids),
                )
            )

    return outcome
