from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from team_formation.domain.crew import CrewMember
from team_formation.domain.seniority import SeniorityTier
from team_formation.domain.team import AircraftType, Team
from team_formation.preprocessing.eligibility import can_crew
from team_formation.preprocessing.ranks import UNRANKED_ORDER, classify_rank

logger = logging.getLogger(__name__)

# (rich team, senior moving into the needy team, member swapped out of it)
Move = Tuple[Team, CrewMember, Optional[CrewMember]]


class _Seniority:
    def __init__(self, tier_by_id: Dict[str, SeniorityTier], order_by_id: Dict[str, int]) -> None:
        self.tier_by_id = tier_by_id
        self.order_by_id = order_by_id

    def tier(self, m: CrewMember) -> SeniorityTier:
        tier = self.tier_by_id.get(m.crew_id)
        return tier if tier is not None else classify_rank(m.rank)

    def is_senior(self, m: CrewMember) -> bool:
        return self.tier(m).is_senior_or_above

    def seniors_in(self, team: Team) -> int:
        return sum(1 for m in team.members if self.is_senior(m))

    def least_senior(self, members: Sequence[CrewMember]) -> Optional[CrewMember]:
        """Lowest tier, then highest rank order; ties go to the last listed."""
        if not members:
            return None
        ranked = [
            (int(self.tier(m)), self.order_by_id.get(m.crew_id, UNRANKED_ORDER), i)
            for i, m in enumerate(members)
        ]
        return members[max(ranked)[2]]


def _fits(member: CrewMember, team: Team) -> bool:
    # only the large type restricts who may join during allocation
    return team.aircraft_type != AircraftType.LARGE or can_crew(member, AircraftType.LARGE)


def _find_move(needy: Team, rich: Sequence[Team], s: _Seniority) -> Optional[Move]:
    swappable = list(needy.members)
    if needy.aircraft_type == AircraftType.LARGE:
        swappable = [m for m in swappable if can_crew(m, AircraftType.LARGE)]
    if needy.members and not swappable:
        return None

    for donor in rich:
        # least senior member of the needy team that the donor can take
        outward = s.least_senior([m for m in swappable if _fits(m, donor)])
        if needy.members and outward is None:
            continue
        candidates = [
            m for m in donor.members
            if s.is_senior(m) and _fits(m, needy)
        ]
        senior = s.least_senior(candidates)
        if senior is None:
            continue
        return donor, senior, outward
    return None


def _apply_move(needy: Team, move: Move) -> None:
    donor, senior, outward = move

    donor.members = [m for m in donor.members if m is not senior]
    needy.members.insert(0, senior)

    if outward is not None:
        needy.members = [m for m in needy.members if m is not outward]
        donor.members.append(outward)


def repair_seniority(
    teams: List[Team],
    tier_by_id: Dict[str, SeniorityTier],
    order_by_id: Dict[str, int],
    max_iterations: Optional[int] = None,
) -> int:
    """
    Spread seniors so that, wherever possible, no team is without a senior
    while another team holds more than one.

    Teams are mutated in place. Each step moves one senior from a "rich"
    team (more than one senior) into a "needy" team (none), swapping the
    needy team's least senior member that the donor can take back when it
    has one, so team sizes are preserved. A needy team with no valid donor
    is dropped from consideration; having fewer seniors than teams is normal.

    Returns the number of moves applied.
    """
    s = _Seniority(tier_by_id, order_by_id)
    if max_iterations is None:
        max_iterations = max(1, sum(t.size for t in teams))

    skipped: Set[str] = set()
    moves = 0

    for _ in range(max_iterations):
        needy = [t for t in teams if s.seniors_in(t) == 0 and t.team_id not in skipped]
        rich = [t for t in teams if s.seniors_in(t) > 1]
        if not needy or not rich:
            break

        target = needy[0]
        move = _find_move(target, rich, s)
        if move is None:
            skipped.add(target.team_id)
            continue

        _apply_move(target, move)
        moves += 1
        logger.debug(
            "moved %s from %s to %s (swapped out: %s)",
            move[1].crew_id,
            move[0].team_id,
            target.team_id,
            move[2].crew_id if move[2] else None,
        )

    return moves


def needy_teams(teams: Sequence[Team], tier_by_id: Dict[str, SeniorityTier]) -> List[Team]:
    """Teams without any senior-or-above member."""
    s = _Seniority(tier_by_id, {})
    return [t for t in teams if s.seniors_in(t) == 0]
