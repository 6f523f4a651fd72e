from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from team_formation.domain.crew import CrewMember
from team_formation.domain.seniority import SeniorityTier
from team_formation.domain.team import Team
from team_formation.preprocessing.ranks import classify_rank, member_sort_key


def sort_pool(members: Iterable[CrewMember]) -> List[CrewMember]:
    """Rank hierarchy first, then employee id ascending (numeric-aware)."""
    return sorted(members, key=member_sort_key)


def search_members(
    members: Iterable[CrewMember],
    query: str,
    exclude_ids: Iterable[str] = (),
) -> List[CrewMember]:
    """
    Members not yet in the pool whose crew_id or name contains `query`.
    """
    excluded = set(exclude_ids)
    available = [m for m in members if m.crew_id not in excluded]

    q = query.strip().lower()
    if q:
        available = [
            m for m in available
            if q in m.crew_id.lower() or q in m.name.lower()
        ]
    return sort_pool(available)


def display_members(team: Team) -> List[CrewMember]:
    return sort_pool(team.members)


def team_leader(
    team: Team,
    tier_of: Optional[Callable[[CrewMember], SeniorityTier]] = None,
) -> Optional[CrewMember]:
    """
    The member shown with the leader badge: the first senior in display
    order, or simply the first member when the team has no senior.
    """
    tier_of = tier_of or (lambda m: classify_rank(m.rank))
    ordered = display_members(team)
    if not ordered:
        return None
    for m in ordered:
        if tier_of(m).is_senior_or_above:
            return m
    return ordered[0]
