from __future__ import annotations

from typing import Dict, List, Tuple

from team_formation.domain.crew import CrewMember
from team_formation.domain.team import AircraftType


def can_crew(member: CrewMember, aircraft_type: AircraftType) -> bool:
    """
    True if the member may be assigned to a team on this aircraft type.

    Members without any recorded rating are only trusted on the small type.
    """
    if not member.qualified_types:
        return aircraft_type == AircraftType.SMALL
    return aircraft_type.value in member.qualified_types


def compute_eligibility(
        pool: List[CrewMember],
) -> Dict[Tuple[str, str], bool]:
    """
    Returns dict[(crew_id, aircraft_type)] = True/False for every aircraft type.
    """
    eligible: Dict[Tuple[str, str], bool] = {}

    for c in pool:
        for t in AircraftType:
            eligible[(c.crew_id, t.value)] = can_crew(c, t)

    return eligible
