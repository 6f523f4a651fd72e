from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set

from team_formation.domain.crew import CrewMember
from team_formation.domain.warnings import AllocationWarning, WarningCode


class AircraftType(str, Enum):
    LARGE = "B738"
    SMALL = "ATR"


@dataclass(frozen=True)
class CrewCapacity:
    min_crew: int
    max_crew: int


CAPACITY: Dict[AircraftType, CrewCapacity] = {
    AircraftType.LARGE: CrewCapacity(min_crew=4, max_crew=6),
    AircraftType.SMALL: CrewCapacity(min_crew=2, max_crew=2),
}


@dataclass
class Team:
    """
    A training team crewing one aircraft.

    Attributes
    ----------
    team_id : str
        Identifier, e.g. "b738-1" or "atr-3".
    aircraft_type : AircraftType
        Aircraft the team trains on. Every member must be qualified for it.
    number : int
        Sequence number within the aircraft type (1-based).
    members : List[CrewMember]
        Members in display order. Mutated in place by the repair and
        validation phases.
    """
    team_id: str
    aircraft_type: AircraftType
    number: int
    members: List[CrewMember] = field(default_factory=list)

    @classmethod
    def create(cls, aircraft_type: AircraftType, number: int) -> "Team":
        return cls(
            team_id=f"{aircraft_type.value.lower()}-{number}",
            aircraft_type=aircraft_type,
            number=number,
        )

    @property
    def name(self) -> str:
        return f"{self.aircraft_type.value} {self.number}"

    @property
    def capacity(self) -> CrewCapacity:
        return CAPACITY[self.aircraft_type]

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def member_ids(self) -> List[str]:
        return [m.crew_id for m in self.members]


@dataclass
class AllocationResult:
    teams: List[Team]
    warnings: List[AllocationWarning]
    unassigned: List[CrewMember] = field(default_factory=list)

    def teams_of(self, aircraft_type: AircraftType) -> List[Team]:
        return [t for t in self.teams if t.aircraft_type == aircraft_type]

    def assigned_ids(self) -> Set[str]:
        return {m.crew_id for t in self.teams for m in t.members}

    def warning_codes(self) -> List[WarningCode]:
        return [w.code for w in self.warnings]
