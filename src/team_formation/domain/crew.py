from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class CrewMember:
    """
    Represents a single crew member selected for a training session.

    A CrewMember is the atomic unit the allocator places into teams.
    Records come from the roster directory and are never modified by
    the allocator.

    Attributes
    ----------
    crew_id : str
        Unique identifier (employee id) of the crew member.
    name : str
        Display name.
    rank : str
        Free-text rank label, e.g. "SC - Section Chief".
        Seniority tier and sort order are derived from it.
    qualified_types : Tuple[str, ...]
        Aircraft type codes the crew member is rated on.
        Empty means the rating is unknown; the member is then only
        placed on the small aircraft type.
    """
    crew_id: str
    name: str
    rank: str
    qualified_types: Tuple[str, ...] = field(default_factory=tuple)
