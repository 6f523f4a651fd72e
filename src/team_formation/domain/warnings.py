from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class WarningCode(str, Enum):
    ODD_POOL_FOR_SMALL_TYPE = "ODD_POOL_FOR_SMALL_TYPE"
    INSUFFICIENT_POOL_FOR_LARGE_TYPE_COUNT = "INSUFFICIENT_POOL_FOR_LARGE_TYPE_COUNT"
    OVERFLOW_UNASSIGNED = "OVERFLOW_UNASSIGNED"
    VALIDATOR_TRIMMED_EXCESS = "VALIDATOR_TRIMMED_EXCESS"
    VALIDATOR_UNDERSIZED_TEAM = "VALIDATOR_UNDERSIZED_TEAM"


@dataclass(frozen=True)
class AllocationWarning:
    """
    A recoverable anomaly found while forming teams.

    Attributes
    ----------
    code : WarningCode
        Stable reason code, one per warning category.
    message : str
        Human-readable text shown to the operator.
    crew_ids : Tuple[str, ...]
        Crew members the warning is about (may be empty).
    """
    code: WarningCode
    message: str
    crew_ids: Tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return self.message
