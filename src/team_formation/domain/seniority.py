from __future__ import annotations

from enum import IntEnum


class SeniorityTier(IntEnum):
    """Seniority tiers, most senior first (lower value = more senior)."""
    HIGHER_SENIOR = 0   # MG, SC, FI, PR
    SENIOR = 1          # LF
    JUNIOR = 2          # FS, FA
    OTHER = 3

    @property
    def is_senior_or_above(self) -> bool:
        return self <= SeniorityTier.SENIOR


TIER_PRIORITY = (
    SeniorityTier.HIGHER_SENIOR,
    SeniorityTier.SENIOR,
    SeniorityTier.JUNIOR,
    SeniorityTier.OTHER,
)
