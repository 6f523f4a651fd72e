from __future__ import annotations

import math
from typing import List, Sequence

from team_formation.domain.crew import CrewMember
from team_formation.domain.team import CAPACITY, AircraftType
from team_formation.domain.warnings import AllocationWarning, WarningCode
from team_formation.preprocessing.eligibility import can_crew
from team_formation.preprocessing.loaders import AllocationConfig


def expected_small_team_count(pool_size: int, large_team_count: int) -> int:
    """Small-type teams the form screen announces before allocation."""
    min_crew = CAPACITY[AircraftType.LARGE].min_crew
    remaining = max(0, pool_size - large_team_count * min_crew)
    return math.ceil(remaining / CAPACITY[AircraftType.SMALL].max_crew)


def check_configuration(
    pool: Sequence[CrewMember],
    config: AllocationConfig,
) -> List[AllocationWarning]:
    """
    Warn the operator about a pool/config mismatch before teams are formed.
    Returns a list of warnings (empty => configuration looks fine).
    """
    issues: List[AllocationWarning] = []
    total = len(pool)
    if total == 0:
        return issues

    n_large = config.large_team_count
    large = CAPACITY[AircraftType.LARGE]

    if n_large == 0:
        if total % 2 != 0:
            issues.append(
                AllocationWarning(
                    code=WarningCode.ODD_POOL_FOR_SMALL_TYPE,
                    message=(
                        f"{AircraftType.SMALL.value} teams need an even headcount, "
                        f"pool has {total} (1 person cannot be paired)"
                    ),
                )
            )
        return issues

    qualified = sum(1 for c in pool if can_crew(c, AircraftType.LARGE))
    min_needed = n_large * large.min_crew
    max_hosted = n_large * large.max_crew

    if qualified < min_needed:
        issues.append(
            AllocationWarning(
                code=WarningCode.INSUFFICIENT_POOL_FOR_LARGE_TYPE_COUNT,
                message=(
                    f"{n_large} x {AircraftType.LARGE.value} need at least "
                    f"{min_needed} qualified crew, pool has {qualified}"
                ),
            )
        )
    elif total > max_hosted and (total - max_hosted) % 2 != 0:
        issues.append(
            AllocationWarning(
                code=WarningCode.ODD_POOL_FOR_SMALL_TYPE,
                message=(
                    f"{total - max_hosted} crew overflow the "
                    f"{AircraftType.LARGE.value} teams and cannot be paired evenly "
                    f"(1 person may be left unassigned)"
                ),
            )
        )
    return issues
