from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional, Sequence, Union

from team_formation.domain.crew import CrewMember
from team_formation.domain.team import AllocationResult, Team
from team_formation.model.fairness import repair_seniority
from team_formation.model.team_builder import build_teams, unassigned_warning
from team_formation.model.validator import validate_teams
from team_formation.preprocessing.cohorts import split_cohorts
from team_formation.preprocessing.loaders import AllocationConfig
from team_formation.preprocessing.validate_pool import validate_large_team_count, validate_pool

logger = logging.getLogger(__name__)


def allocate_teams(
    pool: Sequence[CrewMember],
    config: Union[AllocationConfig, int],
    rng: Optional[random.Random] = None,
    *,
    max_repair_iterations: Optional[int] = None,
) -> AllocationResult:
    """
    Partition a crew pool into training teams.

    Split -> Build -> Repair -> Validate. Never raises for a pool it cannot
    serve perfectly; shortfalls come back as warnings next to a best-effort
    team list. The only hard failures are a bad large-team count and a pool
    with duplicate or empty crew ids.

    If rng is None a fresh OS-seeded generator is used, so calling again
    with the same input reshuffles the teams. Pass a seeded random.Random
    for reproducible output.
    """
    large_team_count = config.large_team_count if isinstance(config, AllocationConfig) else config
    validate_large_team_count(large_team_count)
    validate_pool(pool)

    if rng is None:
        rng = random.Random()
    if max_repair_iterations is None:
        max_repair_iterations = max(1, len(pool))

    cohorts = split_cohorts(list(pool), rng)

    built = build_teams(cohorts, large_team_count)
    teams = built.teams
    warnings = list(built.warnings)
    unassigned: List[CrewMember] = []
    if built.leftover is not None:
        unassigned.append(built.leftover)
        warnings.append(unassigned_warning(built.leftover))

    moves = repair_seniority(
        teams,
        cohorts.tier_by_id,
        cohorts.order_by_id,
        max_iterations=max_repair_iterations,
    )

    checked = validate_teams(teams)
    unassigned.extend(checked.unassigned)
    warnings.extend(checked.warnings)

    logger.debug(
        "allocated %d crew into %d teams (%d repair moves, %d warnings)",
        len(pool), len(teams), moves, len(warnings),
    )
    return AllocationResult(teams=teams, warnings=warnings, unassigned=unassigned)


# Same computation; the name documents the "reshuffle" button semantics.
reshuffle = allocate_teams


def to_training_groups(teams: Sequence[Team]) -> List[Dict[str, Any]]:
    """Teams in the shape the training session screen consumes."""
    return [
        {
            "name": team.name,
            "members": [
                {
                    "user_id": m.crew_id,
                    "name": m.name,
                    "employee_id": m.crew_id,
                    "rank": m.rank,
                }
                for m in team.members
            ],
        }
        for team in teams
    ]
