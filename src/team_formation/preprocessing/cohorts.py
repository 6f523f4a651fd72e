from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Sequence

from team_formation.domain.crew import CrewMember
from team_formation.domain.seniority import TIER_PRIORITY, SeniorityTier
from team_formation.domain.team import AircraftType
from team_formation.preprocessing.eligibility import can_crew
from team_formation.preprocessing.ranks import classify_rank, rank_order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cohorts:
    """
    Working lists handed to the team builder.

    Attributes
    ----------
    large_qualified : List[CrewMember]
        Members rated on the large type, in shuffled seniority order.
    small_only : List[CrewMember]
        Everyone else, same ordering.
    tier_by_id : Dict[str, SeniorityTier]
        crew_id -> tier, kept for the repair and validation phases.
    order_by_id : Dict[str, int]
        crew_id -> rank order, for tie-breaking inside a tier.
    """
    large_qualified: List[CrewMember]
    small_only: List[CrewMember]
    tier_by_id: Dict[str, SeniorityTier]
    order_by_id: Dict[str, int]


def split_cohorts(pool: Sequence[CrewMember], rng: random.Random) -> Cohorts:
    tier_by_id = {c.crew_id: classify_rank(c.rank) for c in pool}
    order_by_id = {c.crew_id: rank_order(c.rank) for c in pool}

    by_tier: Dict[SeniorityTier, List[CrewMember]] = {t: [] for t in TIER_PRIORITY}
    for c in pool:
        by_tier[tier_by_id[c.crew_id]].append(c)

    ordered: List[CrewMember] = []
    for tier in TIER_PRIORITY:
        cohort = by_tier[tier]
        rng.shuffle(cohort)
        ordered.extend(cohort)

    large_qualified = [c for c in ordered if can_crew(c, AircraftType.LARGE)]
    small_only = [c for c in ordered if not can_crew(c, AircraftType.LARGE)]

    logger.debug(
        "cohorts: %s; large_qualified=%d small_only=%d",
        {t.name: len(v) for t, v in by_tier.items()},
        len(large_qualified),
        len(small_only),
    )
    return Cohorts(
        large_qualified=large_qualified,
        small_only=small_only,
        tier_by_id=tier_by_id,
        order_by_id=order_by_id,
    )
