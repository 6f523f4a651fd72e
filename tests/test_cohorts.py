import random

from team_formation.domain.seniority import SeniorityTier
from team_formation.preprocessing.cohorts import split_cohorts
from team_formation.preprocessing.ranks import classify_rank

from conftest import ATR_ONLY


def _pool(make_member):
    return [
        make_member("1", "FA"),
        make_member("2", "OT"),
        make_member("3", "LF", ATR_ONLY),
        make_member("4", "SC"),
        make_member("5", "FS", ATR_ONLY),
        make_member("6", "PR"),
        make_member("7", "FA", ()),
        make_member("8", "LF"),
    ]


def test_tiers_are_concatenated_in_priority_order(make_member, rng):
    cohorts = split_cohorts(_pool(make_member), rng)
    for part in (cohorts.large_qualified, cohorts.small_only):
        tiers = [classify_rank(m.rank) for m in part]
        assert tiers == sorted(tiers)


def test_split_by_large_qualification(make_member, rng):
    cohorts = split_cohorts(_pool(make_member), rng)
    assert {m.crew_id for m in cohorts.large_qualified} == {"1", "2", "4", "6", "8"}
    assert {m.crew_id for m in cohorts.small_only} == {"3", "5", "7"}


def test_lookups_cover_the_whole_pool(make_member, rng):
    cohorts = split_cohorts(_pool(make_member), rng)
    assert len(cohorts.tier_by_id) == 8
    assert cohorts.tier_by_id["4"] == SeniorityTier.HIGHER_SENIOR
    assert cohorts.tier_by_id["2"] == SeniorityTier.OTHER
    assert cohorts.order_by_id["8"] == 5


def test_same_seed_same_order(make_member):
    a = split_cohorts(_pool(make_member), random.Random(3))
    b = split_cohorts(_pool(make_member), random.Random(3))
    assert a.large_qualified == b.large_qualified
    assert a.small_only == b.small_only


def test_caller_pool_is_not_reordered(make_member, rng):
    pool = _pool(make_member)
    before = list(pool)
    split_cohorts(pool, rng)
    assert pool == before
