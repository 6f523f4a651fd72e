from team_formation.domain.warnings import WarningCode
from team_formation.preprocessing.config_check import check_configuration, expected_small_team_count
from team_formation.preprocessing.loaders import AllocationConfig

from conftest import ATR_ONLY


def _codes(pool, n):
    return [w.code for w in check_configuration(pool, AllocationConfig(n))]


def test_empty_pool_has_nothing_to_report():
    assert _codes([], 2) == []


def test_odd_pool_without_large_teams(make_member):
    pool = [make_member(str(i)) for i in range(5)]
    assert _codes(pool, 0) == [WarningCode.ODD_POOL_FOR_SMALL_TYPE]
    assert _codes(pool[:4], 0) == []


def test_not_enough_qualified_crew(make_member):
    pool = [make_member(str(i)) for i in range(6)] + [make_member(f"a{i}", types=ATR_ONLY) for i in range(4)]
    assert _codes(pool, 2) == [WarningCode.INSUFFICIENT_POOL_FOR_LARGE_TYPE_COUNT]


def test_odd_overflow_beyond_large_capacity(make_member):
    pool = [make_member(str(i)) for i in range(9)]
    assert _codes(pool, 1) == [WarningCode.ODD_POOL_FOR_SMALL_TYPE]
    assert _codes(pool[:8], 1) == []


def test_warning_messages_are_readable(make_member):
    pool = [make_member(str(i)) for i in range(3)]
    (w,) = check_configuration(pool, AllocationConfig(1))
    assert "B738" in str(w)
    assert "3" in str(w)


def test_expected_small_team_count():
    assert expected_small_team_count(10, 2) == 1
    assert expected_small_team_count(9, 0) == 5
    assert expected_small_team_count(3, 1) == 0
