from team_formation.domain.team import AircraftType
from team_formation.preprocessing.eligibility import can_crew, compute_eligibility


def test_rated_member(make_member):
    m = make_member("1", types=("B738",))
    assert can_crew(m, AircraftType.LARGE)
    assert not can_crew(m, AircraftType.SMALL)


def test_unrated_member_is_small_type_only(make_member):
    m = make_member("1", types=())
    assert can_crew(m, AircraftType.SMALL)
    assert not can_crew(m, AircraftType.LARGE)


def test_compute_eligibility(make_member):
    pool = [make_member("1", types=("ATR",)), make_member("2", types=())]
    eligible = compute_eligibility(pool)
    assert eligible == {
        ("1", "B738"): False,
        ("1", "ATR"): True,
        ("2", "B738"): False,
        ("2", "ATR"): True,
    }
