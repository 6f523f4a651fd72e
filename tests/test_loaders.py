import json

import pytest

from team_formation.preprocessing.loaders import AllocationConfig, load_config, load_pool
from team_formation.preprocessing.validate_pool import InvalidConfigurationError, validate_pool


def _write(path, obj):
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


def test_load_pool(tmp_path, make_member):
    path = _write(
        tmp_path / "crew.json",
        {
            "crew": [
                {"crew_id": "1", "name": "A", "rank": "SC - Section Chief", "qualified_types": ["B738"]},
                {"crew_id": 2, "name": "B", "rank": "FA - Flight Attendant"},
                {"crew_id": "3", "name": "C", "rank": None, "qualified_types": None},
            ]
        },
    )
    pool = load_pool(path)

    assert [c.crew_id for c in pool] == ["1", "2", "3"]
    assert pool[0].qualified_types == ("B738",)
    assert pool[1].qualified_types == ()
    assert pool[2].rank == ""


def test_load_config(tmp_path):
    cfg = load_config(_write(tmp_path / "scenario.json", {"large_team_count": 3, "seed": 9}))
    assert cfg == AllocationConfig(large_team_count=3, seed=9)

    cfg = load_config(_write(tmp_path / "scenario.json", {}))
    assert cfg.large_team_count == 0
    assert cfg.seed is None


def test_negative_count_in_file(tmp_path):
    with pytest.raises(InvalidConfigurationError):
        load_config(_write(tmp_path / "scenario.json", {"large_team_count": -1}))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_pool(tmp_path / "crew.json")


def test_duplicate_ids_are_rejected(make_member):
    with pytest.raises(ValueError, match="Duplicate"):
        validate_pool([make_member("1"), make_member("1")])


def test_empty_id_is_rejected(make_member):
    with pytest.raises(ValueError):
        validate_pool([make_member("")])
