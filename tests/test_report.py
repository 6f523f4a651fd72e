import random

from team_formation.preprocessing.ranks import classify_rank
from team_formation.solver.allocate import allocate_teams
from team_formation.visualization.report import build_report_frames, save_plots, save_tables

from conftest import ATR_ONLY, member


def _allocation():
    pool = [
        member("1", "SC"), member("2", "LF"), member("3", "FA"), member("4", "FA"),
        member("5", "FS"), member("6", "FA", ATR_ONLY), member("7", "OT", ATR_ONLY),
    ]
    result = allocate_teams(pool, 1, random.Random(5))
    return pool, result, {m.crew_id: classify_rank(m.rank) for m in pool}


def test_frames_describe_every_member():
    pool, result, tiers = _allocation()
    frames = build_report_frames(result, tiers)

    assert sorted(frames.assignments["crew_id"]) == sorted(m.crew_id for m in pool)
    assert (frames.composition["size"] == frames.composition[
        ["higher_senior", "senior", "junior", "other"]
    ].sum(axis=1)).all()
    assert frames.assignments.groupby("team_id")["is_leader"].sum().eq(1).all()
    assert list(frames.warnings["code"]) == [w.code.value for w in result.warnings]


def test_save_tables_and_plots(tmp_path):
    _, result, tiers = _allocation()
    frames = build_report_frames(result, tiers)

    save_tables(frames, tmp_path)
    save_plots(frames, tmp_path)

    for name in ["assignments.csv", "composition.csv", "warnings.csv",
                 "tier_composition.png", "team_sizes.png"]:
        assert (tmp_path / name).exists()
