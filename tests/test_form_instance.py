import json

from team_formation.solver.form_instance import form_instance


def _instance(tmp_path, crew, large_team_count=1, seed=None):
    inst = tmp_path / "instance"
    inst.mkdir()
    scenario = {"large_team_count": large_team_count}
    if seed is not None:
        scenario["seed"] = seed
    (inst / "scenario.json").write_text(json.dumps(scenario), encoding="utf-8")
    (inst / "crew.json").write_text(json.dumps({"crew": crew}), encoding="utf-8")
    return inst


def _crew(n, rank="FA - Flight Attendant"):
    return [
        {"crew_id": str(100 + i), "name": f"Crew {i}", "rank": rank, "qualified_types": ["B738", "ATR"]}
        for i in range(n)
    ]


def test_form_instance_writes_teams(tmp_path):
    crew = _crew(2, "LF - Leading Flight Attendant") + _crew(7)[2:]
    inst = _instance(tmp_path, crew, large_team_count=1)

    res = form_instance(inst, seed=3, out_root=tmp_path / "outputs", save_report=True)

    assert res["pool_size"] == 7
    assert res["large_teams"] == 1
    assert res["small_teams"] == 1
    assert res["unassigned"] == 0
    assert res["teams_without_senior"] == 0

    payload = json.loads((tmp_path / "outputs" / "teams" / "teams.json").read_text(encoding="utf-8"))
    assert [t["name"] for t in payload["teams"]] == ["B738 1", "ATR 1"]
    assert payload["warnings"] == []
    assert (tmp_path / "outputs" / "report" / "assignments.csv").exists()


def test_scenario_seed_makes_runs_repeatable(tmp_path):
    inst = _instance(tmp_path, _crew(11), large_team_count=0, seed=8)

    a = form_instance(inst, save_teams=False)
    b = form_instance(inst, save_teams=False)

    assert a["seed"] == 8
    assert [t.member_ids for t in a["result"].teams] == [t.member_ids for t in b["result"].teams]
    assert a["warning_codes"] == "OVERFLOW_UNASSIGNED"
    assert a["precheck_warnings"]


def test_tagged_runs_go_to_their_own_folder(tmp_path):
    inst = _instance(tmp_path, _crew(4), large_team_count=0)
    res = form_instance(inst, seed=1, out_root=tmp_path / "outputs", tag="batch")

    assert res["teams_json"] == str(tmp_path / "outputs" / "reshuffles" / "batch" / "instance" / "teams" / "teams.json")
