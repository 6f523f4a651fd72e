from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Dict, Optional

from team_formation.domain.team import AircraftType
from team_formation.model.fairness import needy_teams
from team_formation.preprocessing.config_check import check_configuration
from team_formation.preprocessing.loaders import load_config, load_pool
from team_formation.preprocessing.ranks import classify_rank
from team_formation.preprocessing.validate_pool import validate_pool
from team_formation.solver.allocate import allocate_teams, to_training_groups
from team_formation.visualization.report import build_report_frames, save_plots, save_tables


def form_instance(
    instance_dir: Path,
    *,
    seed: Optional[int] = None,
    save_teams: bool = True,
    save_report: bool = False,
    out_root: Path = Path("outputs"),
    tag: str | None = None,
) -> Dict[str, Any]:
    """
    Form teams for one instance directory and return KPIs + output paths.

    `seed` overrides the scenario's seed; with neither, every run reshuffles.

    If tag is provided, outputs go to:
      outputs/reshuffles/<tag>/<instance_name>/
    otherwise:
      outputs/teams/ and outputs/report/
    """
    instance_dir = instance_dir.resolve()
    config = load_config(instance_dir / "scenario.json")
    pool = load_pool(instance_dir / "crew.json")
    validate_pool(pool)

    pre_warnings = check_configuration(pool, config)

    if seed is None:
        seed = config.seed
    rng = random.Random(seed) if seed is not None else None

    result = allocate_teams(pool, config, rng)

    tier_by_id = {c.crew_id: classify_rank(c.rank) for c in pool}
    seniors = sum(1 for t in tier_by_id.values() if t.is_senior_or_above)

    inst_name = instance_dir.name
    base_out = out_root / "reshuffles" / tag / inst_name if tag else out_root

    kpis: Dict[str, Any] = {
        "instance_dir": str(instance_dir),
        "instance_name": inst_name,
        "seed": seed,
        "pool_size": len(pool),
        "seniors": seniors,
        "large_requested": config.large_team_count,
        "large_teams": len(result.teams_of(AircraftType.LARGE)),
        "small_teams": len(result.teams_of(AircraftType.SMALL)),
        "teams_without_senior": len(needy_teams(result.teams, tier_by_id)),
        "unassigned": len(result.unassigned),
        "n_warnings": len(result.warnings),
        "warning_codes": ";".join(w.code.value for w in result.warnings),
        "precheck_warnings": [str(w) for w in pre_warnings],
        "result": result,
    }

    if save_teams:
        teams_dir = base_out / "teams"
        teams_dir.mkdir(parents=True, exist_ok=True)
        payload = {
            "instance_dir": str(instance_dir),
            "seed": seed,
            "config": {"large_team_count": config.large_team_count},
            "precheck": [
                {"code": w.code.value, "message": w.message} for w in pre_warnings
            ],
            "teams": to_training_groups(result.teams),
            "warnings": [
                {"code": w.code.value, "message": w.message, "crew_ids": list(w.crew_ids)}
                for w in result.warnings
            ],
        }
        out_path = teams_dir / "teams.json"
        out_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        kpis["teams_json"] = str(out_path)

    if save_report:
        rep_dir = base_out / "report"
        frames = build_report_frames(result, tier_by_id)
        save_tables(frames, rep_dir)
        save_plots(frames, rep_dir)
        kpis["report_dir"] = str(rep_dir)

    return kpis
