"""
Reshuffle one instance several times and compare the outcomes.

    python scripts/run_reshuffles.py --instance-dir data/sample --runs 20
"""

from __future__ import annotations

import argparse
import csv
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from team_formation.solver.form_instance import form_instance  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--instance-dir", type=Path, default=Path("data/sample"))
    parser.add_argument("--runs", type=int, default=10)
    parser.add_argument("--first-seed", type=int, default=1)
    parser.add_argument("--tag", default="batch_001")
    parser.add_argument("--save-teams", action="store_true")
    args = parser.parse_args()

    out_root = Path("outputs/reshuffles") / args.tag
    out_root.mkdir(parents=True, exist_ok=True)

    results: List[Dict[str, Any]] = []
    for seed in range(args.first_seed, args.first_seed + args.runs):
        res = form_instance(
            args.instance_dir,
            seed=seed,
            save_teams=args.save_teams,
            out_root=Path("outputs"),
            tag=f"{args.tag}/seed_{seed:03d}",
        )
        results.append(res)

    csv_path = out_root / "results.csv"
    fieldnames = [
        "seed",
        "pool_size",
        "seniors",
        "large_requested",
        "large_teams",
        "small_teams",
        "teams_without_senior",
        "unassigned",
        "n_warnings",
        "warning_codes",
        "teams_json",
        "instance_dir",
    ]
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in results:
            w.writerow({k: r.get(k) for k in fieldnames})

    needy = [r["teams_without_senior"] for r in results]
    summary = {
        "tag": args.tag,
        "instance_dir": str(args.instance_dir),
        "n_runs": len(results),
        "runs_fully_covered": sum(1 for n in needy if n == 0),
        "worst_teams_without_senior": max(needy, default=None),
        "best_teams_without_senior": min(needy, default=None),
        "avg_teams_without_senior": (sum(needy) / len(needy)) if needy else None,
        "runs_with_warnings": sum(1 for r in results if r["n_warnings"]),
    }
    (out_root / "summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")

    print(f"Saved: {csv_path}")
    print(f"Saved: {out_root / 'summary.json'}")
    print(f"Fully covered: {summary['runs_fully_covered']}/{summary['n_runs']}")


if __name__ == "__main__":
    main()
