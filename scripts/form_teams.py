from __future__ import annotations

import argparse
import logging
from pathlib import Path

from team_formation.preprocessing.pool import display_members, team_leader
from team_formation.preprocessing.ranks import rank_shorthand
from team_formation.solver.form_instance import form_instance


DEFAULT_INSTANCE_DIR = Path("data/sample")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--instance-dir", type=Path, default=DEFAULT_INSTANCE_DIR)
    parser.add_argument("--seed", type=int, default=None, help="Fix the shuffle (default: reshuffle every run)")
    parser.add_argument("--report", action="store_true", help="Also write CSV tables and plots")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    res = form_instance(args.instance_dir, seed=args.seed, save_report=args.report)
    result = res["result"]

    if res["precheck_warnings"]:
        print("\nConfiguration warnings:")
        for w in res["precheck_warnings"]:
            print(f"  {w}")

    print(f"\nTeams ({len(result.teams)})")
    for team in result.teams:
        leader = team_leader(team)
        names = [
            f"{'*' if leader is not None and m.crew_id == leader.crew_id else ''}"
            f"{rank_shorthand(m.rank)} {m.name} ({m.crew_id})"
            for m in display_members(team)
        ]
        print(f"  {team.name} [{team.size}]: " + ", ".join(names))

    if result.warnings:
        print("\nWarnings")
        for w in result.warnings:
            print(f"  [{w.code.value}] {w.message}")

    print("\nKPIs")
    for k in ["pool_size", "seniors", "large_requested", "large_teams", "small_teams",
              "teams_without_senior", "unassigned"]:
        print(f"  {k}: {res[k]}")

    print("\nOutputs")
    print(f"  teams_json: {res.get('teams_json')}")
    if "report_dir" in res:
        print(f"  report_dir: {res['report_dir']}")


if __name__ == "__main__":
    main()
