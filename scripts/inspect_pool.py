from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from team_formation.preprocessing.config_check import check_configuration, expected_small_team_count
from team_formation.preprocessing.eligibility import compute_eligibility
from team_formation.preprocessing.loaders import load_config, load_pool
from team_formation.preprocessing.pool import sort_pool
from team_formation.preprocessing.ranks import classify_rank, rank_shorthand
from team_formation.preprocessing.validate_pool import validate_pool


DEFAULT_INSTANCE_DIR = Path("data/sample")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--instance-dir",
        type=Path,
        default=DEFAULT_INSTANCE_DIR,
        help="Path to instance folder (default: data/sample)",
    )
    args = parser.parse_args()

    inst = args.instance_dir

    config = load_config(inst / "scenario.json")
    pool = load_pool(inst / "crew.json")
    validate_pool(pool)

    print(f"Pool size: {len(pool)}")
    print("Pool by tier:", dict(Counter(classify_rank(c.rank).name for c in pool)))
    print("Pool by rank:", dict(Counter(rank_shorthand(c.rank) for c in pool)))

    eligible = compute_eligibility(pool)
    by_type = Counter(t for (_, t), ok in eligible.items() if ok)
    print("Qualified per aircraft type:", dict(by_type))

    print(f"Large teams requested: {config.large_team_count}")
    print(f"Small teams expected: {expected_small_team_count(len(pool), config.large_team_count)}")

    for w in check_configuration(pool, config):
        print(f"WARNING [{w.code.value}] {w.message}")

    print("\nPool (display order):")
    for c in sort_pool(pool):
        print(f"  {c.crew_id:>8}  {rank_shorthand(c.rank):<3} {c.name}  {list(c.qualified_types)}")


if __name__ == "__main__":
    main()
