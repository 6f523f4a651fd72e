from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import pandas as pd

from team_formation.domain.seniority import TIER_PRIORITY, SeniorityTier
from team_formation.domain.team import AllocationResult
from team_formation.preprocessing.pool import display_members, team_leader
from team_formation.preprocessing.ranks import classify_rank, rank_shorthand


TIER_COLORS = {
    SeniorityTier.HIGHER_SENIOR: "#d62728",  # red
    SeniorityTier.SENIOR: "#ff7f0e",         # orange
    SeniorityTier.JUNIOR: "#2ca02c",         # green
    SeniorityTier.OTHER: "#c7c7c7",          # light grey
}
TIER_COLUMNS = [t.name.lower() for t in TIER_PRIORITY]


@dataclass(frozen=True)
class ReportFrames:
    assignments: pd.DataFrame
    composition: pd.DataFrame
    warnings: pd.DataFrame


def build_report_frames(
    result: AllocationResult,
    tier_by_id: Dict[str, SeniorityTier],
) -> ReportFrames:
    def tier_of(m):
        return tier_by_id.get(m.crew_id, classify_rank(m.rank))

    # --- Assignments (one row per placed member, display order) ---
    rows = []
    for team in result.teams:
        leader = team_leader(team, tier_of)
        for pos, m in enumerate(display_members(team), start=1):
            rows.append(
                {
                    "team_id": team.team_id,
                    "team": team.name,
                    "aircraft_type": team.aircraft_type.value,
                    "position": pos,
                    "crew_id": m.crew_id,
                    "name": m.name,
                    "rank": rank_shorthand(m.rank),
                    "tier": tier_of(m).name.lower(),
                    "is_leader": leader is not None and leader.crew_id == m.crew_id,
                }
            )
    for m in result.unassigned:
        rows.append(
            {
                "team_id": None,
                "team": "unassigned",
                "aircraft_type": None,
                "position": None,
                "crew_id": m.crew_id,
                "name": m.name,
                "rank": rank_shorthand(m.rank),
                "tier": tier_of(m).name.lower(),
                "is_leader": False,
            }
        )
    assignments = pd.DataFrame(
        rows,
        columns=["team_id", "team", "aircraft_type", "position", "crew_id",
                 "name", "rank", "tier", "is_leader"],
    )

    # --- Tier composition (team x tier counts) ---
    comp_rows = []
    for team in result.teams:
        counts = {col: 0 for col in TIER_COLUMNS}
        for m in team.members:
            counts[tier_of(m).name.lower()] += 1
        comp_rows.append(
            {
                "team_id": team.team_id,
                "team": team.name,
                "aircraft_type": team.aircraft_type.value,
                "size": team.size,
                **counts,
            }
        )
    composition = pd.DataFrame(
        comp_rows,
        columns=["team_id", "team", "aircraft_type", "size", *TIER_COLUMNS],
    )
    composition["seniors"] = composition["higher_senior"] + composition["senior"]

    warnings = pd.DataFrame(
        [
            {"code": w.code.value, "message": w.message, "crew_ids": ";".join(w.crew_ids)}
            for w in result.warnings
        ],
        columns=["code", "message", "crew_ids"],
    )

    return ReportFrames(assignments=assignments, composition=composition, warnings=warnings)


def plot_tier_composition(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    comp = frames.composition
    labels = comp["team"].tolist()
    bottom = np.zeros(len(comp))

    fig, ax = plt.subplots(figsize=(12, 6))
    for tier, col in zip(TIER_PRIORITY, TIER_COLUMNS):
        values = comp[col].to_numpy(dtype=float)
        ax.bar(labels, values, bottom=bottom, color=TIER_COLORS[tier])
        bottom += values

    ax.set_title("Seniority Mix per Team", fontsize=16, fontweight="bold")
    ax.set_xlabel("Team", fontsize=12)
    ax.set_ylabel("Crew", fontsize=12)
    ax.tick_params(axis="x", labelsize=11, rotation=45)

    ax.yaxis.grid(True, linestyle="--", linewidth=0.6, alpha=0.4)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    legend_patches = [
        mpatches.Patch(color=TIER_COLORS[t], label=t.name.replace("_", " ").title())
        for t in TIER_PRIORITY
    ]
    ax.legend(
        handles=legend_patches,
        fontsize=11,
        loc="upper left",
        bbox_to_anchor=(1.02, 1),
        borderaxespad=0,
    )

    plt.tight_layout()
    plt.savefig(out_dir / "tier_composition.png", dpi=200, bbox_inches="tight")
    plt.close(fig)


def plot_team_sizes(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    comp = frames.composition
    colors = np.where(comp["seniors"].to_numpy() > 0, "#2ca02c", "#d62728")

    plt.figure(figsize=(12, 6))
    plt.bar(comp["team"], comp["size"], color=colors)
    plt.xlabel("Team")
    plt.ylabel("Members")
    plt.title(
        f"Team sizes ({int((comp['seniors'] == 0).sum())} of {len(comp)} teams without a senior)"
    )
    plt.tight_layout()
    plt.savefig(out_dir / "team_sizes.png", dpi=160)
    plt.close()


def save_plots(frames: ReportFrames, out_dir: Path) -> None:
    plot_tier_composition(frames, out_dir)
    plot_team_sizes(frames, out_dir)


def save_tables(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    frames.assignments.to_csv(out_dir / "assignments.csv", index=False)
    frames.composition.to_csv(out_dir / "composition.csv", index=False)
    frames.warnings.to_csv(out_dir / "warnings.csv", index=False)
