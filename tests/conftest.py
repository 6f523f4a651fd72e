from __future__ import annotations

import random

import matplotlib

matplotlib.use("Agg")

import pytest

from team_formation.domain.crew import CrewMember

BOTH = ("B738", "ATR")
ATR_ONLY = ("ATR",)

RANKS = {
    "MG": "MG - Manager",
    "SC": "SC - Section Chief",
    "FI": "FI - Flight Instructor",
    "PR": "PR - Purser",
    "LF": "LF - Leading Flight Attendant",
    "FS": "FS - Flight Stewardess",
    "FA": "FA - Flight Attendant",
    "OT": "Trainee",
}


def member(crew_id: str, rank: str = "FA", types=BOTH, name: str | None = None) -> CrewMember:
    return CrewMember(
        crew_id=crew_id,
        name=name or f"Crew {crew_id}",
        rank=RANKS.get(rank, rank),
        qualified_types=tuple(types),
    )


@pytest.fixture
def make_member():
    return member


@pytest.fixture
def rng() -> random.Random:
    return random.Random(7)
