from __future__ import annotations

from typing import Sequence

from team_formation.domain.crew import CrewMember


class InvalidConfigurationError(ValueError):
    """Raised when the requested team mix violates the caller contract."""


def validate_large_team_count(large_team_count: object) -> None:
    if isinstance(large_team_count, bool) or not isinstance(large_team_count, int):
        raise InvalidConfigurationError(
            f"large_team_count must be an integer, got {large_team_count!r}"
        )
    if large_team_count < 0:
        raise InvalidConfigurationError(
            f"large_team_count must be >= 0, got {large_team_count}"
        )


def validate_pool(pool: Sequence[CrewMember]) -> None:
    ids = [c.crew_id for c in pool]
    if len(set(ids)) != len(ids):
        raise ValueError("Duplicate crew_id found in crew pool")

    for c in pool:
        if not c.crew_id:
            raise ValueError(f"Empty crew_id for crew member {c.name!r}")
