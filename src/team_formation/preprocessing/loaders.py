from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from team_formation.domain.crew import CrewMember
from team_formation.preprocessing.validate_pool import validate_large_team_count


@dataclass(frozen=True)
class AllocationConfig:
    """
    Requested team mix for one "form teams" request.

    Only the large-type team count is configured; the number of small-type
    teams follows from the pool size.
    """
    large_team_count: int = 0
    seed: Optional[int] = None  # file-driven runs only

    def __post_init__(self) -> None:
        validate_large_team_count(self.large_team_count)


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_pool(path: Path) -> List[CrewMember]:
    obj = _read_json(path)
    crew_list = obj.get("crew", [])
    return [
        CrewMember(
            crew_id=str(c["crew_id"]),
            name=c.get("name", ""),
            rank=c.get("rank") or "",
            qualified_types=tuple(c.get("qualified_types") or ()),
        )
        for c in crew_list
    ]


def load_config(path: Path) -> AllocationConfig:
    obj = _read_json(path)
    seed = obj.get("seed")
    return AllocationConfig(
        large_team_count=obj.get("large_team_count", 0),
        seed=int(seed) if seed is not None else None,
    )
