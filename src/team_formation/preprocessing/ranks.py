from __future__ import annotations

import re
from typing import List, Optional, Tuple, Union

from team_formation.domain.crew import CrewMember
from team_formation.domain.seniority import SeniorityTier

UNRANKED_ORDER = 999

# (abbreviation, keyword, order). Both must appear in the label.
HIGHER_SENIOR_MARKERS: List[Tuple[str, str, int]] = [
    ("mg", "manager", 1),
    ("sc", "section", 2),
    ("fi", "instructor", 3),
    ("pr", "purser", 4),
]
SENIOR_MARKERS: List[Tuple[str, str, int]] = [
    ("lf", "leading", 5),
]
SHORTHAND_CODES = ("MG", "SC", "FI", "PR", "LF", "FS", "FA")


def _matches(label: str, abbreviation: str, keyword: str) -> bool:
    return abbreviation in label and keyword in label


def _is_stewardess(label: str) -> bool:
    return _matches(label, "fs", "stewardess")


def _is_attendant(label: str) -> bool:
    return _matches(label, "fa", "attendant") and "leading" not in label


def classify_rank(rank: Optional[str]) -> SeniorityTier:
    """
    Map a free-text rank label to a seniority tier.

    Matching is case-insensitive and needs both the abbreviation and the
    descriptive keyword, e.g. "SC - Section Chief". Unknown labels fall
    back to OTHER.
    """
    if not rank:
        return SeniorityTier.OTHER
    label = rank.lower()

    if any(_matches(label, a, k) for a, k, _ in HIGHER_SENIOR_MARKERS):
        return SeniorityTier.HIGHER_SENIOR
    if any(_matches(label, a, k) for a, k, _ in SENIOR_MARKERS):
        return SeniorityTier.SENIOR
    if _is_stewardess(label) or _is_attendant(label):
        return SeniorityTier.JUNIOR
    return SeniorityTier.OTHER


def rank_order(rank: Optional[str]) -> int:
    """Numeric display order for a rank label (1 = most senior)."""
    if not rank:
        return UNRANKED_ORDER
    label = rank.lower()

    for abbreviation, keyword, order in HIGHER_SENIOR_MARKERS + SENIOR_MARKERS:
        if _matches(label, abbreviation, keyword):
            return order
    if _is_stewardess(label) or _is_attendant(label):
        return 6
    return UNRANKED_ORDER


def rank_shorthand(rank: Optional[str]) -> str:
    """Short rank code for badges, e.g. "SC"; falls back to the label prefix."""
    if not rank:
        return ""
    for code in SHORTHAND_CODES:
        if code in rank:
            return code
    return rank.split(" - ")[0] or rank[:2]


def natural_key(text: str) -> Tuple[Union[int, str], ...]:
    """
    Numeric-aware sort key: "9" < "10", "A2" < "A10".
    """
    parts = re.split(r"(\d+)", text)
    key: List[Union[int, str]] = []
    for i, part in enumerate(parts):
        # re.split with a capture group puts digits at odd positions
        key.append(int(part) if i % 2 else part.lower())
    return tuple(key)


def member_sort_key(member: CrewMember) -> Tuple[int, Tuple[Union[int, str], ...]]:
    return rank_order(member.rank), natural_key(member.crew_id)
