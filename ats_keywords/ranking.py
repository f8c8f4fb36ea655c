# ats_keywords/ranking.py
from __future__ import annotations

import math
from typing import Iterable, List

from .config import (
    HIGH_PRIORITY_MAX,
    HIGH_PRIORITY_RATIO,
    MEDIUM_PRIORITY_MAX,
    MEDIUM_PRIORITY_RATIO,
)
from .models import CategorizedResult
from .rules import is_high_value_keyword


def sort_by_priority(keywords: List[str], learned: Iterable[str] = ()) -> List[str]:
    """High-value first, then longer (more specific) first. Stable."""
    return sorted(
        keywords,
        key=lambda kw: (not is_high_value_keyword(kw, learned), -len(kw)),
    )


def categorize_keywords(keywords: List[str]) -> CategorizedResult:
    keywords = list(keywords or [])
    total = len(keywords)
    high = min(HIGH_PRIORITY_MAX, math.ceil(total * HIGH_PRIORITY_RATIO))
    medium = min(MEDIUM_PRIORITY_MAX, math.ceil(total * MEDIUM_PRIORITY_RATIO))
    return CategorizedResult(
        all=keywords,
        high_priority=keywords[:high],
        medium_priority=keywords[high : high + medium],
        low_priority=keywords[high + medium :],
        total=total,
    )
