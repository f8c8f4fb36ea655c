# ats_keywords/reconcile.py
from __future__ import annotations

from typing import Iterable, List


def dedupe_keep_order(items: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for s in items:
        if not isinstance(s, str):
            continue
        key = s.strip().lower()
        if key and key not in seen:
            seen.add(key)
            out.append(s.strip())
    return out


def merge_keywords(*groups: Iterable[str]) -> List[str]:
    """Concatenate keyword groups, first occurrence wins."""
    merged: List[str] = []
    for g in groups:
        merged.extend(g or [])
    return dedupe_keep_order(merged)
