# ats_keywords/phrases.py
from __future__ import annotations

from typing import Iterable, List

from .lexicon import PHRASES_LONGEST_FIRST


def extract_known_phrases(text: str, learned: Iterable[str] = ()) -> List[str]:
    """
    Literal substring detection of library phrases (longest first, so
    "customer success manager" is seen before "customer success"), followed by
    previously learned keywords in store order.
    """
    if not text or not isinstance(text, str):
        return []

    lower = text.lower()
    found: List[str] = []
    seen: set[str] = set()

    for phrase in PHRASES_LONGEST_FIRST:
        if phrase in lower and phrase not in seen:
            seen.add(phrase)
            found.append(phrase)

    for kw in learned:
        if kw and kw not in seen and kw in lower:
            seen.add(kw)
            found.append(kw)

    return found
