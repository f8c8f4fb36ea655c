# ats_keywords/rules.py
from __future__ import annotations

import re
from typing import Iterable

from .declustering import looks_clustered
from .lexicon import BLACKLIST, HIGH_VALUE_PATTERNS, PHRASE_SET, SKILL_DICTIONARY

MIN_KEYWORD_LEN = 3
MAX_KEYWORD_LEN = 30

KEYWORD_SHAPE = re.compile(r"^[A-Za-z][A-Za-z0-9\-\+\#\.\s]*[A-Za-z0-9]?$")
DIGITS_ONLY = re.compile(r"^\d+$")


def norm(s: str) -> str:
    """Lowercase, trim and collapse inner whitespace."""
    return re.sub(r"\s+", " ", (s or "").strip()).lower()


def is_reliable_keyword(token) -> bool:
    """
    Admissibility check for a single token or phrase.

    Rejects:
      - non-str / empty input
      - normalized length outside [3, 30]
      - shape other than "letter first, then alnum and - + # . space"
      - blacklisted words
      - pure numbers
      - tokens that look like several words glued together
    """
    if not token or not isinstance(token, str):
        return False

    normalized = norm(token)
    if len(normalized) < MIN_KEYWORD_LEN or len(normalized) > MAX_KEYWORD_LEN:
        return False

    if not KEYWORD_SHAPE.match(token.strip()):
        return False

    if normalized in BLACKLIST:
        return False

    if DIGITS_ONLY.match(normalized):
        return False

    if looks_clustered(token.strip()):
        return False

    return True


def matches_high_value_pattern(token: str) -> bool:
    lower = (token or "").lower()
    return any(pat.search(lower) for pat in HIGH_VALUE_PATTERNS.values())


def is_high_value_keyword(token, learned: Iterable[str] = ()) -> bool:
    """
    True when the token hits a curated category pattern, is a dictionary skill,
    equals a library phrase, or has been learned at runtime.
    """
    if not token or not isinstance(token, str):
        return False
    if matches_high_value_pattern(token):
        return True
    key = norm(token)
    if key in SKILL_DICTIONARY or key in PHRASE_SET:
        return True
    return key in learned
