# ats_keywords/declustering.py
"""
Repair tokens produced when markup/whitespace stripping glues words together,
e.g. "salesforcecrmreporting" -> ["salesforce", "reporting", "crm"].
"""
from __future__ import annotations

import re
from typing import List

from .lexicon import BLACKLIST, SKILLS_LONGEST_FIRST

CLUSTER_MIN_LEN = 15
DECLUSTER_MIN_LEN = 10

_DOTTED_RUN = re.compile(r"[A-Za-z]{4,}\.[A-Za-z]{4,}")
_CAMEL_BOUNDARY = re.compile(r"[a-z]{3,}[A-Z][a-z]{3,}")

# only skills long enough to be meaningful when found inside another word
_CLUSTER_PROBES = tuple(s for s in SKILLS_LONGEST_FIRST if len(s) >= 4)


def looks_clustered(token: str) -> bool:
    if not token or len(token) < CLUSTER_MIN_LEN:
        return False

    lower = token.lower()
    hits = 0
    for skill in _CLUSTER_PROBES:
        if skill in lower:
            hits += 1
            if hits >= 2:
                return True

    if _DOTTED_RUN.search(token):
        return True
    return bool(_CAMEL_BOUNDARY.search(token))


def decluster(token: str) -> List[str]:
    """
    Greedy longest-first dictionary scan. Each matched skill is cut out once
    (replaced by a space so the remainder never fuses into new words); whatever
    is left is kept as plain fragments when long enough and not filler.
    """
    if not token or len(token) < DECLUSTER_MIN_LEN:
        return [token]

    rest = token.lower().replace(".", " ").replace(",", " ")
    found: List[str] = []

    for skill in SKILLS_LONGEST_FIRST:
        idx = rest.find(skill)
        if idx == -1:
            continue
        found.append(skill)
        rest = rest[:idx] + " " + rest[idx + len(skill):]

    leftovers = [
        frag for frag in rest.split() if len(frag) >= 3 and frag not in BLACKLIST
    ]

    out = list(dict.fromkeys(found + leftovers))
    return out or [token]


def decluster_text(text: str) -> str:
    if not text:
        return ""
    out: List[str] = []
    for tok in text.split():
        if looks_clustered(tok):
            out.extend(decluster(tok))
        else:
            out.append(tok)
    return " ".join(out)
