"""
Keyword-vs-document matching.

A keyword counts as present only when the exact sequence appears in the
document with a word boundary on both ends (case-insensitive). Phrases are not
matched as a bag of words.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .models import MatchResult


def _percent(part: int, whole: int) -> int:
    # half up: 1 of 8 is 13, not 12
    return int(100 * part / whole + 0.5)


def keyword_regex(keyword: str) -> re.Pattern:
    return re.compile(r"(?<!\w)" + re.escape(keyword.strip()) + r"(?!\w)", re.I)


def match_keywords(document: str, keywords: Optional[List[str]]) -> MatchResult:
    """
    Score a document (CV text) against a keyword list.

    Args:
        document: Candidate document text.
        keywords: Keywords to look for, usually CategorizedResult.all. Blank and
            non-string entries are dropped first; every count in the result
            (total_keywords, matched + missing) refers to the remaining list.

    Returns:
        MatchResult with matched/missing lists in input order and a 0-100
        score rounded half up (0 when there are no keywords).
    """
    keywords = [k for k in (keywords or []) if isinstance(k, str) and k.strip()]
    if not keywords:
        return MatchResult()

    if not document or not isinstance(document, str):
        return MatchResult(missing=keywords, total_keywords=len(keywords))

    matched: List[str] = []
    missing: List[str] = []
    for kw in keywords:
        if keyword_regex(kw).search(document):
            matched.append(kw)
        else:
            missing.append(kw)

    return MatchResult(
        matched=matched,
        missing=missing,
        match_score=_percent(len(matched), len(keywords)),
        match_count=len(matched),
        total_keywords=len(keywords),
    )
