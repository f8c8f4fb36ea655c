# ats_keywords/sections.py
"""
Bundled job-description parser: markup stripping, heading-based section split,
structure classification and a cache facade. The engine only relies on the
interface (get_cache_key / get_cached / set_cache / process_any_job_description
and KEYWORD_CACHE), so hosts can swap in their own parser.
"""
from __future__ import annotations

import hashlib
import html
import re
from typing import Dict, List, Optional, Tuple, Any

from .cache import KeyedCache
from .lexicon import BULLET_LINE
from .models import ParsedJobDescription

# Canonical buckets, checked in order
SECTION_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = (
    (
        "skills",
        re.compile(
            r"(?i)^(skills|technical\s+skills|key\s+skills|core\s+skills|"
            r"tech(?:nical)?\s+stack|technologies|tools(?:\s+(?:&|and)\s+technologies)?)\b"
        ),
    ),
    (
        "qualifications",
        # before "requirements" so "minimum qualifications" is not swallowed
        re.compile(
            r"(?i)^((?:minimum|basic|preferred|desired)\s+qualifications|qualifications|"
            r"nice\s+to\s+haves?|bonus\s+points|preferred)\b"
        ),
    ),
    (
        "requirements",
        re.compile(
            r"(?i)^(requirements|job\s+requirements|must[\s\-]haves?|"
            r"what\s+you(?:'ll|\s+will)?\s+need|what\s+we(?:'re|\s+are)\s+looking\s+for|"
            r"who\s+you\s+are|you\s+have)\b"
        ),
    ),
    (
        "responsibilities",
        re.compile(
            r"(?i)^(responsibilities|key\s+responsibilities|duties|"
            r"what\s+you(?:'ll|\s+will)\s+do|your\s+role|the\s+role|day[\s\-]to[\s\-]day)\b"
        ),
    ),
    (
        "about",
        re.compile(
            r"(?i)^(about\s+(?:us|the\s+company|the\s+team|the\s+role)|about|"
            r"who\s+we\s+are|company\s+overview|overview)\b"
        ),
    ),
)

SECTION_KEYS: Tuple[str, ...] = tuple(k for k, _ in SECTION_PATTERNS) + ("other",)

_HEADING_DECOR = re.compile(r"^[#*_\s]+|[*_\s]+$")


def _match_heading(line: str, pat: re.Pattern) -> Optional[str]:
    """
    A line is a heading only if:
      - it matches at the beginning, AND
      - the rest of the line is empty OR starts with a delimiter (: - – —).
    Returns the tail text after the delimiter ('Skills: Python, SQL' -> 'Python, SQL'),
    "" if no tail, or None if not a heading.
    """
    m = pat.match(line)
    if not m:
        return None

    rest = line[m.end() :]
    if rest:
        if not re.match(r"^\s*[:\-–—]\s*", rest):
            return None
        rest = re.sub(r"^\s*[:\-–—]\s*", "", rest)

    return rest.strip()


def split_sections(text: str) -> Dict[str, str]:
    """
    Splits job-description text into sections by headings.
    Lines before the first heading, and under unknown headings, land in "other".
    Only non-empty sections are returned.
    """
    buckets: Dict[str, List[str]] = {k: [] for k in SECTION_KEYS}
    current = "other"

    for raw in (text or "").splitlines():
        line = _HEADING_DECOR.sub("", raw.strip())
        if not line:
            continue

        switched = False
        for key, pat in SECTION_PATTERNS:
            tail = _match_heading(line, pat)
            if tail is None:
                continue

            current = key
            switched = True
            if tail:
                buckets[current].append(tail)
            break

        if switched:
            continue

        buckets[current].append(raw.strip())

    return {k: "\n".join(v).strip() for k, v in buckets.items() if v}


# ----- markup ------------------------------------------------------------------

_SCRIPT_STYLE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.I | re.S)
_LIST_ITEM = re.compile(r"<li\b[^>]*>", re.I)
_BLOCK_TAG = re.compile(
    r"</?(?:br|p|div|ul|ol|li|h[1-6]|tr|table|section|article|header|footer)\b[^>]*>",
    re.I,
)
_ANY_TAG = re.compile(r"<[^>]+>")


def strip_markup(raw: str) -> str:
    """HTML -> plain text. List items become '- ' lines, block tags become newlines."""
    if not raw:
        return ""
    s = _SCRIPT_STYLE.sub(" ", raw)
    s = _LIST_ITEM.sub("\n- ", s)
    s = _BLOCK_TAG.sub("\n", s)
    s = _ANY_TAG.sub("", s)
    s = html.unescape(s).replace("\xa0", " ").replace("\ufeff", "")
    lines = [re.sub(r"[ \t\f\v]+", " ", ln).strip() for ln in s.splitlines()]
    return "\n".join(ln for ln in lines if ln)


# ----- structure ---------------------------------------------------------------

_DELIMS = re.compile(r"[,;|/]")
_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")


def classify_structure(text: str, sections: Optional[Dict[str, str]] = None) -> str:
    """One of: sections, bullets, phrases, narrative, unstructured."""
    lines = [ln for ln in (text or "").splitlines() if ln.strip()]
    if not lines:
        return "unstructured"

    named = [k for k in (sections or {}) if k != "other" and (sections or {})[k]]
    if len(named) >= 2:
        return "sections"

    bullets = sum(1 for ln in lines if BULLET_LINE.match(ln))
    if bullets >= 3 and bullets >= 0.3 * len(lines):
        return "bullets"

    words = text.split()
    parts = [p for p in re.split(r"[,;|/\n]+", text) if p.strip()]
    if words and len(parts) >= 4:
        avg_part = len(words) / len(parts)
        if avg_part <= 3 and len(_DELIMS.findall(text)) / len(words) >= 0.3:
            return "phrases"

    sentences = [s for s in _SENTENCE_SPLIT.split(text) if len(s.split()) >= 8]
    if len(sentences) >= 2:
        return "narrative"

    return "unstructured"


# ----- parser facade -----------------------------------------------------------


class JobDescriptionParser:
    KEYWORD_CACHE = "keywords"
    PARSE_CACHE = "parsed"

    def __init__(self, cache: Optional[KeyedCache] = None):
        self.cache = cache if cache is not None else KeyedCache()

    @staticmethod
    def get_cache_key(raw_text: str) -> str:
        return hashlib.sha256((raw_text or "").encode("utf-8")).hexdigest()

    def get_cached(self, key: str, region: str) -> Any:
        return self.cache.get_cached(key, region)

    def set_cache(self, key: str, value: Any, region: str) -> None:
        self.cache.set_cache(key, value, region)

    def process_any_job_description(self, raw_text: str) -> ParsedJobDescription:
        key = self.get_cache_key(raw_text)
        hit = self.get_cached(key, self.PARSE_CACHE)
        if hit is not None:
            return hit

        text = strip_markup(raw_text)
        sections = split_sections(text)
        parsed = ParsedJobDescription(
            text=text,
            structure=classify_structure(text, sections),
            sections=sections,
        )
        self.set_cache(key, parsed, self.PARSE_CACHE)
        return parsed
