# ats_keywords/extractor.py
from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Any, Callable, Dict, List, Mapping, Optional

from .config import (
    KEYWORD_CACHE_SUFFIX,
    LEARNED_DB_PATH,
    LEARNING_ENABLED,
    MAX_KEYWORDS,
    MAX_STRUCTURE_KEYWORDS,
    SECONDARY_SECTION_LIMIT,
)
from .declustering import decluster_text, looks_clustered
from .learning import (
    FlushPolicy,
    LearnedKeywordStore,
    MemoryStorage,
    RandomFlushPolicy,
    SqliteStorage,
)
from .lexicon import (
    AUXILIARY_PATTERNS,
    BULLET_LINE,
    BULLET_MARKER,
    HIGH_VALUE_PATTERNS,
    NARRATIVE_CUES,
    SKILL_DICTIONARY,
)
from .models import CategorizedResult, ParsedJobDescription
from .phrases import extract_known_phrases
from .ranking import categorize_keywords, sort_by_priority
from .reconcile import dedupe_keep_order, merge_keywords
from .rules import is_high_value_keyword, is_reliable_keyword, matches_high_value_pattern
from .sections import JobDescriptionParser, strip_markup

logger = logging.getLogger(__name__)

PRIORITY_SECTIONS = ("skills", "requirements", "qualifications")
SECONDARY_SECTIONS = ("responsibilities", "about", "other")

_TOKEN_JUNK = re.compile(r"[^A-Za-z0-9\-\+\#\.]")
_FREQ_JUNK = re.compile(r"[^a-z0-9\-\+\#]")
_PHRASE_DELIMS = re.compile(r"[,;|/\n]+|\bor\b")

MIN_LEARN_LEN = 4


def _clean_token(word: str) -> str:
    # keep tech punctuation (+ # . -) but drop a trailing sentence period
    return _TOKEN_JUNK.sub("", word).rstrip(".")


def frequency_fallback(text: str) -> List[str]:
    """
    Frequency ranking for unstructured text. Ties keep first-seen order.
    Learned keywords and the skill dictionary are not consulted here.
    """
    if not text or not isinstance(text, str):
        return []
    counts: Counter = Counter()
    for word in text.lower().split():
        clean = _FREQ_JUNK.sub("", word)
        if is_reliable_keyword(clean):
            counts[clean] += 1
    return [w for w, _ in counts.most_common()]


def extract_phrases(text: str) -> List[str]:
    """Phrase-dump text ("SQL, Python | AWS / Docker"): tokens are taken as-is."""
    if not text or not isinstance(text, str):
        return []
    tokens: List[str] = []
    for part in _PHRASE_DELIMS.split(text):
        for tok in part.split():
            tok = tok.rstrip(".")
            if is_reliable_keyword(tok):
                tokens.append(tok.lower())
    return dedupe_keep_order(tokens)


class KeywordEngine:
    """
    Rule pipeline turning job-description text into ATS keywords.

    Collaborators are injected:
      - store: learned keywords (read by phrase detection, grown by extraction)
      - parser: job-description parser + cache facade; None -> markup-strip fallback
      - flush_policy: decides when the learned store is written back
    """

    def __init__(
        self,
        store: Optional[LearnedKeywordStore] = None,
        parser: Any = None,
        flush_policy: Optional[FlushPolicy] = None,
        learning: bool = LEARNING_ENABLED,
    ):
        self.store = store if store is not None else LearnedKeywordStore()
        self.parser = parser
        self.flush_policy = flush_policy if flush_policy is not None else RandomFlushPolicy()
        self.learning = learning

    # ----- classification ------------------------------------------------------

    def is_high_value_keyword(self, token: str) -> bool:
        return is_high_value_keyword(token, self.store)

    # ----- technical terms ---------------------------------------------------

    def extract_technical_terms(self, text: str) -> List[str]:
        if not text or not isinstance(text, str):
            return []

        declustered = decluster_text(text)
        lowered = declustered.lower()

        # keyword -> surface form it was first seen as
        found: Dict[str, str] = {}

        def add(keyword: str, surface: str) -> None:
            if keyword and keyword not in found:
                found[keyword] = surface

        # 1. library + learned phrases
        for phrase in extract_known_phrases(lowered, self.store.snapshot()):
            add(phrase, self._surface(declustered, lowered, phrase))

        # 2. high-value category patterns (always kept)
        for pat in HIGH_VALUE_PATTERNS.values():
            for m in pat.finditer(lowered):
                add(m.group(0).lower(), m.group(0))

        # 3. multi-word technical phrases; run on the case-preserved text
        for pat in AUXILIARY_PATTERNS:
            for m in pat.finditer(declustered):
                surface = re.sub(r"\s+", " ", m.group(0))
                if is_reliable_keyword(surface):
                    add(surface.lower(), surface)

        # 4. single tokens
        for word in declustered.split():
            clean = _clean_token(word)
            if is_reliable_keyword(clean):
                add(clean.lower(), clean)

        if self.learning:
            self._learn(found)

        return list(found)

    @staticmethod
    def _surface(original: str, lowered: str, phrase: str) -> str:
        """Case-preserved text of the first hit; lower() may change length outside ASCII."""
        idx = lowered.find(phrase)
        if idx == -1 or len(original) != len(lowered):
            return phrase
        return original[idx : idx + len(phrase)]

    def _learn(self, found: Mapping[str, str]) -> None:
        added = 0
        for keyword, surface in found.items():
            if len(keyword) < MIN_LEARN_LEN:
                continue
            if (
                keyword in SKILL_DICTIONARY
                or matches_high_value_pattern(keyword)
                or surface[:1].isupper()
            ):
                if self.store.add(keyword):
                    added += 1
        if added:
            logger.debug("Learned %d new keywords (%d total)", added, len(self.store))
        if self.flush_policy.should_flush():
            self.store.flush()

    # ----- per-structure extractors ------------------------------------------

    def extract_bullets(self, text: str) -> List[str]:
        keywords: List[str] = []
        for line in (text or "").splitlines():
            if not BULLET_LINE.match(line):
                continue
            content = BULLET_MARKER.sub("", line, count=1).strip()
            keywords.extend(self.extract_technical_terms(content))
        return dedupe_keep_order(keywords)

    def extract_sections(self, text: str, sections: Optional[Mapping[str, str]] = None) -> List[str]:
        sections = sections or {}
        keywords: List[str] = []

        for key in PRIORITY_SECTIONS:
            if sections.get(key):
                keywords.extend(self.extract_technical_terms(sections[key]))

        # secondary sections contribute only their first few terms
        for key in SECONDARY_SECTIONS:
            if sections.get(key):
                keywords.extend(
                    self.extract_technical_terms(sections[key])[:SECONDARY_SECTION_LIMIT]
                )

        return dedupe_keep_order(keywords)

    def extract_narrative(self, text: str) -> List[str]:
        keywords: List[str] = []
        for pat in NARRATIVE_CUES:
            for m in pat.finditer(text or ""):
                keywords.extend(self.extract_technical_terms(m.group(1).strip()))
        keywords.extend(self.extract_technical_terms(text))
        return dedupe_keep_order(keywords)

    def extract_phrases(self, text: str) -> List[str]:
        return extract_phrases(text)

    def frequency_fallback(self, text: str) -> List[str]:
        return frequency_fallback(text)

    # ----- dispatch ----------------------------------------------------------

    def extract_by_structure(
        self,
        text: str,
        structure: Optional[str] = None,
        sections: Optional[Mapping[str, str]] = None,
    ) -> List[str]:
        if not text or not isinstance(text, str):
            return []

        handlers: Dict[str, Callable[[], List[str]]] = {
            "bullets": lambda: self.extract_bullets(text),
            "sections": lambda: self.extract_sections(text, sections),
            "narrative": lambda: self.extract_narrative(text),
            "phrases": lambda: self.extract_phrases(text),
        }
        handler = handlers.get(structure or "", lambda: frequency_fallback(text))
        keywords = handler()

        learned = self.store.snapshot()
        merged = merge_keywords(extract_known_phrases(text, learned), keywords)
        return sort_by_priority(merged, learned)[:MAX_STRUCTURE_KEYWORDS]

    # ----- top level ---------------------------------------------------------

    def _parse(self, raw_text: str) -> ParsedJobDescription:
        if self.parser is not None:
            try:
                parsed = self.parser.process_any_job_description(raw_text)
                if isinstance(parsed, ParsedJobDescription):
                    return parsed
                return ParsedJobDescription.model_validate(parsed)
            except Exception as e:
                logger.warning("Job description parser failed (%s); using plain text", type(e).__name__)
        return ParsedJobDescription(text=strip_markup(raw_text), structure="raw_text", sections={})

    def _cache_lookup(self, raw_text: str, max_keywords: int):
        if self.parser is None:
            return None, None
        try:
            key = f"{self.parser.get_cache_key(raw_text)}{KEYWORD_CACHE_SUFFIX}_{max_keywords}"
            return key, self.parser.get_cached(key, self.parser.KEYWORD_CACHE)
        except Exception as e:
            logger.warning("Keyword cache lookup failed: %s", type(e).__name__)
            return None, None

    def extract_reliable_keywords(self, raw_text: str, max_keywords: int = MAX_KEYWORDS) -> CategorizedResult:
        """
        Full pipeline: parse -> de-cluster -> structure dispatch -> frequency
        fallback -> drop clustered leftovers -> truncate -> categorize.
        Results are cached through the parser's cache facade when one is present.
        """
        if not raw_text or not isinstance(raw_text, str):
            return CategorizedResult.empty()

        cache_key, cached = self._cache_lookup(raw_text, max_keywords)
        if cached is not None:
            if isinstance(cached, CategorizedResult):
                return cached.model_copy(deep=True)
            return CategorizedResult.model_validate(cached)

        parsed = self._parse(raw_text)
        # de-cluster line by line so bullet/section layout survives
        text = "\n".join(decluster_text(ln) for ln in parsed.text.splitlines())

        keywords = self.extract_by_structure(text, parsed.structure, parsed.sections)
        if not keywords:
            keywords = frequency_fallback(text)

        keywords = [kw for kw in keywords if not looks_clustered(kw)][: max(0, max_keywords)]
        result = categorize_keywords(keywords)
        logger.debug(
            "Extracted %d keywords (structure=%s, high=%d)",
            result.total,
            parsed.structure,
            len(result.high_priority),
        )

        if cache_key is not None:
            try:
                self.parser.set_cache(cache_key, result.model_copy(deep=True), self.parser.KEYWORD_CACHE)
            except Exception as e:
                logger.warning("Keyword cache store failed: %s", type(e).__name__)

        return result


def build_default_engine() -> KeywordEngine:
    """Engine wired from config: sqlite-backed store when ATS_LEARNED_DB_PATH is set."""
    storage = MemoryStorage()
    if LEARNED_DB_PATH:
        try:
            storage = SqliteStorage(LEARNED_DB_PATH)
        except Exception as e:
            logger.warning("Learned keyword DB unavailable (%s); keeping keywords in memory", type(e).__name__)
    store = LearnedKeywordStore(storage)
    store.load()
    return KeywordEngine(store=store, parser=JobDescriptionParser())
