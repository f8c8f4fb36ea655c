"""
ATS keyword extraction and matching.

Deterministic rule pipeline that pulls skills, tools and soft-skill phrases out
of job descriptions of unknown layout, and scores a CV against them.

Module-level functions are bound to a default engine built from environment
configuration (see ats_keywords.config). Build a KeywordEngine directly to
inject your own learned store, parser or flush policy.
"""

from .declustering import decluster, decluster_text, looks_clustered
from .extractor import KeywordEngine, build_default_engine, extract_phrases, frequency_fallback
from .learning import (
    AlwaysFlushPolicy,
    EveryNthCallPolicy,
    KeyValueStorage,
    LearnedKeywordStore,
    MemoryStorage,
    NeverFlushPolicy,
    RandomFlushPolicy,
    SqliteStorage,
)
from .lexicon import BLACKLIST, HIGH_VALUE_PATTERNS, PHRASE_LIBRARY, SKILL_DICTIONARY
from .matcher import match_keywords
from .models import CategorizedResult, MatchResult, ParsedJobDescription
from .phrases import extract_known_phrases as _extract_known_phrases
from .ranking import categorize_keywords
from .rules import is_reliable_keyword
from .sections import JobDescriptionParser

__version__ = "2.0.0"

engine = build_default_engine()
learned_store = engine.store

extract_reliable_keywords = engine.extract_reliable_keywords
extract_by_structure = engine.extract_by_structure
extract_technical_terms = engine.extract_technical_terms
is_high_value_keyword = engine.is_high_value_keyword

extract_bullets = engine.extract_bullets
extract_sections = engine.extract_sections
extract_narrative = engine.extract_narrative

learn_keyword = learned_store.add
load_learned_keywords = learned_store.load
save_learned_keywords = learned_store.flush


def extract_known_phrases(text: str):
    return _extract_known_phrases(text, learned_store.snapshot())


__all__ = [
    "AlwaysFlushPolicy",
    "BLACKLIST",
    "CategorizedResult",
    "EveryNthCallPolicy",
    "HIGH_VALUE_PATTERNS",
    "JobDescriptionParser",
    "KeyValueStorage",
    "KeywordEngine",
    "LearnedKeywordStore",
    "MatchResult",
    "MemoryStorage",
    "NeverFlushPolicy",
    "PHRASE_LIBRARY",
    "ParsedJobDescription",
    "RandomFlushPolicy",
    "SKILL_DICTIONARY",
    "SqliteStorage",
    "categorize_keywords",
    "decluster",
    "decluster_text",
    "engine",
    "extract_bullets",
    "extract_by_structure",
    "extract_known_phrases",
    "extract_narrative",
    "extract_phrases",
    "extract_reliable_keywords",
    "extract_sections",
    "extract_technical_terms",
    "frequency_fallback",
    "is_high_value_keyword",
    "is_reliable_keyword",
    "learn_keyword",
    "learned_store",
    "load_learned_keywords",
    "looks_clustered",
    "match_keywords",
    "save_learned_keywords",
]
