# ats_keywords/config.py
from __future__ import annotations
import logging
import os


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


# --- EXTRACTION ---
MAX_KEYWORDS = _int("ATS_MAX_KEYWORDS", 35)
MAX_STRUCTURE_KEYWORDS = 35
SECONDARY_SECTION_LIMIT = 10

# --- CATEGORIZATION ---
HIGH_PRIORITY_RATIO, HIGH_PRIORITY_MAX = 0.45, 15
MEDIUM_PRIORITY_RATIO, MEDIUM_PRIORITY_MAX = 0.35, 10

# --- LEARNED KEYWORDS ---
LEARNING_ENABLED = os.getenv("ATS_LEARNING", "1") == "1"
LEARNED_CAP = _int("ATS_LEARNED_CAP", 500)
LEARNED_STORAGE_KEY = "ats_learned_keywords"
LEARNED_DB_PATH = os.getenv("ATS_LEARNED_DB_PATH") or None
FLUSH_PROBABILITY = _float("ATS_FLUSH_PROBABILITY", 0.1)

# --- CACHE ---
CACHE_MAX_ENTRIES = _int("ATS_CACHE_MAX_ENTRIES", 256)
KEYWORD_CACHE_SUFFIX = "_keywords_v2"

# --- LOGGING ---
LOG_LEVEL = getattr(logging, os.getenv("ATS_LOG_LEVEL", "INFO").upper(), logging.INFO)
