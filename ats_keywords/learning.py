# ats_keywords/learning.py
"""
Learned keyword store.

Keywords discovered during extraction are remembered in-process and written
back to a key-value storage now and then. The write is fire-and-forget: a crash
between a mutation and the next flush loses that increment, which is fine
because the store only enriches phrase detection.
"""
from __future__ import annotations

import json
import logging
import random
import sqlite3
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Iterator, List, Optional, Tuple

from .config import FLUSH_PROBABILITY, LEARNED_CAP, LEARNED_STORAGE_KEY
from .declustering import looks_clustered
from .lexicon import BLACKLIST
from .rules import KEYWORD_SHAPE, MAX_KEYWORD_LEN, norm

logger = logging.getLogger(__name__)

MIN_LEARNED_LEN = 4


# ----- storage backends -------------------------------------------------------


class KeyValueStorage:
    """Persistence port: get(key) -> value | None, set(key, value)."""

    def get(self, key: str) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[dict] = None):
        self._data = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Any:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv (
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


class SqliteStorage(KeyValueStorage):
    """Durable backend; values are stored as JSON text."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        with sqlite3.connect(self.db_path) as conn:
            conn.executescript(SCHEMA_SQL)

    def get(self, key: str) -> Any:
        conn = sqlite3.connect(self.db_path)
        try:
            row = conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return json.loads(row[0])

    def set(self, key: str, value: Any) -> None:
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "INSERT INTO kv (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
                "ON CONFLICT(key) DO UPDATE SET value=excluded.value, "
                "updated_at=excluded.updated_at",
                (key, json.dumps(value, ensure_ascii=False)),
            )


# ----- flush policies ---------------------------------------------------------


class FlushPolicy:
    def should_flush(self) -> bool:
        raise NotImplementedError


class RandomFlushPolicy(FlushPolicy):
    def __init__(self, probability: float = FLUSH_PROBABILITY, rng: Optional[random.Random] = None):
        self.probability = probability
        self.rng = rng or random.Random()

    def should_flush(self) -> bool:
        return self.rng.random() < self.probability


class EveryNthCallPolicy(FlushPolicy):
    def __init__(self, n: int):
        if n < 1:
            raise ValueError("n must be >= 1")
        self.n = n
        self._calls = 0

    def should_flush(self) -> bool:
        self._calls += 1
        return self._calls % self.n == 0


class NeverFlushPolicy(FlushPolicy):
    def should_flush(self) -> bool:
        return False


class AlwaysFlushPolicy(FlushPolicy):
    def should_flush(self) -> bool:
        return True


# ----- the store --------------------------------------------------------------


def _admissible(keyword: str) -> bool:
    if len(keyword) < MIN_LEARNED_LEN or len(keyword) > MAX_KEYWORD_LEN:
        return False
    if keyword in BLACKLIST or not KEYWORD_SHAPE.match(keyword):
        return False
    return not looks_clustered(keyword)


class LearnedKeywordStore:
    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        key: str = LEARNED_STORAGE_KEY,
        cap: int = LEARNED_CAP,
    ):
        self.storage = storage if storage is not None else MemoryStorage()
        self.key = key
        self.cap = cap
        self._items: dict[str, None] = {}
        self._lock = threading.Lock()
        self._writer: Optional[ThreadPoolExecutor] = None

    # -- load ------------------------------------------------------------------

    def load(self) -> int:
        """Best-effort read from storage. Returns the number of keywords loaded."""
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            logger.warning("Learned keywords could not be read: %s", type(e).__name__)
            raw = None

        loaded: dict[str, None] = {}
        if raw is not None and not isinstance(raw, list):
            logger.warning("Learned keywords in storage are malformed; starting empty")
        elif raw:
            for item in raw:
                if not isinstance(item, str):
                    continue
                kw = norm(item)
                if _admissible(kw):
                    loaded[kw] = None

        with self._lock:
            self._items = loaded
        logger.debug("Loaded %d learned keywords", len(loaded))
        return len(loaded)

    # -- mutate ----------------------------------------------------------------

    def add(self, keyword: str) -> bool:
        if not isinstance(keyword, str):
            return False
        kw = norm(keyword)
        if not _admissible(kw):
            return False
        with self._lock:
            if kw in self._items:
                return False
            self._items[kw] = None
        return True

    def clear(self) -> None:
        with self._lock:
            self._items = {}

    # -- read ------------------------------------------------------------------

    def snapshot(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._items)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and norm(keyword) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._items)

    # -- flush -----------------------------------------------------------------

    def _write(self, payload: List[str]) -> bool:
        try:
            self.storage.set(self.key, payload)
            return True
        except Exception as e:
            logger.warning("Learned keywords could not be saved: %s", type(e).__name__)
            return False

    def flush(self, wait: bool = False) -> Future:
        """
        Persist the first `cap` keywords on a background worker.
        Callers normally ignore the returned future.
        """
        with self._lock:
            payload = list(self._items)[: self.cap]
            if self._writer is None:
                self._writer = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="learned-flush"
                )
            writer = self._writer
        fut = writer.submit(self._write, payload)
        if wait:
            fut.result()
        return fut

    def close(self) -> None:
        """Wait for pending flushes and stop the background writer."""
        with self._lock:
            writer, self._writer = self._writer, None
        if writer is not None:
            writer.shutdown(wait=True)
