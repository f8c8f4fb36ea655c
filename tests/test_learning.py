import random

import pytest
from ats_keywords.learning import (
    EveryNthCallPolicy,
    KeyValueStorage,
    LearnedKeywordStore,
    MemoryStorage,
    RandomFlushPolicy,
    SqliteStorage,
)


class BrokenStorage(KeyValueStorage):
    def get(self, key):
        raise RuntimeError("disk gone")

    def set(self, key, value):
        raise RuntimeError("disk gone")


def test_load_tolerates_missing_and_malformed_data():
    assert LearnedKeywordStore(MemoryStorage()).load() == 0
    store = LearnedKeywordStore(MemoryStorage({"ats_learned_keywords": "not-a-list"}))
    assert store.load() == 0
    assert len(store) == 0


def test_load_skips_invalid_entries():
    storage = MemoryStorage({"ats_learned_keywords": ["python", 5, None, "the", "Snowflake", "ab"]})
    store = LearnedKeywordStore(storage)
    assert store.load() == 2
    assert store.snapshot() == ("python", "snowflake")


def test_broken_storage_never_raises():
    store = LearnedKeywordStore(BrokenStorage())
    assert store.load() == 0
    assert store.add("terraform")
    assert store.flush(wait=True).result() is False
    assert "terraform" in store


@pytest.mark.parametrize(
    "kw, ok",
    [
        ("Terraform", True),
        ("abc", False),  # shorter than 4
        ("experience", False),  # blacklisted
        ("salesforcecrmreporting", False),  # clustered
        ("x" * 31, False),
        (42, False),
    ],
)
def test_add_gate(kw, ok):
    assert LearnedKeywordStore().add(kw) is ok


def test_add_dedupes_case_insensitively():
    store = LearnedKeywordStore()
    assert store.add("Kafka")
    assert not store.add("  kafka ")
    assert store.snapshot() == ("kafka",)


def test_flush_caps_persisted_array():
    storage = MemoryStorage()
    store = LearnedKeywordStore(storage, cap=3)
    for kw in ["alpha", "bravo", "charlie", "delta", "echo"]:
        store.add(kw)
    store.flush(wait=True)
    assert storage.get(store.key) == ["alpha", "bravo", "charlie"]
    assert len(store) == 5  # in-memory set is not truncated


def test_sqlite_storage_round_trip(tmp_path):
    db = str(tmp_path / "learned.db")
    store = LearnedKeywordStore(SqliteStorage(db))
    store.add("Gainsight")
    store.add("Zoominfo")
    store.flush(wait=True)

    reloaded = LearnedKeywordStore(SqliteStorage(db))
    assert reloaded.load() == 2
    assert reloaded.snapshot() == ("gainsight", "zoominfo")


def test_every_nth_call_policy():
    policy = EveryNthCallPolicy(3)
    assert [policy.should_flush() for _ in range(6)] == [False, False, True, False, False, True]
    with pytest.raises(ValueError):
        EveryNthCallPolicy(0)


def test_random_policy_is_injectable():
    assert not any(RandomFlushPolicy(0.0, random.Random(1)).should_flush() for _ in range(50))
    assert all(RandomFlushPolicy(1.0, random.Random(1)).should_flush() for _ in range(50))
    a = RandomFlushPolicy(0.3, random.Random(7))
    b = RandomFlushPolicy(0.3, random.Random(7))
    assert [a.should_flush() for _ in range(20)] == [b.should_flush() for _ in range(20)]


def test_close_waits_for_pending_flush_and_allows_reuse():
    storage = MemoryStorage()
    store = LearnedKeywordStore(storage)
    store.add("Terraform")
    store.flush()
    store.close()
    assert storage.get(store.key) == ["terraform"]
    assert store._writer is None

    store.close()  # idempotent
    store.add("Kafka")
    store.flush(wait=True)
    assert storage.get(store.key) == ["terraform", "kafka"]
    store.close()
