from ats_keywords.cache import KeyedCache


def test_regions_are_separate():
    c = KeyedCache()
    c.set_cache("k", 1, "a")
    c.set_cache("k", 2, "b")
    assert c.get_cached("k", "a") == 1
    assert c.get_cached("k", "b") == 2
    assert c.get_cached("missing", "a") is None


def test_oldest_entry_evicted_when_region_full():
    c = KeyedCache(max_entries=2)
    c.set_cache("one", 1, "r")
    c.set_cache("two", 2, "r")
    c.set_cache("three", 3, "r")
    assert c.get_cached("one", "r") is None
    assert c.get_cached("three", "r") == 3
    assert len(c) == 2


def test_clear_single_region():
    c = KeyedCache()
    c.set_cache("k", 1, "a")
    c.set_cache("k", 1, "b")
    c.clear("a")
    assert c.get_cached("k", "a") is None
    assert c.get_cached("k", "b") == 1


def test_read_refreshes_recency():
    c = KeyedCache(max_entries=2)
    c.set_cache("a", 1, "r")
    c.set_cache("b", 2, "r")
    assert c.get_cached("a", "r") == 1
    c.set_cache("c", 3, "r")
    assert c.get_cached("a", "r") == 1
    assert c.get_cached("b", "r") is None
