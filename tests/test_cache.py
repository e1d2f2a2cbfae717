from datetime import timedelta

from terraai.services.cache import TTLCache


def test_hit_within_ttl(clock):
    cache = TTLCache(clock=clock)
    cache.set("k", 1)
    clock.advance(minutes=30)
    assert cache.get("k") == 1
    assert "k" in cache


def test_stale_after_ttl_but_not_removed(clock):
    cache = TTLCache(clock=clock)
    cache.set("k", 1)
    clock.advance(minutes=30, seconds=1)
    assert cache.get("k") is None
    assert "k" not in cache
    assert len(cache) == 1


def test_set_refreshes_timestamp(clock):
    cache = TTLCache(ttl=timedelta(seconds=10), clock=clock)
    cache.set("k", "old")
    clock.advance(seconds=8)
    cache.set("k", "new")
    clock.advance(seconds=8)
    assert cache.get("k") == "new"


def test_evict_and_clear(clock):
    cache = TTLCache(clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.evict("a")
    assert not cache.evict("a")
    assert cache.get("a") is None
    cache.clear()
    assert len(cache) == 0


def test_purge_expired(clock):
    cache = TTLCache(ttl=timedelta(minutes=1), clock=clock)
    cache.set("old", 1)
    clock.advance(minutes=2)
    cache.set("new", 2)
    assert cache.purge_expired() == 1
    assert len(cache) == 1
    assert cache.get("new") == 2
