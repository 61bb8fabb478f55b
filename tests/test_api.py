import io

from keycache.cache import api
from keycache.cache.lru import LRUCache


def test_new_cache():
    assert api.new_cache(0) is None
    assert api.new_cache(-1) is None
    assert isinstance(api.new_cache(2), LRUCache)


def test_absent_cache_is_harmless():
    assert not api.insert(None, "a", 1)
    assert api.find(None, "a") is None
    api.iterate(None, [], lambda arg, key, value: arg.append(key))
    api.delete(None)


def test_print_cache_writes_null_marker_for_absent_cache():
    out = io.StringIO()
    api.print_cache(None, out)
    assert out.getvalue() == "null\n"
    api.print_cache(None, None)


def test_round_trip_through_handles():
    cache = api.new_cache(2)
    assert api.insert(cache, "a", 1)
    assert api.insert(cache, "b", 2)
    assert api.insert(cache, "c", 3)
    assert api.find(cache, "a") is None
    assert api.find(cache, "b") == 2
    assert api.find(cache, "c") == 3

    out = io.StringIO()
    api.print_cache(cache, out, lambda fp, key, value: fp.write(f"{key}={value} "))
    assert out.getvalue() == "c=3 b=2 "

    seen = []
    api.iterate(cache, seen, lambda arg, key, value: arg.append(key))
    assert seen == ["c", "b"]

    deleted = []
    api.delete(cache, deleted.append)
    assert sorted(deleted) == [2, 3]
    assert api.find(cache, "b") is None
