import io

import pytest

from keycache.index.hashtable import HashIndex
from keycache.shared.hashing import slot_for


@pytest.mark.parametrize("num_slots", [0, -1])
def test_rejects_non_positive_slot_count(num_slots):
    with pytest.raises(ValueError):
        HashIndex(num_slots)


def test_insert_find_and_duplicates():
    index = HashIndex(5)
    assert index.insert("apple", "red")
    assert index.insert("banana", "yellow")
    assert not index.insert("apple", "green")
    assert index.find("apple") == "red"
    assert index.find("banana") == "yellow"
    assert index.find("cherry") is None
    assert len(index) == 2
    assert "apple" in index
    assert "cherry" not in index


def test_insert_rejects_missing_arguments():
    index = HashIndex(3)
    assert not index.insert(None, 1)
    assert not index.insert("", 1)
    assert not index.insert("k", None)
    assert index.find(None) is None
    assert index.find("") is None
    assert len(index) == 0


def test_falsy_values_are_stored():
    index = HashIndex(3)
    assert index.insert("zero", 0)
    assert index.find("zero") == 0


def test_keys_land_in_their_hashed_bucket():
    index = HashIndex(4)
    for key in ["one", "two", "three", "four", "five"]:
        index.insert(key, key.upper())
        assert index.buckets[slot_for(key, 4)].find(key) == key.upper()


def test_remove_by_key():
    index = HashIndex(3)
    deleted = []
    index.insert("a", 1)
    index.insert("b", 2)
    assert index.remove("a", deleted.append)
    assert not index.remove("a")
    assert not index.remove("")
    assert deleted == [1]
    assert index.find("a") is None
    assert index.find("b") == 2


def test_remove_one_arbitrary_entry_targets_last_bucket():
    index = HashIndex(1)
    index.insert("a", 1)
    index.insert("b", 2)
    assert index.remove_one_arbitrary_entry() == ("a", 1)
    assert index.find("b") == 2

    empty = HashIndex(3)
    assert empty.remove_one_arbitrary_entry() is None


def test_delete_releases_every_entry():
    index = HashIndex(4)
    deleted = []
    for i in range(10):
        index.insert(f"key{i}", i)
    index.delete(deleted.append)
    assert sorted(deleted) == list(range(10))
    assert len(index) == 0
    assert index.insert("key0", "again")


def test_iterate_and_print_visit_every_entry():
    index = HashIndex(3)
    for i in range(6):
        index.insert(f"k{i}", i)

    seen = {}
    index.iterate(seen, lambda arg, key, value: arg.__setitem__(key, value))
    assert seen == {f"k{i}": i for i in range(6)}
    assert dict(index) == seen

    out = io.StringIO()
    index.print(out, lambda fp, key, value: fp.write(f"{key}\n"))
    assert sorted(out.getvalue().split()) == sorted(seen)

    index.print(None, lambda fp, key, value: fp.write(key))
    index.iterate(None, None)
