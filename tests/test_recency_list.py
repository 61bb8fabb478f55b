from keycache.cache.recency_list import RecencyList, NIL


def build(keys):
    recency = RecencyList()
    slots = {key: recency.push_front(key, key.upper()) for key in keys}
    return recency, slots


def test_push_front_orders_newest_first():
    recency, _ = build(["a", "b", "c"])
    assert [key for key, _ in recency] == ["c", "b", "a"]
    assert len(recency) == 3


def test_pop_back_returns_oldest():
    recency, _ = build(["a", "b"])
    assert recency.pop_back() == ("a", "A")
    assert recency.pop_back() == ("b", "B")
    assert recency.pop_back() is None
    assert recency.head == NIL and recency.tail == NIL


def test_move_to_front():
    recency, slots = build(["a", "b", "c"])
    recency.move_to_front(slots["a"])
    assert [key for key, _ in recency] == ["a", "c", "b"]
    recency.move_to_front(slots["a"])
    assert [key for key, _ in recency] == ["a", "c", "b"]
    assert recency.pop_back() == ("b", "B")


def test_unlink_middle_node():
    recency, slots = build(["a", "b", "c"])
    assert recency.unlink(slots["b"]) == ("b", "B")
    assert [key for key, _ in recency] == ["c", "a"]
    assert len(recency) == 2


def test_released_slots_are_reused():
    recency, slots = build(["a", "b"])
    recency.pop_back()
    slot = recency.push_front("c", "C")
    assert slot == slots["a"]
    assert recency.key(slot) == "c"
    assert recency.value(slot) == "C"
    assert len(recency.keys) == 2


def test_clear():
    recency, _ = build(["a", "b"])
    recency.clear()
    assert list(recency) == []
    assert len(recency) == 0
    assert recency.push_front("x", 1) == 0
