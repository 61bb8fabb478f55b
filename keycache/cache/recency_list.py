from typing import Any, Iterator, List, Optional, Tuple

NIL = -1  # end-of-list marker for prev/next links

# ---------------------------------------------------------
#   RecencyList class
# ---------------------------------------------------------

class RecencyList:
    """
    Doubly linked list of (key, value) nodes kept in an arena.
    Nodes live in parallel arrays and are addressed by slot index;
    unlinked slots go on a free-list and are reused by later pushes.
    head is the most recently inserted node, tail the eviction candidate.
    """

    def __init__(self) -> None:
        self.keys: List[Optional[str]] = []
        self.values: List[Any] = []
        self.prev: List[int] = []
        self.next: List[int] = []
        self.free_slots: List[int] = []

        self.head: int = NIL
        self.tail: int = NIL
        self.size: int = 0

    # ------------------- Slot management -------------------

    def allocate(self, key: str, value: Any) -> int:
        """Take a slot from the free-list, or grow the arena by one."""
        if self.free_slots:
            slot = self.free_slots.pop()
            self.keys[slot] = key
            self.values[slot] = value
            self.prev[slot] = NIL
            self.next[slot] = NIL
            return slot

        self.keys.append(key)
        self.values.append(value)
        self.prev.append(NIL)
        self.next.append(NIL)
        return len(self.keys) - 1

    def release(self, slot: int) -> None:
        """Clear a detached slot and return it to the free-list."""
        self.keys[slot] = None
        self.values[slot] = None
        self.prev[slot] = NIL
        self.next[slot] = NIL
        self.free_slots.append(slot)

    # ------------------- Linking -------------------

    def link_front(self, slot: int) -> None:
        self.prev[slot] = NIL
        self.next[slot] = self.head
        if self.head != NIL:
            self.prev[self.head] = slot
        self.head = slot
        if self.tail == NIL:
            self.tail = slot
        self.size += 1

    def detach(self, slot: int) -> None:
        """Unlink a slot from its neighbours without releasing it."""
        prev_slot, next_slot = self.prev[slot], self.next[slot]

        if prev_slot != NIL:
            self.next[prev_slot] = next_slot
        else:
            self.head = next_slot

        if next_slot != NIL:
            self.prev[next_slot] = prev_slot
        else:
            self.tail = prev_slot

        self.prev[slot] = NIL
        self.next[slot] = NIL
        self.size -= 1

    # ------------------- List API -------------------

    def push_front(self, key: str, value: Any) -> int:
        """Insert a new node at the head and return its slot."""
        slot = self.allocate(key, value)
        self.link_front(slot)
        return slot

    def pop_back(self) -> Optional[Tuple[str, Any]]:
        """Remove the tail node and return its (key, value), or None if empty."""
        if self.tail == NIL:
            return None
        return self.unlink(self.tail)

    def unlink(self, slot: int) -> Tuple[str, Any]:
        """Remove an arbitrary node by slot and return its (key, value)."""
        key, value = self.keys[slot], self.values[slot]
        self.detach(slot)
        self.release(slot)
        return key, value

    def move_to_front(self, slot: int) -> None:
        if slot == self.head:
            return
        self.detach(slot)
        self.link_front(slot)

    def key(self, slot: int) -> str:
        return self.keys[slot]

    def value(self, slot: int) -> Any:
        return self.values[slot]

    def clear(self) -> None:
        """Drop every node and shrink the arena back to empty."""
        self.keys.clear()
        self.values.clear()
        self.prev.clear()
        self.next.clear()
        self.free_slots.clear()
        self.head = self.tail = NIL
        self.size = 0

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        slot = self.head
        while slot != NIL:
            yield self.keys[slot], self.values[slot]
            slot = self.next[slot]

    def __len__(self) -> int:
        return self.size
