"""
bucket.py
---------
Singly linked association list of (key, value) entries.
One Bucket backs each slot of a HashIndex.
"""

from typing import Any, Callable, Iterator, Optional, TextIO, Tuple

ItemDelete = Callable[[Any], None]
ItemFunc = Callable[[Any, str, Any], None]
ItemPrint = Callable[[TextIO, str, Any], None]


class BucketEntry:
    """One link in a bucket chain."""
    __slots__ = ("key", "value", "next")

    def __init__(self, key: str, value: Any, next_entry: Optional["BucketEntry"]) -> None:
        self.key = key
        self.value = value
        self.next = next_entry


class Bucket:
    """
    Chain of unique keys, newest entry first.
    Values are stored by reference and never inspected.
    """

    def __init__(self) -> None:
        self.head: Optional[BucketEntry] = None
        self.count: int = 0

    def insert(self, key: str, value: Any) -> bool:
        """Prepend (key, value). False if either is None or key already present."""
        if key is None or value is None or self.find_entry(key) is not None:
            return False
        self.head = BucketEntry(key, value, self.head)
        self.count += 1
        return True

    def find_entry(self, key: str) -> Optional[BucketEntry]:
        entry = self.head
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    def find(self, key: str) -> Any:
        """Return the value stored under key, or None."""
        if key is None:
            return None
        entry = self.find_entry(key)
        return entry.value if entry is not None else None

    def remove(self, key: str, itemdelete: Optional[ItemDelete] = None) -> bool:
        """Unlink the entry for key. False if key is not in this bucket."""
        prev: Optional[BucketEntry] = None
        entry = self.head
        while entry is not None:
            if entry.key == key:
                if prev is None:
                    self.head = entry.next
                else:
                    prev.next = entry.next
                self.count -= 1
                if itemdelete is not None:
                    itemdelete(entry.value)
                return True
            prev, entry = entry, entry.next
        return False

    def delete_one(self, itemdelete: Optional[ItemDelete] = None) -> Optional[Tuple[str, Any]]:
        """
        Remove the oldest entry (the end of the chain).
        Returns the removed (key, value), or None if the bucket is empty.
        """
        if self.head is None:
            return None

        prev: Optional[BucketEntry] = None
        entry = self.head
        while entry.next is not None:
            prev, entry = entry, entry.next

        if prev is None:
            self.head = None
        else:
            prev.next = None
        self.count -= 1

        if itemdelete is not None:
            itemdelete(entry.value)
        return entry.key, entry.value

    def delete(self, itemdelete: Optional[ItemDelete] = None) -> None:
        """Drop every entry, calling itemdelete once per value when given."""
        entry = self.head
        self.head = None
        self.count = 0
        while entry is not None:
            next_entry = entry.next
            if itemdelete is not None:
                itemdelete(entry.value)
            entry.next = None
            entry = next_entry

    def iterate(self, arg: Any, itemfunc: Optional[ItemFunc]) -> None:
        if itemfunc is None:
            return
        for key, value in self:
            itemfunc(arg, key, value)

    def print(self, fp: Optional[TextIO], itemprint: Optional[ItemPrint] = None) -> None:
        """Hand each entry to itemprint; nothing is written without one."""
        if fp is None or itemprint is None:
            return
        for key, value in self:
            itemprint(fp, key, value)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        entry = self.head
        while entry is not None:
            yield entry.key, entry.value
            entry = entry.next

    def __len__(self) -> int:
        return self.count
