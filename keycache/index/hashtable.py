"""
hashtable.py
------------
Fixed-size hash index over chained buckets.
A key is routed to one bucket by its DJB2 hash modulo the slot count;
the slot count never changes after construction.
"""

from typing import Any, Iterator, List, Optional, TextIO, Tuple

from keycache.index.bucket import Bucket, ItemDelete, ItemFunc, ItemPrint
from keycache.shared.hashing import slot_for
from keycache.shared.log import get_logger

logger = get_logger(__name__)


class HashIndex:
    """Array of independent buckets addressed by string keys."""

    def __init__(self, num_slots: int) -> None:
        if num_slots <= 0:
            raise ValueError(f"HashIndex num_slots must be > 0, got {num_slots}")
        self.num_slots = num_slots
        self.buckets: List[Bucket] = [Bucket() for _ in range(num_slots)]

    def bucket_for(self, key: str) -> Bucket:
        return self.buckets[slot_for(key, self.num_slots)]

    # ------------------- Lookup / update -------------------

    def insert(self, key: str, value: Any) -> bool:
        """
        Insert (key, value) into the key's bucket.
        Returns False if key is missing or empty, value is None, or key exists.
        """
        if not key or value is None:
            return False
        return self.bucket_for(key).insert(key, value)

    def find(self, key: str) -> Any:
        """Return the value for key, or None on a missing key or a miss."""
        if not key:
            return None
        return self.bucket_for(key).find(key)

    def remove(self, key: str, itemdelete: Optional[ItemDelete] = None) -> bool:
        """Remove exactly the entry for key. False if it was not indexed."""
        if not key:
            return False
        return self.bucket_for(key).remove(key, itemdelete)

    def remove_one_arbitrary_entry(self, itemdelete: Optional[ItemDelete] = None) -> Optional[Tuple[str, Any]]:
        """
        Remove the oldest entry of the last bucket, whatever its key.
        Returns the removed (key, value), or None when that bucket is empty.
        Unrelated to recency; use remove(key) to keep a cache consistent.
        """
        removed = self.buckets[self.num_slots - 1].delete_one(itemdelete)
        if removed is not None:
            logger.debug("Removed arbitrary entry %r from slot %d", removed[0], self.num_slots - 1)
        return removed

    # ------------------- Bulk operations -------------------

    def delete(self, itemdelete: Optional[ItemDelete] = None) -> None:
        """Release every entry, applying itemdelete to each value when given."""
        for bucket in self.buckets:
            bucket.delete(itemdelete)

    def iterate(self, arg: Any, itemfunc: Optional[ItemFunc]) -> None:
        """Call itemfunc(arg, key, value) on every entry, in no particular order."""
        if itemfunc is None:
            return
        for bucket in self.buckets:
            bucket.iterate(arg, itemfunc)

    def print(self, fp: Optional[TextIO], itemprint: Optional[ItemPrint] = None) -> None:
        if fp is None:
            return
        for bucket in self.buckets:
            bucket.print(fp, itemprint)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        for bucket in self.buckets:
            yield from bucket

    def __contains__(self, key: str) -> bool:
        return bool(key) and self.bucket_for(key).find_entry(key) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)
