"""
lru.py
------
Fixed-capacity LRU cache built from a RecencyList and a HashIndex.
The index maps each resident key to its list slot, so lookups never walk
the list and eviction removes exactly the evicted key from the index.
"""

from threading import RLock
from typing import Any, Iterable, Iterator, Optional, TextIO, Tuple

from tqdm import tqdm

from keycache.cache.recency_list import RecencyList
from keycache.index.bucket import ItemDelete, ItemFunc, ItemPrint
from keycache.index.hashtable import HashIndex
from keycache.shared.config import DEFAULT_CAPACITY, PROMOTE_ON_FIND, PROGRESS_MIN_ITEMS
from keycache.shared.log import get_logger

logger = get_logger(__name__)


class LRUCache:
    """
    LRU cache of opaque values keyed by strings.
    - insert places the entry at the head; when full, the tail entry is evicted first.
    - find is a direct index lookup and leaves the order alone unless
      promote_on_find is set.
    Values are never owned: itemdelete, when given, is called exactly once
    per value that leaves the cache (eviction or teardown).
    """

    def __init__(self,
                 capacity: int = DEFAULT_CAPACITY,
                 promote_on_find: bool = PROMOTE_ON_FIND,
                 itemdelete: Optional[ItemDelete] = None) -> None:
        if capacity <= 0:
            raise ValueError(f"LRUCache capacity must be > 0, got {capacity}")
        self.capacity = capacity
        self.promote_on_find = promote_on_find
        self.itemdelete = itemdelete

        self.recency = RecencyList()
        self.index = HashIndex(capacity)  # key -> recency slot

        self.hits = 0
        self.misses = 0
        self.evictions = 0

    @property
    def size(self) -> int:
        return len(self.recency)

    # ------------------- Insert / evict -------------------

    def insert(self, key: str, value: Any) -> bool:
        """
        Admit (key, value) as the most recently used entry.
        Returns False, changing nothing, if key is missing or empty, value is
        None, or key is already resident.
        """
        if not key or value is None:
            return False
        if key in self.index:
            logger.debug("Rejected duplicate key %r", key)
            return False

        if self.size >= self.capacity:
            self.evict()

        slot = self.recency.push_front(key, value)
        self.index.insert(key, slot)
        logger.debug("Inserted %r (%d/%d)", key, self.size, self.capacity)
        return True

    def evict(self) -> Optional[Tuple[str, Any]]:
        """Drop the tail entry from both the list and the index."""
        evicted = self.recency.pop_back()
        if evicted is None:
            return None

        key, value = evicted
        self.index.remove(key)
        self.evictions += 1
        logger.debug("Evicted %r", key)

        if self.itemdelete is not None:
            self.itemdelete(value)
        return evicted

    def warm(self, items: Iterable[Tuple[str, Any]], progress: Optional[bool] = None) -> int:
        """
        Insert many (key, value) pairs in order and return how many were admitted.
        A progress bar is shown when progress is True, or, when progress is None,
        for sized inputs of at least PROGRESS_MIN_ITEMS.
        """
        total = len(items) if hasattr(items, "__len__") else None
        if progress is None:
            progress = total is not None and total >= PROGRESS_MIN_ITEMS

        admitted = 0
        with tqdm(total=total, desc="Warming cache", unit="item", disable=not progress) as progress_bar:
            for key, value in items:
                if self.insert(key, value):
                    admitted += 1
                progress_bar.update(1)
        logger.debug("Warmed cache with %d entries", admitted)
        return admitted

    # ------------------- Lookup -------------------

    def find(self, key: str) -> Any:
        """Return the value for key, or None on a miss."""
        slot = self.index.find(key)
        if slot is None:
            self.misses += 1
            return None
        self.hits += 1
        if self.promote_on_find:
            self.recency.move_to_front(slot)
        return self.recency.value(slot)

    # ------------------- Traversal -------------------

    def print(self, fp: Optional[TextIO], itemprint: Optional[ItemPrint] = None) -> None:
        """Walk head to tail calling itemprint(fp, key, value); no-op without fp."""
        if fp is None or itemprint is None:
            return
        for key, value in self.recency:
            itemprint(fp, key, value)

    def iterate(self, arg: Any, itemfunc: Optional[ItemFunc]) -> None:
        """Walk head to tail calling itemfunc(arg, key, value)."""
        if itemfunc is None:
            return
        for key, value in self.recency:
            itemfunc(arg, key, value)

    # ------------------- Teardown -------------------

    def delete(self, itemdelete: Optional[ItemDelete] = None) -> None:
        """
        Release every entry. itemdelete (or the one given at construction)
        runs once per resident value, tail first. Each entry leaves the list and
        the index before its value is released, so if itemdelete raises, only the
        entries not yet released remain. The cache is empty and reusable afterwards.
        """
        itemdelete = itemdelete if itemdelete is not None else self.itemdelete
        released = 0

        while True:
            entry = self.recency.pop_back()
            if entry is None:
                break
            key, value = entry
            self.index.remove(key)
            released += 1
            if itemdelete is not None:
                itemdelete(value)

        self.recency.clear()
        logger.debug("Deleted cache contents (%d entries)", released)

    # ------------------- Introspection -------------------

    def stats(self) -> str:
        """Return cache statistics for debugging."""
        return (f"Cache: {self.size}/{self.capacity} | Hits: {self.hits} | "
                f"Misses: {self.misses} | Evictions: {self.evictions}")

    def __contains__(self, key: str) -> bool:
        return key in self.index

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(self.recency)

    def __len__(self) -> int:
        return self.size


class SynchronizedLRUCache(LRUCache):
    """LRUCache with every public operation serialized by one re-entrant lock."""

    def __init__(self,
                 capacity: int = DEFAULT_CAPACITY,
                 promote_on_find: bool = PROMOTE_ON_FIND,
                 itemdelete: Optional[ItemDelete] = None) -> None:
        super().__init__(capacity, promote_on_find, itemdelete)
        self.lock = RLock()

    @property
    def size(self) -> int:
        with self.lock:
            return len(self.recency)

    def insert(self, key: str, value: Any) -> bool:
        with self.lock:
            return super().insert(key, value)

    def evict(self) -> Optional[Tuple[str, Any]]:
        with self.lock:
            return super().evict()

    def find(self, key: str) -> Any:
        with self.lock:
            return super().find(key)

    def warm(self, items: Iterable[Tuple[str, Any]], progress: Optional[bool] = None) -> int:
        with self.lock:
            return super().warm(items, progress)

    def print(self, fp: Optional[TextIO], itemprint: Optional[ItemPrint] = None) -> None:
        with self.lock:
            super().print(fp, itemprint)

    def iterate(self, arg: Any, itemfunc: Optional[ItemFunc]) -> None:
        with self.lock:
            super().iterate(arg, itemfunc)

    def delete(self, itemdelete: Optional[ItemDelete] = None) -> None:
        with self.lock:
            super().delete(itemdelete)

    def stats(self) -> str:
        with self.lock:
            return super().stats()

    def __contains__(self, key: str) -> bool:
        with self.lock:
            return super().__contains__(key)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        with self.lock:
            return iter(list(self.recency))

    def __len__(self) -> int:
        with self.lock:
            return super().__len__()
