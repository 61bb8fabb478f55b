"""
Handle-style helpers over LRUCache.
Every function accepts an absent (None) cache and degrades to a no-op,
False or None instead of raising.
"""

from typing import Any, Optional, TextIO

from keycache.cache.lru import LRUCache
from keycache.index.bucket import ItemDelete, ItemFunc, ItemPrint
from keycache.shared.config import NULL_MARKER
from keycache.shared.log import get_logger

logger = get_logger(__name__)


def new_cache(capacity: int) -> Optional[LRUCache]:
    """Create an empty cache, or return None if capacity is not positive."""
    try:
        return LRUCache(capacity)
    except ValueError as e:
        logger.debug("Cache not created: %s", e)
        return None


def insert(cache: Optional[LRUCache], key: str, value: Any) -> bool:
    if cache is None:
        return False
    return cache.insert(key, value)


def find(cache: Optional[LRUCache], key: str) -> Any:
    if cache is None:
        return None
    return cache.find(key)


def print_cache(cache: Optional[LRUCache], fp: Optional[TextIO], itemprint: Optional[ItemPrint] = None) -> None:
    """Print the cache head to tail; an absent cache prints the null marker."""
    if fp is None:
        return
    if cache is None:
        fp.write(f"{NULL_MARKER}\n")
        return
    cache.print(fp, itemprint)


def iterate(cache: Optional[LRUCache], arg: Any, itemfunc: Optional[ItemFunc]) -> None:
    if cache is None:
        return
    cache.iterate(arg, itemfunc)


def delete(cache: Optional[LRUCache], itemdelete: Optional[ItemDelete] = None) -> None:
    if cache is None:
        return
    cache.delete(itemdelete)
