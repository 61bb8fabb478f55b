# Cache configs
DEFAULT_CAPACITY: int = 1024  # entries held before eviction starts
PROMOTE_ON_FIND: bool = False # move entries to the head on lookup (classic LRU)

# Hash configs (DJB2)
HASH_SEED: int = 5381
HASH_MULTIPLIER: int = 33
HASH_MASK: int = 0xFFFFFFFFFFFFFFFF  # unsigned 64-bit wraparound

# Printing
NULL_MARKER: str = "null"  # printed for an absent cache

# Bulk loading
PROGRESS_MIN_ITEMS: int = 10000  # show a progress bar at or above this many items

# Logging
LOG_NAME: str = "keycache"
