"""
Hashing utilities for string keys.
Implements a DJB2 variant and its reduction to a bucket slot.
"""

from keycache.shared.config import HASH_SEED, HASH_MULTIPLIER, HASH_MASK

def djb2(key: str) -> int:
    """
    Hash a string key using DJB2.
    - Start from the seed 5381.
    - For each UTF-8 byte: hash = hash * 33 + byte (lone surrogates pass through as bytes).
    - Mask to 64 bits after every step so the result is never negative.
    """
    hash_value = HASH_SEED

    for byte in key.encode("utf-8", "surrogatepass"):
        hash_value = (hash_value * HASH_MULTIPLIER + byte) & HASH_MASK

    return hash_value

def slot_for(key: str, num_slots: int) -> int:
    """
    Reduce a key's hash to a slot in [0, num_slots).
    Stable for a given (key, num_slots) pair.
    """
    if num_slots <= 0:
        raise ValueError(f"num_slots must be > 0, got {num_slots}")
    return djb2(key) % num_slots
