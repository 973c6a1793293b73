"""
Hash combination for composite cache keys.

Search caches are keyed by tuples such as ``(state_hash, step_index)``.
These helpers implement the ``hash_combine`` recipe in unsigned 64-bit
arithmetic so the combined value can be exchanged with native measurement
code that uses the same recipe.
"""

from collections.abc import Iterable
from typing import Any

_MASK64 = (1 << 64) - 1
_GOLDEN_RATIO = 0x9E3779B9


def hash_combine(seed: int, value: int) -> int:
    """Mix ``value`` into ``seed`` as unsigned 64-bit integers."""
    seed &= _MASK64
    value &= _MASK64
    return (seed ^ (value + _GOLDEN_RATIO + (seed << 6) + (seed >> 2))) & _MASK64


def hash_tuple(items: Iterable[Any]) -> int:
    """
    Hash a sequence of hashable items.

    The first item's hash is the seed; each later item is combined in order.
    An empty sequence hashes to 0.

    Example:
        hash_tuple((a, b, c)) == hash_combine(hash_combine(hash(a), hash(b)), hash(c))
    """
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        return 0
    seed = hash(first) & _MASK64
    for item in iterator:
        seed = hash_combine(seed, hash(item))
    return seed
