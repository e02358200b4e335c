# gamedata/rng.py
from __future__ import annotations

import random
from typing import Optional, Union

# We need a stable, cross-process hash. Python's built-in hash() is salted per run,
# so we use 64-bit FNV-1a for strings/bytes and a simple canonicalization for ints.

_FNV_OFFSET64 = 0xCBF29CE484222325
_FNV_PRIME64 = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _to_bytes(x: Union[int, str, bytes]) -> bytes:
    if isinstance(x, bytes):
        return x
    if isinstance(x, int):
        # 8 bytes little-endian unsigned representation (wraps for big ints)
        return int(x & _MASK64).to_bytes(8, "little", signed=False)
    return str(x).encode("utf-8")


def _fnv1a64(data: bytes) -> int:
    h = _FNV_OFFSET64
    for b in data:
        h ^= b
        h = (h * _FNV_PRIME64) & _MASK64
    return h


def mix(base_seed: int, *parts: Union[int, str, bytes]) -> int:
    """
    Deterministically mix a base seed with any number of parts into a 31-bit positive int.
    Mixing is associative over parts: mix(mix(s, a), b) == mix(s, a, b).
    """
    h = base_seed & 0x7FFFFFFF
    for p in parts:
        h = _fnv1a64(_to_bytes(h) + _to_bytes(p))
        h = (h ^ (h >> 33)) & 0x7FFFFFFF
    return h or 1


def child_seed(base_seed: int, *parts: Union[int, str, bytes]) -> int:
    return mix(base_seed, *parts)


def child_rng(base_seed: int, *parts: Union[int, str, bytes]) -> random.Random:
    """A Random() instance deterministically derived from base_seed and parts."""
    return random.Random(child_seed(base_seed, *parts))


def entropy_seed() -> int:
    """A fresh 31-bit seed from the OS entropy source."""
    return random.SystemRandom().randrange(1, 0x7FFFFFFF)


def new_rng(seed: Optional[int] = None) -> random.Random:
    """Seeded generator, or an entropy-seeded one when seed is None."""
    return random.Random(entropy_seed() if seed is None else int(seed))


def coin_flip(rng: random.Random) -> bool:
    """Fair coin: True with probability 0.5."""
    return rng.getrandbits(1) == 1
