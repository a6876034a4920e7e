"""Stable string hashes for consistent variant selection.

Python's builtin ``hash()`` for ``str`` is salted per process
(``PYTHONHASHSEED``), so it cannot back a selection that must survive
restarts.  Every hasher here works on the UTF-8 bytes of the key and has
fixed, documented constants, so the same key maps to the same roll in any
process and in any other language port that follows the same algorithm.
"""

import hashlib
from typing import Dict

from .exceptions import InvalidArgumentError
from .interfaces import StableHasher

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193
MASK_32 = 0xFFFFFFFF

FNV64_OFFSET_BASIS = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3
MASK_64 = 0xFFFFFFFFFFFFFFFF


def fnv1a_32(data: str) -> int:
    """Compute the 32-bit FNV-1a hash of a string."""
    h = FNV32_OFFSET_BASIS
    for byte in data.encode("utf-8"):
        h ^= byte
        h = (h * FNV32_PRIME) & MASK_32
    return h


def fnv1a_64(data: str) -> int:
    """Compute the 64-bit FNV-1a hash of a string."""
    h = FNV64_OFFSET_BASIS
    for byte in data.encode("utf-8"):
        h ^= byte
        h = (h * FNV64_PRIME) & MASK_64
    return h


def sha256_64(data: str) -> int:
    """First 8 bytes of the SHA-256 digest as a big-endian unsigned int."""
    digest = hashlib.sha256(data.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class Fnv1a32Hasher:
    name = "fnv1a_32"

    def hash(self, key: str) -> int:
        return fnv1a_32(key)


class Fnv1a64Hasher:
    name = "fnv1a_64"

    def hash(self, key: str) -> int:
        return fnv1a_64(key)


class Sha256Hasher:
    name = "sha256"

    def hash(self, key: str) -> int:
        return sha256_64(key)


_HASHERS: Dict[str, StableHasher] = {
    h.name: h for h in (Fnv1a32Hasher(), Fnv1a64Hasher(), Sha256Hasher())
}


def available_hashers() -> list:
    return sorted(_HASHERS)


def get_hasher(name: str) -> StableHasher:
    """Look up a built-in hasher by name.

    Args:
        name: One of ``"fnv1a_32"``, ``"fnv1a_64"`` or ``"sha256"``.

    Returns:
        The shared, stateless hasher instance.

    Raises:
        InvalidArgumentError: If *name* is not a known algorithm.
    """
    try:
        return _HASHERS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown hash algorithm '{name}'. Available: {', '.join(available_hashers())}"
        ) from None
