"""
Core cryptographic utilities.

Digest value type and the hash functions used to build Merkle trees.
"""
from .digest import (
    HASH_SIZE,
    Digest,
    UNDEF_HASH,
)
from .hashing import (
    Hasher,
    DEFAULT_HASH_ALGORITHM,
    HASH_ALGORITHMS,
    calc_hash,
    sha256,
    sha3_256,
    get_hasher,
)

__all__ = [
    "HASH_SIZE",
    "Digest",
    "UNDEF_HASH",
    "Hasher",
    "DEFAULT_HASH_ALGORITHM",
    "HASH_ALGORITHMS",
    "calc_hash",
    "sha256",
    "sha3_256",
    "get_hasher",
]
