"""
Hashing Utilities
Hash functions producing Digest values for Merkle commitments.

This module provides:
- calc_hash: the default hash function (BLAKE2b, 32-byte output)
- sha256 / sha3_256: alternative hash functions with the same interface
- Hasher: the callable type every hash function satisfies
- get_hasher: lookup of a hash function by algorithm name

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- All functions are pure and safe to call from multiple threads
"""
from __future__ import annotations

import hashlib
from typing import Callable

from simplemerkle.crypto.digest import HASH_SIZE, Digest
from simplemerkle.schemas.errors import UnknownHashAlgorithmException


Hasher = Callable[[bytes], Digest]

DEFAULT_HASH_ALGORITHM = "blake2b256"


def calc_hash(data: bytes) -> Digest:
    """
    Compute the BLAKE2b-256 digest of raw bytes.

    This is the default hash function of the Merkle tree builder.

    Example:
        >>> calc_hash(b"").is_undef()
        False
    """
    return Digest(hashlib.blake2b(data, digest_size=HASH_SIZE).digest())


def sha256(data: bytes) -> Digest:
    """Compute the SHA-256 digest of raw bytes."""
    return Digest(hashlib.sha256(data).digest())


def sha3_256(data: bytes) -> Digest:
    """Compute the SHA3-256 digest of raw bytes."""
    return Digest(hashlib.sha3_256(data).digest())


HASH_ALGORITHMS: dict[str, Hasher] = {
    "blake2b256": calc_hash,
    "sha256": sha256,
    "sha3_256": sha3_256,
}


def get_hasher(name: str) -> Hasher:
    """
    Look up a hash function by algorithm name.

    Args:
        name: One of HASH_ALGORITHMS (case-insensitive, "-" accepted for "_")

    Returns:
        The hash function

    Raises:
        UnknownHashAlgorithmException: If the name is not a registered string
    """
    if not isinstance(name, str):
        raise UnknownHashAlgorithmException(
            name=repr(name), available=sorted(HASH_ALGORITHMS)
        )
    key = name.strip().lower().replace("-", "_")
    try:
        return HASH_ALGORITHMS[key]
    except KeyError:
        raise UnknownHashAlgorithmException(
            name=name, available=sorted(HASH_ALGORITHMS)
        ) from None


__all__ = [
    "Hasher",
    "DEFAULT_HASH_ALGORITHM",
    "HASH_ALGORITHMS",
    "calc_hash",
    "sha256",
    "sha3_256",
    "get_hasher",
]
