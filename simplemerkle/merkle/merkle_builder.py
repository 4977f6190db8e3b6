"""
Merkle Builder Convenience Wrapper
Binds a hash function once and builds trees from payloads or digests.

These are thin wrappers around the functions in merkle_tree.py.
"""
from __future__ import annotations

from typing import Optional, Sequence

from simplemerkle.crypto.digest import Digest
from simplemerkle.crypto.hashing import Hasher, calc_hash, get_hasher
from simplemerkle.merkle.merkle_tree import (
    MerkleTree,
    build_from_digests,
    build_from_payloads,
)


class MerkleTreeBuilder:
    """
    Builds Merkle trees with a fixed hash function.

    Example:
        >>> builder = MerkleTreeBuilder.for_algorithm("sha256")
        >>> tree = builder.from_payloads([b"a", b"b", b"c"])
        >>> tree.depth()
        2
    """

    def __init__(self, hasher: Hasher = calc_hash) -> None:
        self.hasher = hasher

    @classmethod
    def for_algorithm(cls, name: str) -> "MerkleTreeBuilder":
        """
        Create a builder for a registered hash algorithm.

        Raises:
            UnknownHashAlgorithmException: If the name is not registered
        """
        return cls(get_hasher(name))

    def from_payloads(self, payloads: Sequence[bytes]) -> Optional[MerkleTree]:
        return build_from_payloads(payloads, self.hasher)

    def from_digests(self, digests: Sequence[Digest]) -> Optional[MerkleTree]:
        return build_from_digests(digests, self.hasher)


__all__ = [
    "MerkleTreeBuilder",
]
