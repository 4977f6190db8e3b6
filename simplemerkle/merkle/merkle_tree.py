"""
Merkle Tree Implementation
Binary Merkle tree over an ordered sequence of leaves, stored as a flat array.

This module provides:
- MerkleTree: immutable tree holding the flat node array
- build_from_payloads / build_from_digests: tree construction
- hash_pair: parent digest of two children
- tree_root / tree_depth: queries that also accept an absent tree (None)

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = hasher(payload) for raw payloads
2. Parent hashing: parent = hasher(left || right)
3. Layout: leaves are padded to the next power of two L, the array holds
   2L - 1 slots; slots [n, L) are padding and stay empty (None)
4. Left child empty: parent is empty (whole subtree is padding)
5. Right child empty: parent = hasher(left || left)
6. Empty input: no tree (None); its root is UNDEF_HASH and depth 0
7. Single leaf: root = leaf, depth 0

Determinism Notes:
- The hash function is passed in explicitly; nothing is read from globals
- This module never sorts leaves - it trusts input order
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from simplemerkle.crypto.digest import UNDEF_HASH, Digest
from simplemerkle.crypto.hashing import Hasher, calc_hash


logger = logging.getLogger(__name__)


def next_power_of_two(n: int) -> int:
    """
    Return n if it is already a power of two, else the next higher one.

    Example:
        >>> [next_power_of_two(n) for n in (1, 2, 3, 5, 8)]
        [1, 2, 4, 8, 8]
    """
    if n & (n - 1) == 0:
        return n
    return 1 << n.bit_length()


def hash_pair(left: Digest, right: Digest, hasher: Hasher = calc_hash) -> Digest:
    """
    Compute the parent digest of two child nodes.

    The buffer is left's bytes followed by right's bytes; the order is part
    of the commitment, so hash_pair(a, b) != hash_pair(b, a) for a != b.

    Args:
        left: Left child digest
        right: Right child digest
        hasher: Hash function applied to the concatenation

    Returns:
        Parent digest
    """
    return hasher(left.bytes() + right.bytes())


class MerkleTree:
    """
    A binary Merkle tree laid out as one flat array of optional digests.

    Slots [0, L) hold the leaves (padding slots are None), slots
    [L, 2L - 1) hold the internal nodes level by level, and the last slot
    holds the root. Instances are built with build_from_digests or
    build_from_payloads and never change afterwards.
    """

    __slots__ = ("_nodes", "_leaf_count")

    def __init__(self, nodes: Sequence[Optional[Digest]], leaf_count: int) -> None:
        self._nodes: tuple[Optional[Digest], ...] = tuple(nodes)
        self._leaf_count = leaf_count

    @property
    def nodes(self) -> tuple[Optional[Digest], ...]:
        """The flat node array (read-only)."""
        return self._nodes

    @property
    def leaf_count(self) -> int:
        """Number of real (non-padding) leaves."""
        return self._leaf_count

    def leaves(self) -> list[Digest]:
        return [node for node in self._nodes[: self._leaf_count] if node is not None]

    def root(self) -> Digest:
        """
        Return the root digest.

        Falls back to UNDEF_HASH if the root slot is empty, which cannot
        happen for a tree with at least one leaf.
        """
        node = self._nodes[-1]
        if node is not None:
            return node
        return UNDEF_HASH

    def depth(self) -> int:
        """
        Return floor(log2(slot count)), the number of levels above the leaves.

        One leaf gives depth 0; n > 1 leaves give ceil(log2(n)).
        """
        return len(self._nodes).bit_length() - 1

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return (
            f"MerkleTree(leaves={self._leaf_count}, depth={self.depth()}, "
            f"root={self.root().short_string()})"
        )


def build_from_digests(
    digests: Sequence[Digest],
    hasher: Hasher = calc_hash,
) -> Optional[MerkleTree]:
    """
    Build a Merkle tree from a sequence of leaf digests.

    Algorithm:
    1. L = next power of two >= len(digests)
    2. Allocate 2L - 1 empty slots and place the digests in [0, n)
    3. Walk slot pairs (i, i + 1) over [0, 2L - 2) in one linear pass,
       writing each parent at an offset starting from L. Because of the
       array layout this visits every level bottom-up.

    Example: [a, b, c] -> slots [a, b, c, None, ab, cc, root]

    Args:
        digests: Leaf digests. Order matters and is preserved.
        hasher: Hash function for internal nodes

    Returns:
        The tree, or None for an empty input
    """
    if len(digests) == 0:
        return None

    next_pot = next_power_of_two(len(digests))
    array_size = next_pot * 2 - 1
    merkles: list[Optional[Digest]] = [None] * array_size
    merkles[: len(digests)] = digests

    # Parents start right after the padded leaf level
    offset = next_pot
    for i in range(0, array_size - 1, 2):
        left = merkles[i]
        right = merkles[i + 1]
        if left is None:
            merkles[offset] = None
        elif right is None:
            merkles[offset] = hash_pair(left, left, hasher)
        else:
            merkles[offset] = hash_pair(left, right, hasher)
        offset += 1

    tree = MerkleTree(merkles, len(digests))
    logger.debug(
        f"Built Merkle tree: {len(digests)} leaves, {array_size} slots, "
        f"root {tree.root().short_string()}"
    )
    return tree


def build_from_payloads(
    payloads: Sequence[bytes],
    hasher: Hasher = calc_hash,
) -> Optional[MerkleTree]:
    """
    Build a Merkle tree from raw payloads, hashing each one as a leaf.

    Args:
        payloads: Raw byte payloads. Order matters and is preserved.
        hasher: Hash function for leaves and internal nodes

    Returns:
        The tree, or None for an empty input
    """
    digests = [hasher(payload) for payload in payloads]
    return build_from_digests(digests, hasher)


def tree_root(tree: Optional[MerkleTree]) -> Digest:
    """Root of a possibly absent tree; UNDEF_HASH when tree is None."""
    if tree is None:
        return UNDEF_HASH
    return tree.root()


def tree_depth(tree: Optional[MerkleTree]) -> int:
    """Depth of a possibly absent tree; 0 when tree is None."""
    if tree is None:
        return 0
    return tree.depth()


__all__ = [
    "MerkleTree",
    "next_power_of_two",
    "hash_pair",
    "build_from_digests",
    "build_from_payloads",
    "tree_root",
    "tree_depth",
]
