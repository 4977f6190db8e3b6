"""
Merkle Tree and Commitments
Deterministic binary Merkle tree construction over a flat node array.

This module provides:
- MerkleTree: immutable tree with root() and depth()
- build_from_payloads / build_from_digests: construction (None for no leaves)
- hash_pair: parent digest of two children, for external verifiers
- tree_root / tree_depth: queries tolerant of an absent tree
- MerkleTreeBuilder: builder bound to one hash function

Commitment Rules:
1. Leaf hashing: hasher(payload)
2. Parent hashing: hasher(left || right)
3. Padding: leaves padded to a power of two with empty slots
4. Lone left child: parent = hasher(left || left)
5. Empty input: no tree, root UNDEF_HASH, depth 0

Usage:
    from simplemerkle.merkle import build_from_payloads, tree_root, tree_depth

    tree = build_from_payloads([b"tx1", b"tx2", b"tx3"])
    root = tree_root(tree)
    depth = tree_depth(tree)
"""
from .merkle_tree import (
    MerkleTree,
    next_power_of_two,
    hash_pair,
    build_from_digests,
    build_from_payloads,
    tree_root,
    tree_depth,
)

from .merkle_builder import (
    MerkleTreeBuilder,
)


__all__ = [
    # Core types
    "MerkleTree",
    # Core functions
    "next_power_of_two",
    "hash_pair",
    "build_from_digests",
    "build_from_payloads",
    "tree_root",
    "tree_depth",
    # Convenience classes
    "MerkleTreeBuilder",
]
