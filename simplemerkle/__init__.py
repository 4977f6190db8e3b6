"""
simplemerkle - binary Merkle hash trees over ordered payloads.

Usage:
    from simplemerkle import build_from_payloads, tree_root, tree_depth

    tree = build_from_payloads([b"a", b"b", b"c"])
    print(tree_root(tree), tree_depth(tree))
"""

from simplemerkle.crypto import (
    HASH_SIZE,
    UNDEF_HASH,
    Digest,
    Hasher,
    calc_hash,
)
from simplemerkle.merkle import (
    MerkleTree,
    MerkleTreeBuilder,
    build_from_digests,
    build_from_payloads,
    hash_pair,
    tree_depth,
    tree_root,
)

__version__ = "0.1.0"

__all__ = [
    "HASH_SIZE",
    "UNDEF_HASH",
    "Digest",
    "Hasher",
    "calc_hash",
    "MerkleTree",
    "MerkleTreeBuilder",
    "build_from_digests",
    "build_from_payloads",
    "hash_pair",
    "tree_depth",
    "tree_root",
]
