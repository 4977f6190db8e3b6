"""
Common test fixtures shared by all test modules.

Provides factory functions for:
- Raw leaf payloads
- Leaf digests
- A reference (level-by-level) Merkle root used to cross-check the
  flat-array builder
"""

from typing import Optional

from simplemerkle.crypto.digest import Digest
from simplemerkle.crypto.hashing import Hasher, calc_hash


def make_payloads(count: int, prefix: str = "leaf") -> list[bytes]:
    """Create `count` distinct payloads: b"leaf0", b"leaf1", ..."""
    return [f"{prefix}{i}".encode() for i in range(count)]


def make_digests(
    count: int,
    prefix: str = "leaf",
    hasher: Hasher = calc_hash,
) -> list[Digest]:
    """Create `count` distinct leaf digests."""
    return [hasher(payload) for payload in make_payloads(count, prefix)]


def reference_root(leaves: list[Digest], hasher: Hasher = calc_hash) -> Optional[Digest]:
    """
    Compute a root level by level over explicit padding.

    Pads the leaf level to a power of two with None, then pairs nodes:
    None when the left node is None, left || left when only the right
    node is None.
    """
    if not leaves:
        return None
    width = 1
    while width < len(leaves):
        width *= 2
    level: list[Optional[Digest]] = list(leaves) + [None] * (width - len(leaves))
    while len(level) > 1:
        next_level: list[Optional[Digest]] = []
        for i in range(0, len(level), 2):
            left, right = level[i], level[i + 1]
            if left is None:
                next_level.append(None)
            elif right is None:
                next_level.append(hasher(bytes(left) + bytes(left)))
            else:
                next_level.append(hasher(bytes(left) + bytes(right)))
        level = next_level
    return level[0]
