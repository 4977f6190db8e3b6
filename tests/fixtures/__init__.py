"""
Test fixtures package for simplemerkle tests.

Usage:
    from fixtures import make_digests, reference_root

    def test_something():
        leaves = make_digests(5)
        assert build_from_digests(leaves).root() == reference_root(leaves)
"""

from .common import (
    make_payloads,
    make_digests,
    reference_root,
)

__all__ = [
    "make_payloads",
    "make_digests",
    "reference_root",
]
