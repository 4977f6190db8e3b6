"""
simplemerkle CLI

Command-line interface for computing Merkle roots.

Usage:
    python -m simplemerkle_cli root a.bin b.bin
    python -m simplemerkle_cli root --lines txs.txt --json
    python -m simplemerkle_cli config --init
"""

__version__ = "0.1.0"
