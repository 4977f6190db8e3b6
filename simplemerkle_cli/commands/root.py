"""
CLI Root Command

Compute the Merkle root and depth of a set of payloads.

Input modes:
- default: every file is one payload
- --lines: every line of every file is one payload (trailing newline stripped)
- --digests: every non-blank line is a hex leaf digest

A path of "-" reads standard input.

Usage:
    simplemerkle root a.bin b.bin c.bin
    simplemerkle root --lines txs.txt [--hash sha256] [--json]
    simplemerkle root --digests leaves.txt --expect <hex root>
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Iterable

from simplemerkle.crypto.digest import Digest
from simplemerkle.merkle import MerkleTreeBuilder, tree_depth, tree_root
from simplemerkle.schemas.errors import SimpleMerkleException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class RootSummary:
    """Summary of a root computation for CLI output."""
    hash_algorithm: str = ""
    leaf_count: int = 0
    depth: int = 0
    root: str = ""
    expected: str | None = None
    matches: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if self.expected is None:
            del d["expected"]
            del d["matches"]
        return d


def _read_source(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def read_payloads(paths: Iterable[str], lines: bool = False) -> list[bytes]:
    """Read payloads from files, one per file or one per line."""
    payloads: list[bytes] = []
    for path in paths:
        data = _read_source(path)
        if lines:
            payloads.extend(data.splitlines())
        else:
            payloads.append(data)
    return payloads


def read_digests(paths: Iterable[str]) -> list[Digest]:
    """
    Read hex leaf digests, one per non-blank line.

    Raises:
        DigestDecodeException: On a line that is not hex
        DigestLengthException: On a line of the wrong length
    """
    digests: list[Digest] = []
    for path in paths:
        for line in _read_source(path).decode("utf-8").splitlines():
            if line.strip():
                digests.append(Digest.from_string(line))
    return digests


def print_summary_human(summary: RootSummary) -> None:
    """Print summary in human-readable format."""
    print(f"hash: {summary.hash_algorithm}")
    print(f"leaves: {summary.leaf_count}")
    print(f"depth: {summary.depth}")
    print(f"root: {summary.root}")
    if summary.expected is not None:
        print(f"expected: {summary.expected}")
        print(f"matches: {str(summary.matches).lower()}")


def print_summary_json(summary: RootSummary) -> None:
    """Print summary as JSON."""
    print(json.dumps(summary.to_dict(), indent=2))


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    algorithm = args.hash or config.hash_algorithm
    output_json = args.json or config.output_format == "json"

    if args.lines and args.digests:
        print("Error: --lines and --digests are mutually exclusive", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        builder = MerkleTreeBuilder.for_algorithm(algorithm)
        expected = Digest.from_string(args.expect) if args.expect else None
        if args.digests:
            tree = builder.from_digests(read_digests(args.paths))
        else:
            tree = builder.from_payloads(read_payloads(args.paths, lines=args.lines))
    except SimpleMerkleException as e:
        if output_json:
            print(json.dumps({"error": e.to_error_model().model_dump()}, indent=2))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    root = tree_root(tree)
    summary = RootSummary(
        hash_algorithm=algorithm,
        leaf_count=tree.leaf_count if tree is not None else 0,
        depth=tree_depth(tree),
        root=str(root),
    )
    if expected is not None:
        summary.expected = str(expected)
        summary.matches = root == expected
    logger.info(f"Computed root {root.short_string()} over {summary.leaf_count} leaves")

    if output_json:
        print_summary_json(summary)
    else:
        print_summary_human(summary)

    if summary.matches is False:
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
