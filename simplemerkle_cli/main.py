"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    simplemerkle root PATH... [--lines | --digests] [--hash ALG] [--expect HEX] [--json]
    simplemerkle config --init [--path PATH]
    simplemerkle config --show

Environment Variables:
    SIMPLEMERKLE_HASH_ALGORITHM   Hash function (default: blake2b256)
    SIMPLEMERKLE_LOG_LEVEL        Log level (default: INFO)
    SIMPLEMERKLE_LOG_FILE         Additional log file
    SIMPLEMERKLE_OUTPUT_FORMAT    human or json (default: human)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from simplemerkle.config.runtime import (
    LOG_LEVELS,
    get_default_config_template,
    load_config,
)
from simplemerkle.crypto.hashing import HASH_ALGORITHMS
from simplemerkle.schemas.errors import SimpleMerkleException
from simplemerkle_cli import __version__
from simplemerkle_cli.commands import root


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="simplemerkle",
        description="Compute binary Merkle tree roots over ordered payloads.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./simplemerkle.yaml or ~/.config/simplemerkle/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=list(LOG_LEVELS),
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute the Merkle root of payload files",
        description="Hash each payload as a leaf and print the tree root and depth.",
    )
    root_parser.add_argument(
        "paths",
        nargs="+",
        help="Input files ('-' for stdin)",
    )
    root_parser.add_argument(
        "--lines",
        action="store_true",
        default=False,
        help="Treat every line as a separate payload",
    )
    root_parser.add_argument(
        "--digests",
        action="store_true",
        default=False,
        help="Inputs hold hex leaf digests, one per line",
    )
    root_parser.add_argument(
        "--hash",
        type=str,
        choices=sorted(HASH_ALGORITHMS),
        default=None,
        help="Hash function (default: from config)",
    )
    root_parser.add_argument(
        "--expect",
        type=str,
        default=None,
        help="Expected root in hex; exit with code 2 on mismatch",
    )
    root_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    root_parser.set_defaults(func=root.root_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="simplemerkle.yaml",
        help="Path for config file (default: simplemerkle.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (SIMPLEMERKLE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: simplemerkle config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=root mismatch from `root --expect`)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except (SimpleMerkleException, OSError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
