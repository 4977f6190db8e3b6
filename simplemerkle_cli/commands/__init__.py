"""
CLI command modules.
"""

from simplemerkle_cli.commands import root

__all__ = ["root"]
