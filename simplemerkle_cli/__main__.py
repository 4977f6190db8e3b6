"""
Module execution entry point.

Allows running with: python -m simplemerkle_cli
"""

import sys
from simplemerkle_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
