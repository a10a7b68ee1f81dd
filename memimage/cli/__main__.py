"""
memimage CLI entry point.

Usage:
    python -m memimage.cli check <name>
    python -m memimage.cli rename <name> <new_name>
    python -m memimage.cli rules
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
