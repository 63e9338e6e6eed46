"""
Entry point for running shortestpath as CLI.

Usage:
    python -m shortestpath path
    python -m shortestpath road --seed 7
    python -m shortestpath --help
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
