"""
Entry point for running funclang as a module.

Usage:
    python -m funclang parse input.fl
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
