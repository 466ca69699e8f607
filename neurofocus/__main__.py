"""
Main entry point for NeuroFocus package

This allows running the package with: python -m neurofocus
"""

import sys

from .cli.main import main

if __name__ == "__main__":
    sys.exit(main())
