"""Main entry point for running rpncalc_pkg as a module.

This allows running rpncalc with:
    python -m rpncalc_pkg
    python -m rpncalc_pkg "5 ** (4/2)"
    python -m rpncalc_pkg --health-check

This is equivalent to running:
    python -m rpncalc_pkg.cli
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
