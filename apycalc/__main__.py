"""Entry point: ``python -m apycalc``."""

import sys

from apycalc.cli import main

if __name__ == "__main__":
    sys.exit(main())
