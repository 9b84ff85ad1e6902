"""Entry point for ``python -m shapecalc``."""

import sys

from shapecalc.pipeline import main

if __name__ == "__main__":
    sys.exit(main())
