"""Entry point for ``python -m subboard``."""

import sys

from subboard.cli import main

if __name__ == "__main__":
    sys.exit(main())
