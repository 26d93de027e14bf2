"""Entry point for ``python -m dotlink``."""

import sys

from dotlink.cli import main

if __name__ == "__main__":
    sys.exit(main())
