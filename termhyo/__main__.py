"""Allow ``python -m termhyo``."""
import sys

from termhyo.cli import main

if __name__ == "__main__":
    sys.exit(main())
