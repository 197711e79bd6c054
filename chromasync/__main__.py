"""Entry point for `python -m chromasync`."""
import sys

from chromasync.cli import main

if __name__ == "__main__":
    sys.exit(main())
