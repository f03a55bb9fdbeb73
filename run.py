"""Entry point: ``python run.py [layout.json] [--from A --to B | --validate]``."""
from __future__ import annotations
import sys

from roomfinder.cli import main

if __name__ == "__main__":
    sys.exit(main())
