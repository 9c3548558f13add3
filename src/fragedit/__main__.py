"""Run fragedit as a module: ``python -m fragedit``."""

import sys

from fragedit.cli import main

if __name__ == "__main__":
    sys.exit(main())
