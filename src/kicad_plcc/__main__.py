"""Allow running as ``python -m kicad_plcc``."""

import sys

from kicad_plcc.cli import main

if __name__ == "__main__":
    sys.exit(main())
