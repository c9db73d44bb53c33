"""Command line harness for the PCG32 output stream."""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from pcg_stream.stream import main


if __name__ == "__main__":
    sys.exit(main())
