#!/usr/bin/env python3
"""Matrix to triplets converter.

Usage:
    python scripts/matrix2triplets.py matrix.txt
    python scripts/matrix2triplets.py -sym -nsort matrix.txt
    cat matrix.tsv | python scripts/matrix2triplets.py -bycol -delim tab
    python scripts/matrix2triplets.py -config scripts/user_config.py matrix.txt

Note: option defaults live in src/matrix2triplets/schemas/param.py
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from matrix2triplets.cli import main


if __name__ == "__main__":
    sys.exit(main())
