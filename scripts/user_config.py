"""Example user configuration for matrix2triplets.

Pass it with ``-config``; command-line flags still take precedence.

Usage:
    python scripts/matrix2triplets.py -config scripts/user_config.py matrix.txt
"""

CONFIG = {
    # ========================================================================
    # LAYOUT
    # ========================================================================
    "BYCOL": False,           # True: column label first (column-major)
    "DELIM": None,            # None = runs of whitespace, "tab" = tab, or any string

    # ========================================================================
    # ORDERING
    # ========================================================================
    "SORT": False,            # Lexicographic order at both levels
    "NSORT": False,           # Numeric order at both levels (wins over SORT)

    # ========================================================================
    # SYMMETRY
    # ========================================================================
    "SYM": False,             # Check symmetry, keep lower triangle + diagonal

    "LOG_LEVEL": "WARNING",
}
