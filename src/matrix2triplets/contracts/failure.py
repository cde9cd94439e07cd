"""Centralized failure types for the converter.

Every failure is fatal: the first error stops the conversion and no partial
table is emitted. Core code only raises; ``cli.main`` is the single place
that turns an exception into a diagnostic and an exit status.

Key distinction:
- ValidationError: bad options (handled by Pydantic)
- ConversionError: bad input data (user error, exit status 1)
- ContractViolation: a stage broke its own invariant (programmer error)
"""


class ConversionError(Exception):
    """Base class for fatal conditions caused by the input."""


class InputNotFound(ConversionError, FileNotFoundError):
    """The input path given on the command line does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"input file not found: {path}")


class FormatError(ConversionError, ValueError):
    """A data line has a different field count than the header."""

    def __init__(self, line_number: int, expected: int, found: int):
        self.line_number = line_number
        self.expected = expected
        self.found = found
        super().__init__(
            f"line {line_number}: found {found} fields, header has {expected}"
        )


class ShapeError(ConversionError, ValueError):
    """Symmetry was requested but the matrix is not square."""

    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns
        super().__init__(f"matrix is not square [{rows} x {columns}]")


class SymmetryError(ConversionError, ValueError):
    """Symmetry was requested but a cell pair is not symmetric.

    ``kind`` is one of:

    - ``missing_transpose``: [row,col] exists but [col,row] does not
    - ``missing_cell``: [col,row] exists but [row,col] does not
    - ``value_mismatch``: both exist and differ; ``values`` holds both
    """

    MISSING_TRANSPOSE = "missing_transpose"
    MISSING_CELL = "missing_cell"
    VALUE_MISMATCH = "value_mismatch"

    def __init__(self, row: str, column: str, kind: str, values=None):
        self.row = row
        self.column = column
        self.kind = kind
        self.values = values
        if kind == self.MISSING_TRANSPOSE:
            detail = f"[{row},{column}] exists but [{column},{row}] does not"
        elif kind == self.MISSING_CELL:
            detail = f"[{column},{row}] exists but [{row},{column}] does not"
        else:
            detail = (
                f"[{row},{column}]={values[0]} differs from "
                f"[{column},{row}]={values[1]}"
            )
        super().__init__(f"matrix is not symmetric: {detail}")


class ContractViolation(RuntimeError):
    """Raised when a stage contract is violated.

    This indicates a bug in converter logic, not bad input. It means a
    stage did not produce the invariants it promised.
    """
    pass
