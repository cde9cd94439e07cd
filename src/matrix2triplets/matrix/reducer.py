"""Symmetry validation and lower-triangle reduction.

Enumeration order is insertion order of the outer keys: the order the
reader first saw the rows gives the index of every label. The same index
is used for rows (``ri``) and for columns (``ci``), so a cell is kept when
the column label comes no later than the row label.
"""

import logging

from matrix2triplets.contracts import ShapeError, SymmetryError, assert_lower_triangle
from matrix2triplets.schemas import InternalConfig

__all__ = ['SymmetryReducer']

logger = logging.getLogger(__name__)


class SymmetryReducer:
    """Config-driven symmetry check and triangular reduction."""

    def __init__(self, config: InternalConfig):
        self.enabled = config.symmetry.enabled

        logger.debug("SymmetryReducer initialized: enabled=%s", self.enabled)

    def reduce(self, table: dict) -> dict:
        """Return the lower triangle of a symmetric table.

        Pass-through when symmetry is disabled. A table that is already in
        reduced form is returned unchanged, so reducing twice is a no-op.

        Raises
        ------
        ShapeError
            If a row's cell count differs from the number of rows.
        SymmetryError
            On the first cell pair that is not symmetric.
        """
        if not self.enabled:
            return table

        if self.is_reduced(table):
            logger.info("Table already lower-triangular (%d rows), nothing to reduce", len(table))
            return table

        self.check_square(table)
        self.check_symmetric(table)
        reduced = self._lower_triangle(table)
        assert_lower_triangle(reduced)

        logger.info("Reduced %d x %d symmetric matrix to %d cells",
                    len(table), len(table), sum(len(inner) for inner in reduced.values()))
        return reduced

    @staticmethod
    def check_square(table: dict) -> None:
        """Every row must hold exactly as many cells as there are rows."""
        n_rows = len(table)
        for inner in table.values():
            if len(inner) != n_rows:
                raise ShapeError(n_rows, len(inner))

    def check_symmetric(self, table: dict) -> None:
        """Stop at the first asymmetric pair."""
        for row, inner in table.items():
            for col in inner:
                self.check_pair(table, row, col)

    @staticmethod
    def check_pair(table: dict, row: str, col: str) -> None:
        """Raise SymmetryError unless [row,col] and [col,row] exist and match."""
        has_cell = col in table.get(row, {})
        has_transpose = row in table.get(col, {})

        if has_cell and not has_transpose:
            raise SymmetryError(row, col, SymmetryError.MISSING_TRANSPOSE)
        if has_transpose and not has_cell:
            raise SymmetryError(row, col, SymmetryError.MISSING_CELL)
        if not has_cell:
            return

        value, transposed = table[row][col], table[col][row]
        if value != transposed:
            raise SymmetryError(row, col, SymmetryError.VALUE_MISMATCH, (value, transposed))

    @staticmethod
    def row_index(table: dict) -> dict:
        """Map each row label to its position in insertion order."""
        return {label: i for i, label in enumerate(table)}

    @classmethod
    def is_reduced(cls, table: dict) -> bool:
        """True when row ``ri`` holds exactly the rows at index ``<= ri``.

        Only a reduction result (or a 1 x 1 table) has this shape: a full
        matrix from the reader has the same cell count in every row.
        """
        if not table:
            return False

        index = cls.row_index(table)
        for ri, inner in enumerate(table.values()):
            if len(inner) != ri + 1:
                return False
            if any(index.get(col, ri + 1) > ri for col in inner):
                return False
        return True

    def _lower_triangle(self, table: dict) -> dict:
        """Copy cells with ``ci <= ri``, columns in row-index order."""
        index = self.row_index(table)
        reduced = {}
        for ri, (row, inner) in enumerate(table.items()):
            columns = sorted((col for col in inner if index[col] <= ri), key=index.__getitem__)
            reduced[row] = {col: inner[col] for col in columns}
        return reduced
