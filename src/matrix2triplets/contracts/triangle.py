"""Reduction stage contract.

Enforces the guarantee that after symmetry reduction no cell lies strictly
above the diagonal. Rows and columns share one enumeration: the insertion
order of the table's row labels.
"""

from matrix2triplets.contracts.base import require


def assert_lower_triangle(table: dict) -> None:
    """Enforce reduction stage contract.

    Every column label must itself be a row of the table (the symmetry
    check looked the transposed cell up there), and its row index must be
    no greater than the index ``ri`` of the row holding the cell.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    index = {label: i for i, label in enumerate(table)}
    for ri, (row, inner) in enumerate(table.items()):
        for col in inner:
            require(
                col in index,
                f"Reduction contract violated: column '{col}' of row '{row}' is not a row"
            )
            require(
                index[col] <= ri,
                f"Reduction contract violated: cell [{row},{col}] lies above the diagonal"
            )
