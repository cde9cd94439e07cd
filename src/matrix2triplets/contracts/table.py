"""Reader stage contract.

Enforces the guarantee that a parsed table only holds string cells whose
inner keys come from the axis the reader assigned to them.
"""

from matrix2triplets.contracts.base import require


def assert_parsed(table: dict, header: list, orientation: str) -> None:
    """Enforce reader stage contract.

    Called immediately after reading. In row-major orientation every inner
    key must be a header label; in column-major orientation every outer
    key must be.

    Parameters
    ----------
    table : dict
        Two-level mapping from TableReader.read()

    header : list
        Header fields, position 0 is the corner label

    orientation : str
        "row" or "col" (from config)

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    if not table:
        return

    require(len(header) > 1, "Reader contract violated: table without header columns")

    columns = set(header[1:])
    for outer, inner in table.items():
        require(
            isinstance(inner, dict),
            f"Reader contract violated: row '{outer}' is {type(inner).__name__}, expected dict"
        )
        if orientation == "col":
            require(
                outer in columns,
                f"Reader contract violated: outer key '{outer}' is not a header label"
            )
        else:
            stray = [key for key in inner if key not in columns]
            require(
                not stray,
                f"Reader contract violated: row '{outer}' has non-header keys {stray}"
            )
