"""Parse delimited matrix text into a two-level table.

The first non-comment line is the header: its first field is the corner
label (kept positionally, never used) and the remaining fields are the
axis-2 labels. Every following line starts with its axis-1 label and must
have exactly as many fields as the header.

Key capabilities:
- Whitespace-run splitting (default) or an exact delimiter string
- ``#`` comment lines are skipped anywhere, including before the header
- Row-major or column-major storage (which axis is the outer key)
- Last-write-wins on duplicate labels, keeping first-seen position
"""

import logging
from typing import Iterable, Optional

from matrix2triplets.contracts import FormatError
from matrix2triplets.schemas import InternalConfig

__all__ = ['TableReader']

logger = logging.getLogger(__name__)


class TableReader:
    """Read a header-plus-rows matrix into ``{outer: {inner: value}}``.

    The returned table is a plain dict of dicts. Insertion order is the
    enumeration order used by every later stage: outer keys appear in the
    order they were first seen, inner keys likewise within each outer key.

    Notes
    -----
    - The whole input is consumed before the table is returned.
    - A duplicate label overwrites the earlier value at the same coordinate
      but does not move it (dict assignment semantics).
    - Empty lines carry no row and are skipped. With whitespace splitting a
      whitespace-only line is empty too; with an explicit delimiter it is
      parsed like any other line, so a line of two tabs under a tab
      delimiter is a row of three empty fields.

    Examples
    --------
    >>> reader = TableReader(config)
    >>> table, header = reader.read(["- a b", "x 1 2", "y 3 4"])
    >>> table
    {'x': {'a': '1', 'b': '2'}, 'y': {'a': '3', 'b': '4'}}
    """

    def __init__(self, config: InternalConfig):
        """Store reader settings from the runtime config.

        Parameters
        ----------
        config : InternalConfig
            Uses ``reader.delimiter`` (None for whitespace runs),
            ``reader.orientation`` and ``reader.comment_prefix``.
        """
        self.delimiter: Optional[str] = config.reader.delimiter
        self.by_column = config.reader.orientation == "col"
        self.comment_prefix = config.reader.comment_prefix

        logger.debug("TableReader initialized: delimiter=%r, orientation=%s",
                     self.delimiter, config.reader.orientation)

    def split(self, line: str) -> list[str]:
        """Split one line into fields."""
        line = line.rstrip("\r\n")
        if self.delimiter is None:
            return line.split()
        return line.split(self.delimiter)

    def is_skipped(self, line: str) -> bool:
        """True for comment lines and lines with no fields."""
        content = line.rstrip("\r\n")
        if content.lstrip().startswith(self.comment_prefix):
            return True
        if self.delimiter is None:
            return not content.strip()
        return not content

    def read(self, lines: Iterable[str]) -> tuple[dict, list[str]]:
        """Parse lines into a table and its header.

        Parameters
        ----------
        lines : iterable of str
            Raw input lines, with or without line terminators.

        Returns
        -------
        table : dict
            ``{axis1: {axis2: value}}``; axis1 is the row label in row-major
            mode and the header label in column-major mode.
        header : list of str
            Header fields including the corner label. Empty for empty input.

        Raises
        ------
        FormatError
            If a data line's field count differs from the header's.
        """
        header: list[str] = []
        table: dict = {}
        n_lines = 0

        for line_number, line in enumerate(lines, start=1):
            if self.is_skipped(line):
                continue

            fields = self.split(line)
            if not header:
                header = fields
                logger.debug("Header at line %d: %d columns", line_number, len(header) - 1)
                continue

            if len(fields) != len(header):
                raise FormatError(line_number, len(header), len(fields))

            label = fields[0]
            for column, value in zip(header[1:], fields[1:]):
                if self.by_column:
                    table.setdefault(column, {})[label] = value
                else:
                    table.setdefault(label, {})[column] = value
            n_lines += 1

        logger.info("Read %d data lines into %d %s", n_lines, len(table),
                    "columns" if self.by_column else "rows")
        return table, header
