"""Matrix-to-triplets conversion pipeline.

Runs the three stages in strict sequence: read the whole input into a
table, optionally reduce it to its lower triangle, then emit triplets.
Nothing is written until reading and reduction have both succeeded, so a
failing input produces no output lines.
"""

import json
import logging
from typing import Iterable, TextIO, TYPE_CHECKING

from matrix2triplets.matrix.reader import TableReader
from matrix2triplets.matrix.reducer import SymmetryReducer
from matrix2triplets.matrix.emitter import TripletEmitter
from matrix2triplets.contracts import assert_parsed

if TYPE_CHECKING:
    from matrix2triplets.schemas import InternalConfig

__all__ = ['MatrixConverter']

logger = logging.getLogger(__name__)


class MatrixConverter:
    """Reader -> [Reducer] -> Emitter.

    Each stage receives the same frozen InternalConfig. The table built by
    the reader is handed to the reducer, whose result replaces it before
    emission.

    Example usage::

        from matrix2triplets.schemas import CLIConfig, ParamConfig, resolve_config
        from matrix2triplets.pipeline import MatrixConverter

        config = resolve_config(ParamConfig(), None, CLIConfig(sort_mode="lex"))
        with open("matrix.txt") as f:
            MatrixConverter(config).convert(f, sys.stdout)
    """

    def __init__(self, config: "InternalConfig"):
        self.config = config
        self.reader = TableReader(config)
        self.reducer = SymmetryReducer(config)
        self.emitter = TripletEmitter(config)

    def build_table(self, lines: Iterable[str]) -> dict:
        """Read and (when configured) reduce; no output is produced."""
        table, header = self.reader.read(lines)
        assert_parsed(table, header, self.config.reader.orientation)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Parsed table:\n%s", json.dumps(table, indent=2))

        return self.reducer.reduce(table)

    def convert(self, lines: Iterable[str], stream: TextIO) -> int:
        """Convert matrix lines to triplet lines written on ``stream``.

        Returns
        -------
        int
            Number of triplets written.

        Raises
        ------
        FormatError, ShapeError, SymmetryError
            Propagated from the stages; nothing has been written yet.
        """
        table = self.build_table(lines)
        return self.emitter.emit(table, stream)
