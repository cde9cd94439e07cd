"""Write a table as ``<axis1> <axis2> <value>`` lines."""

import logging
from typing import Iterator, TextIO

from matrix2triplets.matrix.ordering import order_labels
from matrix2triplets.schemas import InternalConfig

__all__ = ['TripletEmitter']

logger = logging.getLogger(__name__)


class TripletEmitter:
    """Walk outer keys, then inner keys, and emit one triplet per cell.

    Orientation is already baked into the table by the reader; the emitter
    never transposes. The configured sort mode applies at both levels.
    """

    def __init__(self, config: InternalConfig):
        self.sort_mode = config.emitter.sort_mode

        logger.debug("TripletEmitter initialized: sort_mode=%s", self.sort_mode)

    def triplets(self, table: dict) -> Iterator[tuple[str, str, str]]:
        """Yield ``(axis1, axis2, value)`` in emission order."""
        for outer in order_labels(table, self.sort_mode):
            inner = table[outer]
            for key in order_labels(inner, self.sort_mode):
                yield outer, key, inner[key]

    def emit(self, table: dict, stream: TextIO) -> int:
        """Write triplets to ``stream``, one per line.

        Returns
        -------
        int
            Number of lines written.
        """
        count = 0
        for outer, key, value in self.triplets(table):
            stream.write(f"{outer} {key} {value}\n")
            count += 1

        logger.info("Emitted %d triplets", count)
        return count
