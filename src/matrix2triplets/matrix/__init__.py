"""Matrix conversion stages.

- reader: Parse delimited text into a two-level table
- reducer: Symmetry check and lower-triangle reduction
- emitter: Triplet output in the configured order
- ordering: Sort helpers shared by the emitter
"""

from matrix2triplets.matrix.reader import TableReader
from matrix2triplets.matrix.reducer import SymmetryReducer
from matrix2triplets.matrix.emitter import TripletEmitter

__all__ = [
    "TableReader",
    "SymmetryReducer",
    "TripletEmitter",
]
