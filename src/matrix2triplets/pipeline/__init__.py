"""Pipeline modules.

- converter: Reader -> Reducer -> Emitter wiring
"""

from matrix2triplets.pipeline.converter import MatrixConverter

__all__ = [
    "MatrixConverter",
]
