"""`matrix2triplets` - flatten a labelled matrix into (row, column, value) triplets.

Subpackages:
- schemas: Configuration layers and resolution
- contracts: Failure types and stage contracts
- matrix: Table reader, symmetry reducer, triplet emitter
- pipeline: Converter wiring the stages together
- cli: Command-line entry point
"""

__version__ = "0.1.0"
