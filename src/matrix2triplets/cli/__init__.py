"""Command-line interface for the converter.

This package contains core execution logic, making scripts/ optional.
"""

from matrix2triplets.cli.run_convert import main, run_conversion, build_config, convert_input

__all__ = ['main', 'run_conversion', 'build_config', 'convert_input']
