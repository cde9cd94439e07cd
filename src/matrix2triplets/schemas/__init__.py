"""Pydantic configuration schemas for the matrix-to-triplets converter.

This module provides strictly typed configuration models. All option
validation, coercion, and normalization (e.g. ``"tab"`` delimiter) happens
at schema validation time via Pydantic.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, immutable runtime configuration
ParamConfig : class
    Defaults (complete)
UserConfig : class
    Config-file overrides (forgiving, minimal)
CLIConfig : class
    Command-line overrides
"""

from matrix2triplets.schemas.resolve import resolve_config
from matrix2triplets.schemas.internal import InternalConfig
from matrix2triplets.schemas.param import ParamConfig
from matrix2triplets.schemas.user import UserConfig
from matrix2triplets.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
