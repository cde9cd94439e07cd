"""Configuration resolution and merging logic.

This module provides the single entrypoint for configuration resolution:
resolve_config(). It merges ParamConfig, UserConfig, and CLIConfig in
the correct precedence order and returns a validated InternalConfig.

Precedence (highest to lowest):
1. CLIConfig (command-line overrides)
2. UserConfig (config file)
3. ParamConfig (defaults)
"""

from typing import Optional
from matrix2triplets.schemas.param import ParamConfig
from matrix2triplets.schemas.user import UserConfig
from matrix2triplets.schemas.cli import CLIConfig
from matrix2triplets.schemas.internal import InternalConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.
    
    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.
    
    Parameters
    ----------
    base : dict
        Base dictionary (lowest priority)
    *overrides : dict
        Override dictionaries (higher priority, left to right)
    
    Returns
    -------
    dict
        Merged dictionary
    
    Examples
    --------
    >>> base = {"reader": {"orientation": "row", "delimiter": None}}
    >>> override = {"reader": {"delimiter": ","}, "symmetry": {"enabled": True}}
    >>> deep_merge(base, override)
    {'reader': {'orientation': 'row', 'delimiter': ','}, 'symmetry': {'enabled': True}}
    """
    result = base.copy()
    
    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value
    
    return result


def resolve_config(
    param_cfg: ParamConfig,
    user_cfg: Optional[UserConfig] = None,
    cli_cfg: Optional[CLIConfig] = None,
) -> InternalConfig:
    """Merge the three layers and validate the result into an InternalConfig.

    Each layer is an already validated model; a missing user or CLI layer
    contributes no overrides. Raises ``ValidationError`` when the merged
    values are not a valid runtime configuration.

    >>> from matrix2triplets.schemas import resolve_config, ParamConfig, UserConfig
    >>> config = resolve_config(ParamConfig(), UserConfig.model_validate({"NSORT": True, "DELIM": "tab"}))
    >>> config.emitter.sort_mode, config.reader.delimiter
    ('numeric', '\\t')
    """
    layers = [layer.to_internal_overrides() for layer in (user_cfg, cli_cfg) if layer is not None]
    return InternalConfig.model_validate(deep_merge(param_cfg.model_dump(), *layers))
