"""ParamConfig: Defaults for the converter.

This module defines the complete default configuration. ALL options must
have defaults here. No runtime code should define fallback values - this is
the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from matrix2triplets.schemas.base import ConverterBaseModel, normalize_delimiter


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ReaderConfig(ConverterBaseModel):
    """Table reader configuration."""
    orientation: Literal["row", "col"] = Field(
        "row", description="Which axis becomes the outer key of the table"
    )
    delimiter: Optional[str] = Field(
        None, description="Field delimiter, None splits on whitespace runs"
    )
    comment_prefix: str = Field("#", min_length=1)

    @field_validator("delimiter", mode="before")
    @classmethod
    def map_tab_keyword(cls, v):
        """Accept 'tab' for a tab character."""
        return normalize_delimiter(v)


class SymmetryConfig(ConverterBaseModel):
    """Symmetry validation and lower-triangle reduction."""
    enabled: bool = False


class EmitterConfig(ConverterBaseModel):
    """Triplet emitter configuration."""
    sort_mode: Literal["none", "lex", "numeric"] = "none"

    @field_validator("sort_mode", mode="before")
    @classmethod
    def normalize_sort_mode(cls, v):
        """Normalize sort mode names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class LoggingConfig(ConverterBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(ConverterBaseModel):
    """Complete configuration with all defaults.
    
    This is the single source of truth for all converter options.
    Every option MUST have a default here.
    
    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:
    
        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)
    
    Runtime code only sees InternalConfig.
    """
    
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    symmetry: SymmetryConfig = Field(default_factory=SymmetryConfig)
    emitter: EmitterConfig = Field(default_factory=EmitterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
