"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and frozen. The reader, reducer and emitter each receive it
explicitly; there is no module-level option state.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, Field, field_validator
from matrix2triplets.schemas.base import ConverterBaseModel, normalize_delimiter


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalReaderConfig(ConverterBaseModel):
    """Runtime reader configuration."""
    orientation: Literal["row", "col"]
    delimiter: Optional[str]  # None = whitespace runs
    comment_prefix: str = Field(min_length=1)

    @field_validator("delimiter", mode="before")
    @classmethod
    def map_tab_keyword(cls, v):
        return normalize_delimiter(v)


class InternalSymmetryConfig(ConverterBaseModel):
    """Runtime symmetry configuration."""
    enabled: bool


class InternalEmitterConfig(ConverterBaseModel):
    """Runtime emitter configuration."""
    sort_mode: Literal["none", "lex", "numeric"]


class InternalLoggingConfig(ConverterBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(ConverterBaseModel):
    """Authoritative runtime configuration.
    
    This is the ONLY configuration schema that processing code sees.
    It is fully validated, immutable, and contains explicit values for
    all options.
    
    Usage
    -----
    Runtime classes receive InternalConfig and access fields directly:
    
        def __init__(self, config: InternalConfig):
            self.delimiter = config.reader.delimiter  # NOT .get()
            self.sort_mode = config.emitter.sort_mode
    
    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation
    
    All of that happens during config resolution, not in runtime code.
    """
    
    reader: InternalReaderConfig
    symmetry: InternalSymmetryConfig
    emitter: InternalEmitterConfig
    logging: InternalLoggingConfig
    
    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        frozen=True,  # Immutable after construction
    )
