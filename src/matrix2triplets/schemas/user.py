"""UserConfig: Forgiving, minimal config-file configuration.

This schema accepts the ``CONFIG`` dict of a user config file, with
aliases for the historical option names (BYCOL, NSORT, SYM, DELIM, ...).

UserConfig is intentionally minimal - users only specify what they want
to override from the defaults. Validation is lenient: uppercase and
lowercase keys are both accepted and unknown keys are ignored.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from matrix2triplets.schemas.base import ConverterBaseModel, normalize_delimiter


class UserReaderConfig(ConverterBaseModel):
    """User-facing reader config."""
    orientation: Optional[Literal["row", "col"]] = None
    delimiter: Optional[str] = None
    comment_prefix: Optional[str] = None

    @field_validator("orientation", mode="before")
    @classmethod
    def normalize_orientation(cls, v):
        """Accept 'ROW', 'Col', 'byrow', 'bycol'."""
        if isinstance(v, str):
            v = v.lower().strip()
            return v[2:] if v.startswith("by") else v
        return v

    @field_validator("delimiter", mode="before")
    @classmethod
    def map_tab_keyword(cls, v):
        return normalize_delimiter(v)


class UserEmitterConfig(ConverterBaseModel):
    """User-facing emitter config."""
    sort_mode: Optional[str] = None

    @field_validator("sort_mode", mode="before")
    @classmethod
    def normalize_sort_mode(cls, v):
        """Normalize sort mode names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserConfig(ConverterBaseModel):
    """User-facing configuration schema.
    
    Minimal, forgiving, and uses the historical option names. Users only
    specify what they want to override from ParamConfig defaults.
    
    Flag conflicts inside one file are settled here: ``BYCOL`` wins over
    ``BYROW`` and ``NSORT`` wins over ``SORT``.
    
    Usage
    -----
        user_cfg = UserConfig.model_validate({
            "BYCOL": True,
            "NSORT": True,
            "DELIM": "tab",
        })
        
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """
    
    # Historical flat flags
    bycol: Optional[bool] = Field(None, alias="BYCOL")
    byrow: Optional[bool] = Field(None, alias="BYROW")
    sort: Optional[bool] = Field(None, alias="SORT")
    nsort: Optional[bool] = Field(None, alias="NSORT")
    sym: Optional[bool] = Field(None, alias="SYM")
    delim: Optional[str] = Field(None, alias="DELIM")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )
    
    # Nested overrides (advanced users)
    reader: Optional[UserReaderConfig] = None
    emitter: Optional[UserEmitterConfig] = None
    
    model_config = ConverterBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("delim", mode="before")
    @classmethod
    def map_tab_keyword(cls, v):
        return normalize_delimiter(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v
    
    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.
        
        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}
        
        # Reader section
        reader = {}
        if self.bycol:
            reader["orientation"] = "col"
        elif self.byrow:
            reader["orientation"] = "row"
        if self.delim is not None:
            reader["delimiter"] = self.delim
        
        # Merge with explicit reader config
        if self.reader is not None:
            reader.update(self.reader.model_dump(exclude_none=True))
        
        if reader:
            overrides["reader"] = reader
        
        if self.sym is not None:
            overrides["symmetry"] = {"enabled": self.sym}
        
        # Emitter section
        emitter = {}
        if self.nsort:
            emitter["sort_mode"] = "numeric"
        elif self.sort:
            emitter["sort_mode"] = "lex"
        
        if self.emitter is not None:
            emitter.update(self.emitter.model_dump(exclude_none=True))
        
        if emitter:
            overrides["emitter"] = emitter
        
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        
        return overrides
