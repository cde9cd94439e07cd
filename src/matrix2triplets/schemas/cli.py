"""CLIConfig: Command-line overrides.

Minimal configuration for the options that change between runs:
orientation, sort mode, symmetry, delimiter, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pydantic import field_validator
from matrix2triplets.schemas.base import ConverterBaseModel, normalize_delimiter


class CLIConfig(ConverterBaseModel):
    """Command-line configuration overrides.
    
    Highest priority in config resolution. Only fields that were actually
    given on the command line are set; None means "not specified".
    
    Usage
    -----
        cli_cfg = CLIConfig(orientation="col", sort_mode="numeric")
        
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """
    
    orientation: Optional[Literal["row", "col"]] = None
    sort_mode: Optional[Literal["none", "lex", "numeric"]] = None
    symmetric: Optional[bool] = None
    delimiter: Optional[str] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @field_validator("delimiter", mode="before")
    @classmethod
    def map_tab_keyword(cls, v):
        return normalize_delimiter(v)
    
    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.
        
        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}
        
        reader_overrides = {}
        if self.orientation is not None:
            reader_overrides["orientation"] = self.orientation
        if self.delimiter is not None:
            reader_overrides["delimiter"] = self.delimiter
        
        if reader_overrides:
            overrides["reader"] = reader_overrides
        
        if self.symmetric is not None:
            overrides["symmetry"] = {"enabled": self.symmetric}
        
        if self.sort_mode is not None:
            overrides["emitter"] = {"sort_mode": self.sort_mode}
        
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        
        return overrides
