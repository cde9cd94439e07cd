"""Base Pydantic model with strict defaults for converter configs.

All config schemas inherit from this base to ensure consistent
validation behavior across parameter, user, CLI, and internal configs.
"""

from pydantic import BaseModel, ConfigDict


class ConverterBaseModel(BaseModel):
    """Base model for all configuration schemas.
    
    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Uses Python mode (not JSON mode)

    Strings are NOT stripped: a delimiter may legitimately be a space or
    a tab.
    """
    
    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=True,     # Convert enums to values
    )


def normalize_delimiter(v):
    """Map the ``"tab"`` keyword (any case) to a literal tab character.

    An empty delimiter cannot split anything and is rejected.
    """
    if v == "":
        raise ValueError("delimiter must not be empty")
    if isinstance(v, str) and v.lower() == "tab":
        return "\t"
    return v
