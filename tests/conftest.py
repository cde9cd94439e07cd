"""Root-level pytest fixtures for the converter test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture. Tests build configs through these fixtures instead of raw dicts.
"""

import pytest

from matrix2triplets.schemas import ParamConfig, UserConfig, CLIConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.
    
    Accepts CLIConfig-compatible kwargs.
    
    Examples
    --------
    >>> def test_numeric(make_config):
    ...     config = make_config(sort_mode="numeric")
    ...     assert TripletEmitter(config).sort_mode == "numeric"
    """
    def _make(**cli_overrides):
        """Create InternalConfig with CLI overrides."""
        if cli_overrides:
            return resolve_config(param_config, None, CLIConfig(**cli_overrides))
        return resolve_config(param_config, None, None)
    
    return _make


# =============================================================================
# Matrix Fixtures
# =============================================================================

@pytest.fixture
def example_lines():
    """3 x 3 rectangular-labelled example matrix."""
    return [
        "- a b c\n",
        "d 1 - 0\n",
        "e 2 5 2\n",
        "f 1 2 3\n",
    ]


@pytest.fixture
def symmetric_lines():
    """Symmetric 3 x 3 matrix with matching row and column labels."""
    return [
        "- a b c\n",
        "a 1 2 3\n",
        "b 2 4 5\n",
        "c 3 5 6\n",
    ]


@pytest.fixture
def reversed_symmetric_lines():
    """Same symmetric matrix with the rows listed in reverse header order."""
    return [
        "- a b c\n",
        "c 3 5 6\n",
        "b 2 4 5\n",
        "a 1 2 3\n",
    ]
