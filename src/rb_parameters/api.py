"""Public API for rb-parameters.

This module provides the complete public API: the parameter container,
its vector views, rendering helpers and CLI configuration utilities.
"""

# Parameters
from .parameters import (
    Scalar,
    ParameterNotFoundError,
    RBParameters,
    format_scientific,
    to_vector,
    from_vector,
)

# Constants
from .constants import DEFAULT_PRECISION

# CLI utilities
from .cli.config import read_pyproject, validate_config, get_precision

__version__ = "0.1.0"

__all__ = [
    # Parameters
    "Scalar",
    "ParameterNotFoundError",
    "RBParameters",
    "format_scientific",
    "to_vector",
    "from_vector",

    # Constants
    "DEFAULT_PRECISION",

    # CLI utilities
    "read_pyproject",
    "validate_config",
    "get_precision",

    # Version
    "__version__",
]
