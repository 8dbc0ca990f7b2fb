"""Parameter containers for reduced-basis models.

This module provides the RBParameters container, its missing-name error and
helpers that view a parameter set as an ordered numpy vector.
"""

from .types import (
    Scalar,
    ParameterNotFoundError,
    RBParameters,
)
from .formatting import format_scientific
from .vectors import to_vector, from_vector

__all__ = [
    # Types
    "Scalar",
    "ParameterNotFoundError",
    "RBParameters",
    # Formatting
    "format_scientific",
    # Vectors
    "to_vector",
    "from_vector",
]
