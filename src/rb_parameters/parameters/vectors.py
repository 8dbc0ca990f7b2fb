"""Ordered vector views of parameter sets.

Reduced-basis assembly and solve routines work with parameter vectors whose
entries follow a fixed name ordering. These helpers convert between an
RBParameters primary namespace and such vectors:

    mu ∈ R^n  ↔  RBParameters

The ordering defaults to ascending names, matching RBParameters iteration.
"""

from typing import Optional, Sequence

import numpy as np

from .types import RBParameters


def to_vector(params: RBParameters, names: Optional[Sequence[str]] = None) -> np.ndarray:
    """Convert primary values to a float64 vector.

    Args:
        params: Source parameter set
        names: Ordering of vector entries. Defaults to ``params.names()``.

    Returns:
        Array of shape ``(len(names),)``

    Raises:
        ParameterNotFoundError: If a requested name is not a primary parameter

    Example:
        >>> to_vector(RBParameters({"b": 2.0, "a": 1.0}))
        array([1., 2.])
    """
    if names is None:
        names = params.names()
    return np.array([params.get_value(name) for name in names], dtype=np.float64)


def from_vector(names: Sequence[str], values: Sequence[float]) -> RBParameters:
    """Build an RBParameters from parallel name and value sequences.

    Args:
        names: Parameter names, one per vector entry
        values: 1-D array-like of values

    Returns:
        New RBParameters with the values in its primary namespace

    Raises:
        ValueError: If lengths differ, values are not 1-D, or names repeat
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected 1-D values, got shape {arr.shape}")
    if len(names) != arr.shape[0]:
        raise ValueError(f"Length mismatch: {len(names)} names for {arr.shape[0]} values")
    if len(set(names)) != len(names):
        duplicates = sorted({n for n in names if list(names).count(n) > 1})
        raise ValueError(f"Duplicate parameter names: {duplicates}")

    return RBParameters({name: float(value) for name, value in zip(names, arr)})
