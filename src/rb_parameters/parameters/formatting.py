"""Text rendering for parameter sets.

Values are written in C ``%e`` style: one digit before the decimal point,
``precision`` digits after it and a signed two-or-more digit exponent
(``1.500000e+00``). Non-finite values render as ``nan``, ``inf`` and ``-inf``.
"""

import operator
from typing import Iterable, List, Tuple

from ..constants import DEFAULT_PRECISION


def check_precision(precision: int) -> int:
    """Validate a precision argument and return it as a plain int.

    Any integral type is accepted (numpy integers included); bools and
    floats are not.

    Raises:
        TypeError: If precision is not an integer
        ValueError: If precision is negative
    """
    if isinstance(precision, bool):
        raise TypeError("precision must be an int, got bool")
    try:
        precision = operator.index(precision)
    except TypeError:
        raise TypeError(f"precision must be an int, got {type(precision).__name__}") from None
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return precision


def format_scientific(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a single value in scientific notation."""
    return format(value, f".{check_precision(precision)}e")


def format_lines(items: Iterable[Tuple[str, float]],
                 precision: int = DEFAULT_PRECISION) -> List[str]:
    """Render ``(name, value)`` pairs as ``name: value`` lines."""
    return [f"{name}: {format_scientific(value, precision)}" for name, value in items]
