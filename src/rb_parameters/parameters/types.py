"""Core parameter types for reduced-basis parameter sets.

This module implements the container that describes one sampled point in a
reduced-basis parameter space:
- Scalar: Numeric parameter values (float, int or numpy real scalars)
- ParameterNotFoundError: Strict lookup of a name that is not stored
- RBParameters: Two independent, key-ordered name -> float namespaces

The primary namespace holds the parameters consumed by training and
reduction. The extra namespace carries auxiliary values alongside them and
takes no part in equality.
"""

import logging
import numbers
import sys
import warnings
from typing import Any, Dict, Iterator, List, Mapping, MutableSet, Optional, TextIO, Tuple, Union

from ..constants import DEFAULT_PRECISION, EXTRA, EXTRA_HEADER, PRIMARY
from .formatting import check_precision, format_lines

logger = logging.getLogger(__name__)

# Numeric parameters only - no str
Scalar = Union[float, int]


class ParameterNotFoundError(KeyError):
    """Raised by strict lookups of a name that is not stored.

    Attributes:
        name: The parameter name that was requested
        namespace: "primary" or "extra"
        available: Names stored in that namespace at lookup time
    """

    def __init__(self, name: str, namespace: str = PRIMARY, available: Optional[List[str]] = None):
        self.name = name
        self.namespace = namespace
        self.available = list(available or [])
        super().__init__(name)

    def __str__(self) -> str:
        label = "Extra parameter" if self.namespace == EXTRA else "Parameter"
        return f"{label} not found: {self.name!r}. Available: {self.available}"


def _check_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Parameter name must be str, got {type(name).__name__}")
    return name


def _coerce_value(name: str, value: Scalar) -> float:
    """Convert a numeric value to a plain float without range checks.

    NaN and infinities are stored verbatim.
    """
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Parameter {name} requires a real value, got {type(value).__name__}")
    return float(value)


def _ordered(mapping: Dict[str, float]) -> Iterator[Tuple[str, float]]:
    for name in sorted(mapping):
        yield name, mapping[name]


class RBParameters:
    """Named scalar parameters for one point of a reduced-basis parameter space.

    Both namespaces iterate in ascending name order regardless of insertion
    order. Instances are plain mutable values: copies never share storage, and
    equality compares the primary namespace only.

    Membership, ``len()`` and indexing work on names, but iterating yields
    ``(name, value)`` pairs, so ``"mu_0" in params`` holds while
    ``"mu_0" in list(params)`` does not. Use :meth:`names` for a name list.

    Example:
        >>> params = RBParameters({"mu_1": 2.75, "mu_0": 1.5})
        >>> params.set_extra_value("tag", 7)
        >>> [name for name, _ in params]
        ['mu_0', 'mu_1']
        >>> params == RBParameters({"mu_0": 1.5, "mu_1": 2.75})
        True
    """

    __slots__ = ("_parameters", "_extra_parameters")

    def __init__(self, parameter_map: Optional[Mapping[str, Scalar]] = None):
        """Create a parameter set.

        Args:
            parameter_map: Initial primary values. Extra parameters always
                start empty.
        """
        self._parameters: Dict[str, float] = {}
        self._extra_parameters: Dict[str, float] = {}
        if parameter_map is not None:
            self.update(parameter_map)

    def clear(self) -> None:
        """Remove every primary and extra parameter."""
        self._parameters.clear()
        self._extra_parameters.clear()

    # ------------------------------------------------------------------
    # Primary namespace
    # ------------------------------------------------------------------

    def has_value(self, param_name: str) -> bool:
        """Check if a primary parameter is stored under ``param_name``."""
        return param_name in self._parameters

    def get_value(self, param_name: str) -> float:
        """Get a primary parameter value, failing if it is not stored.

        Args:
            param_name: Parameter name

        Returns:
            The stored value

        Raises:
            ParameterNotFoundError: If the name is absent
        """
        return self._lookup(self._parameters, PRIMARY, param_name)

    def get_value_or(self, param_name: str, default_val: Optional[Scalar]) -> Optional[Scalar]:
        """Get a primary parameter value, or ``default_val`` if it is not stored.

        Never raises for a missing name.
        """
        return self._parameters.get(param_name, default_val)

    def set_value(self, param_name: str, value: Scalar) -> None:
        """Insert or overwrite a primary parameter."""
        self._parameters[_check_name(param_name)] = _coerce_value(param_name, value)

    def erase_parameter(self, param_name: str) -> None:
        """Remove a primary parameter. Absent names are ignored."""
        self._erase(self._parameters, PRIMARY, param_name)

    def n_parameters(self) -> int:
        """Number of primary parameters."""
        return len(self._parameters)

    def names(self) -> List[str]:
        """Primary parameter names in ascending order."""
        return sorted(self._parameters)

    def items(self) -> Iterator[Tuple[str, float]]:
        """Iterate over ``(name, value)`` primary pairs in ascending name order.

        Every call starts a fresh traversal. Do not mutate the primary
        namespace while iterating.
        """
        return _ordered(self._parameters)

    def update(self, parameter_map: Mapping[str, Scalar]) -> None:
        """Set several primary parameters at once.

        All values are checked before any of them is stored.
        """
        coerced = {_check_name(k): _coerce_value(k, v) for k, v in parameter_map.items()}
        self._parameters.update(coerced)

    def to_dict(self) -> Dict[str, float]:
        """Export primary values as a new dict in name order."""
        return dict(self.items())

    def get_parameter_names(self, param_names: MutableSet[str]) -> None:
        """Fill ``param_names`` with the primary parameter names.

        Deprecated: iterate with :meth:`names` or :meth:`items` instead.
        """
        warnings.warn(
            "get_parameter_names() is deprecated; use names() or iterate instead",
            DeprecationWarning,
            stacklevel=2,
        )
        param_names.clear()
        param_names.update(self._parameters)

    # ------------------------------------------------------------------
    # Extra namespace
    # ------------------------------------------------------------------

    def has_extra_value(self, param_name: str) -> bool:
        """Check if an extra parameter is stored under ``param_name``."""
        return param_name in self._extra_parameters

    def get_extra_value(self, param_name: str) -> float:
        """Get an extra parameter value, failing if it is not stored.

        Raises:
            ParameterNotFoundError: If the name is absent
        """
        return self._lookup(self._extra_parameters, EXTRA, param_name)

    def get_extra_value_or(self, param_name: str, default_val: Optional[Scalar]) -> Optional[Scalar]:
        """Get an extra parameter value, or ``default_val`` if it is not stored."""
        return self._extra_parameters.get(param_name, default_val)

    def set_extra_value(self, param_name: str, value: Scalar) -> None:
        """Insert or overwrite an extra parameter."""
        self._extra_parameters[_check_name(param_name)] = _coerce_value(param_name, value)

    def erase_extra_parameter(self, param_name: str) -> None:
        """Remove an extra parameter. Absent names are ignored."""
        self._erase(self._extra_parameters, EXTRA, param_name)

    def n_extra_parameters(self) -> int:
        return len(self._extra_parameters)

    def extra_names(self) -> List[str]:
        return sorted(self._extra_parameters)

    def extra_items(self) -> Iterator[Tuple[str, float]]:
        """Iterate over ``(name, value)`` extra pairs in ascending name order."""
        return _ordered(self._extra_parameters)

    def update_extra(self, parameter_map: Mapping[str, Scalar]) -> None:
        coerced = {_check_name(k): _coerce_value(k, v) for k, v in parameter_map.items()}
        self._extra_parameters.update(coerced)

    def extra_to_dict(self) -> Dict[str, float]:
        return dict(self.extra_items())

    def get_extra_parameter_names(self, param_names: MutableSet[str]) -> None:
        """Fill ``param_names`` with the extra parameter names.

        Deprecated: iterate with :meth:`extra_names` or :meth:`extra_items` instead.
        """
        warnings.warn(
            "get_extra_parameter_names() is deprecated; use extra_names() or iterate instead",
            DeprecationWarning,
            stacklevel=2,
        )
        param_names.clear()
        param_names.update(self._extra_parameters)

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def copy(self) -> "RBParameters":
        """Independent copy of both namespaces."""
        new = RBParameters()
        new._parameters = dict(self._parameters)
        new._extra_parameters = dict(self._extra_parameters)
        return new

    def take(self) -> "RBParameters":
        """Move the contents into a new instance, leaving this one empty."""
        new = RBParameters()
        new._parameters, self._parameters = self._parameters, {}
        new._extra_parameters, self._extra_parameters = self._extra_parameters, {}
        return new

    def __copy__(self) -> "RBParameters":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "RBParameters":
        return self.copy()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_string(self, precision: int = DEFAULT_PRECISION) -> str:
        """Human-readable dump of the parameters.

        One ``name: value`` line per primary parameter, values in scientific
        notation with ``precision`` digits after the decimal point. Extra
        parameters, when present, follow an ``Extra parameters:`` line.
        Meant for logs and diagnostics, not for parsing back.

        Args:
            precision: Digits after the decimal point

        Returns:
            Newline-terminated text, empty for an empty parameter set

        Raises:
            ValueError: If precision is negative
        """
        precision = check_precision(precision)
        lines = format_lines(self.items(), precision)
        if self._extra_parameters:
            lines.append(EXTRA_HEADER)
            lines.extend(format_lines(self.extra_items(), precision))
        return "".join(f"{line}\n" for line in lines)

    def print(self, precision: int = DEFAULT_PRECISION, file: Optional[TextIO] = None) -> None:
        """Write :meth:`get_string` to ``file`` (stdout by default)."""
        stream = file if file is not None else sys.stdout
        stream.write(self.get_string(precision))

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Two parameter sets are equal if their primary values are equal.

        Values are compared with float ``==``, so an entry holding NaN never
        compares equal.
        """
        if not isinstance(other, RBParameters):
            return NotImplemented
        if self._parameters.keys() != other._parameters.keys():
            return False
        return all(value == other._parameters[name] for name, value in self._parameters.items())

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, param_name: str) -> float:
        return self.get_value(param_name)

    def __contains__(self, param_name: object) -> bool:
        return param_name in self._parameters

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[Tuple[str, float]]:
        return self.items()

    def __repr__(self) -> str:
        items = [f"{k}={v!r}" for k, v in self.items()]
        if self._extra_parameters:
            extra = ", ".join(f"{k}={v!r}" for k, v in self.extra_items())
            items.append(f"extra={{{extra}}}")
        return f"RBParameters({', '.join(items)})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _lookup(mapping: Dict[str, float], namespace: str, param_name: str) -> float:
        try:
            return mapping[param_name]
        except KeyError:
            logger.debug(f"Strict lookup of missing {namespace} parameter {param_name!r}")
            raise ParameterNotFoundError(param_name, namespace, sorted(mapping)) from None

    @staticmethod
    def _erase(mapping: Dict[str, float], namespace: str, param_name: str) -> None:
        if mapping.pop(param_name, None) is None:
            logger.debug(f"Erase of absent {namespace} parameter {param_name!r} ignored")
