"""Commands for rendering and comparing parameter sets."""

import logging
from typing import Dict, List, Optional

import typer
from typer.models import OptionInfo

from ..parameters import RBParameters
from .config import get_precision

logger = logging.getLogger(__name__)


def _normalize_option_value(value):
    """Support calling the Typer command functions directly in tests."""
    return value.default if isinstance(value, OptionInfo) else value


def parse_assignments(raw_values: Optional[List[str]]) -> Dict[str, float]:
    """Parse ``name=value`` strings into a name -> float mapping.

    Later assignments to the same name win.

    Raises:
        typer.BadParameter: If an entry is malformed
    """
    values: Dict[str, float] = {}
    for raw in raw_values or []:
        if "=" not in raw:
            raise typer.BadParameter(f"Malformed assignment '{raw}' (expected name=value)")
        name, text = raw.split("=", 1)
        name = name.strip()
        if not name:
            raise typer.BadParameter(f"Parameter name missing in '{raw}'")
        try:
            values[name] = float(text.strip())
        except ValueError:
            raise typer.BadParameter(f"Value for '{name}' is not a number: {text!r}") from None
    return values


def build_parameters(params: Optional[List[str]], extras: Optional[List[str]] = None) -> RBParameters:
    """Build an RBParameters from CLI assignments."""
    result = RBParameters(parse_assignments(params))
    result.update_extra(parse_assignments(extras))
    return result


def show_command(
    params: List[str] = typer.Option([], "--param", "-p", help="Primary parameter as name=value (repeatable)"),
    extras: List[str] = typer.Option([], "--extra", "-e", help="Extra parameter as name=value (repeatable)"),
    precision: Optional[int] = typer.Option(None, "--precision", help="Digits after the decimal point"),
):
    """Print a parameter set in scientific notation."""
    params = _normalize_option_value(params)
    extras = _normalize_option_value(extras)
    precision = _normalize_option_value(precision)

    if precision is None:
        try:
            precision = get_precision()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2)
    elif precision < 0:
        raise typer.BadParameter("precision must be non-negative", param_hint="--precision")

    parameters = build_parameters(params, extras)
    logger.info(f"Rendering {parameters.n_parameters()} parameters "
                f"and {parameters.n_extra_parameters()} extra parameters at precision {precision}")

    typer.echo(parameters.get_string(precision), nl=False)


def compare_command(
    left: List[str] = typer.Option([], "--left", "-l", help="Left parameter as name=value (repeatable)"),
    right: List[str] = typer.Option([], "--right", "-r", help="Right parameter as name=value (repeatable)"),
):
    """Compare the primary values of two parameter sets.

    Exits with status 0 when they are equal and 1 otherwise.
    """
    left_params = build_parameters(_normalize_option_value(left))
    right_params = build_parameters(_normalize_option_value(right))

    if left_params == right_params:
        typer.echo("equal")
        return

    names = sorted(set(left_params.names()) | set(right_params.names()))
    differing = [
        name for name in names
        if not (name in left_params and name in right_params
                and left_params[name] == right_params[name])
    ]
    logger.info(f"Parameter sets differ in {len(differing)} names")

    typer.echo("different")
    for name in differing:
        lhs = left_params.get_value_or(name, None)
        rhs = right_params.get_value_or(name, None)
        typer.echo(f"  {name}: {_describe(lhs)} != {_describe(rhs)}")
    raise typer.Exit(1)


def _describe(value: Optional[float]) -> str:
    return "<missing>" if value is None else repr(value)
