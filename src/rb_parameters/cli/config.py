"""Configuration handling for the rb-parameters CLI.

Reads the [tool.rb_parameters] table of pyproject.toml.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import tomllib

from ..constants import DEFAULT_PRECISION


def read_pyproject(root: Optional[Path] = None) -> Dict[str, Any]:
    """Read pyproject.toml configuration.

    Args:
        root: Directory holding pyproject.toml (defaults to the current directory)

    Returns:
        The [tool.rb_parameters] section, or empty dict if not found

    Raises:
        FileNotFoundError: If pyproject.toml doesn't exist
        tomllib.TOMLDecodeError: If TOML is malformed
    """
    root = root if root is not None else Path.cwd()
    pyproject_path = root / "pyproject.toml"

    if not pyproject_path.exists():
        raise FileNotFoundError("pyproject.toml not found in current directory")

    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    return data.get("tool", {}).get("rb_parameters", {})


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate rb_parameters configuration.

    Args:
        config: The [tool.rb_parameters] configuration

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    unknown = sorted(set(config) - {"precision"})
    for key in unknown:
        errors.append(f"Unknown configuration key: {key}")

    if "precision" in config:
        precision = config["precision"]
        if isinstance(precision, bool) or not isinstance(precision, int):
            errors.append(f"precision must be an integer, got: {precision!r}")
        elif precision < 0:
            errors.append(f"precision must be non-negative, got: {precision}")

    return errors


def get_precision(root: Optional[Path] = None) -> int:
    """Resolve the default rendering precision.

    Falls back to DEFAULT_PRECISION when pyproject.toml is absent or does not
    set one.

    Raises:
        ValueError: If the configuration is invalid
    """
    try:
        config = read_pyproject(root)
    except FileNotFoundError:
        return DEFAULT_PRECISION

    errors = validate_config(config)
    if errors:
        raise ValueError("Invalid [tool.rb_parameters] configuration: " + "; ".join(errors))

    return config.get("precision", DEFAULT_PRECISION)
