"""Global constants for rb-parameters.

This module centralizes constants shared by the container, its text
rendering and the CLI.
"""

# Digits after the decimal point in scientific-notation renderings
DEFAULT_PRECISION: int = 6

# Line separating primary from extra parameters in get_string() output
EXTRA_HEADER: str = "Extra parameters:"

# Namespace labels used in error messages and logs
PRIMARY: str = "primary"
EXTRA: str = "extra"
