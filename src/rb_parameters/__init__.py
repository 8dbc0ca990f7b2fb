"""rb-parameters: Named scalar parameter sets for reduced-basis methods.

This package provides the parameter container passed between the training,
sampling and solve stages of a reduced-basis model order reduction workflow.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
