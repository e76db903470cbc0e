"""Read the environment a user's login shell would see."""

from shellvars.environment import get_environment_variables

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "get_environment_variables",
]
