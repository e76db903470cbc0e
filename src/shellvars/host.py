"""Access to the host process platform and environment."""

import os
import sys


def get_platform() -> str:
    return sys.platform


def get_env() -> dict[str, str]:
    """Return a shallow copy of the host process environment."""
    return dict(os.environ)
