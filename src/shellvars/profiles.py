"""Locate a user's shell login profiles."""

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

# Login shells read the first of these that exists; the rc file comes last.
PROFILE_TEMPLATES = (
    ".bash_profile",
    ".bash_login",
    ".profile",
    ".bashrc",
)


def shell_name(shell_path: str) -> str:
    """Return the short name of a shell executable (``/bin/zsh`` -> ``zsh``)."""
    return os.path.basename(shell_path.rstrip("/\\")) or shell_path


def profile_candidates(shell: str, home: Path | None = None) -> list[Path]:
    """Return every profile path for ``shell`` in precedence order."""
    home = Path.home() if home is None else home
    return [home / template.replace("bash", shell) for template in PROFILE_TEMPLATES]


def find_profiles(shell: str, home: Path | None = None) -> list[Path]:
    """Return the existing profile files for ``shell`` in precedence order."""
    found = [path for path in profile_candidates(shell, home) if path.is_file()]
    log.debug("profiles for %s: %s", shell, [str(path) for path in found])
    return found
