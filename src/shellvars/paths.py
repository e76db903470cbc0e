"""Extend PATH with the system path-list file."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from shellvars.config import PATH_LIST_FILE

log = logging.getLogger(__name__)


def read_path_list(path_list_file: str | os.PathLike[str]) -> list[str]:
    """Return the trimmed, non-blank entries of a path-list file in file order."""
    text = Path(path_list_file).read_text(encoding="utf-8")
    return [entry for entry in (row.strip() for row in text.split("\n")) if entry]


def augment_path(
    env: Mapping[str, str],
    path_list_file: str | os.PathLike[str] | None = None,
) -> dict[str, str]:
    """Return a copy of ``env`` with the path-list entries appended to PATH."""
    if path_list_file is None:
        path_list_file = PATH_LIST_FILE
    augmented = dict(env)
    if not os.path.isfile(path_list_file):
        return augmented
    try:
        entries = read_path_list(path_list_file)
    except (OSError, UnicodeDecodeError) as e:
        log.warning("could not read %s: %s", path_list_file, e)
        return augmented
    if not entries:
        return augmented

    additions = os.pathsep.join(entries)
    if augmented.get("PATH"):
        augmented["PATH"] += os.pathsep + additions
    else:
        augmented["PATH"] = additions
    log.debug("appended %d entries from %s to PATH", len(entries), path_list_file)
    return augmented
