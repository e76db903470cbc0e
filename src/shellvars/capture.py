"""Capture the environment of a freshly started shell.

Two strategies are available. The helper strategy has the shell start the
current Python interpreter, which dumps its inherited environment as JSON
into a temporary file. The env-command strategy runs ``env`` in the shell and
parses its standard output. Both return None when the capture fails so the
caller can move on to the next strategy.

Shell invocations block until the shell exits. No timeout applies unless one
is passed, so a shell waiting on input will hang the caller.
"""

import json
import logging
import os
import shlex
import subprocess
import sys
import tempfile
from collections.abc import Iterable
from os import PathLike

from shellvars.invocation import build_command
from shellvars.parser import parse_env_output

log = logging.getLogger(__name__)

ENV_COMMAND = "env"

HELPER_SCRIPT = (
    "import json, os, sys\n"
    "with open(sys.argv[1], 'w', encoding='utf-8') as f:\n"
    "    json.dump(dict(os.environ), f)\n"
)


def _run_shell(command: str, timeout: float | None) -> subprocess.CompletedProcess[str]:
    log.debug("running %s", command)
    return subprocess.run(
        command,
        shell=True,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        stdin=subprocess.DEVNULL,
        check=True,
        timeout=timeout,
    )


def _load_snapshot(path: str) -> dict[str, str]:
    """Read a helper snapshot, rejecting anything but a flat string mapping."""
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError(f"snapshot is a {type(payload).__name__}, expected an object")
    for key, value in payload.items():
        if not isinstance(value, str):
            raise ValueError(f"snapshot value for {key!r} is not a string")
    return payload


def capture_with_helper(
    prefix: str,
    profile: str | PathLike[str] | None = None,
    timeout: float | None = None,
) -> dict[str, str] | None:
    """Return the shell's environment as serialized by a helper interpreter."""
    fd, snapshot_path = tempfile.mkstemp(prefix="shellvars_", suffix=".json")
    os.close(fd)
    helper = shlex.join([sys.executable, "-c", HELPER_SCRIPT, snapshot_path])
    command = build_command(prefix, helper, profile)
    try:
        _run_shell(command, timeout)
        env = _load_snapshot(snapshot_path)
    except (subprocess.SubprocessError, OSError, ValueError) as e:
        log.warning("helper interpreter could not capture the environment, trying env: %s", e)
        return None
    finally:
        try:
            os.unlink(snapshot_path)
        except OSError:
            pass
    log.debug("helper captured %d variables", len(env))
    return env


def capture_with_env_command(
    prefix: str,
    profile: str | PathLike[str] | None = None,
    timeout: float | None = None,
) -> dict[str, str] | None:
    """Return the shell's environment parsed from ``env`` output."""
    command = build_command(prefix, ENV_COMMAND, profile)
    try:
        result = _run_shell(command, timeout)
    except (subprocess.SubprocessError, OSError) as e:
        log.error("%s failed: %s", command, e)
        return None
    if not result.stdout:
        log.debug("%s produced no output", command)
        return None
    return parse_env_output(result.stdout, command)


def capture_across_profiles(
    prefix: str,
    profiles: Iterable[str | PathLike[str]],
    timeout: float | None = None,
) -> dict[str, str] | None:
    """Merge ``env`` captures after sourcing each profile, then a plain one.

    The plain capture always runs last and wins on conflicting keys. Returns
    None only when no capture succeeded.
    """
    merged: dict[str, str] = {}
    captured = False
    for profile in [*profiles, None]:
        env = capture_with_env_command(prefix, profile, timeout)
        if env is None:
            continue
        captured = True
        merged.update(env)
    return merged if captured else None
