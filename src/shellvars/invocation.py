"""Build the command lines used to run commands inside the user's shell."""

import shlex
from os import PathLike

from shellvars.models import ShellConfiguration


def build_shell_prefix(config: ShellConfiguration) -> str:
    """Return ``"<shell>" -[i][l]c`` for the configured shell and flags."""
    terminal = config.terminal_configuration
    interactive_flag = "i" if terminal.is_interactive else ""
    login_flag = "l" if terminal.is_login else ""
    return f'"{config.shell}" -{interactive_flag}{login_flag}c'


def build_command(prefix: str, command: str, profile: str | PathLike[str] | None = None) -> str:
    """Append ``command`` to the shell prefix as a single quoted argument.

    With a profile, the shell sources it first. The two steps are joined with
    ``;`` so a failing profile still lets ``command`` run.
    """
    if profile is not None:
        command = f"source {shlex.quote(str(profile))} ; {command}"
    return f"{prefix} {shlex.quote(command)}"
