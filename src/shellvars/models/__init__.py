"""Model package for shellvars."""

from shellvars.models.shell_configuration import ShellConfiguration, TerminalConfiguration

__all__ = [
    "ShellConfiguration",
    "TerminalConfiguration",
]
