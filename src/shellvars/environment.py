"""Resolve the environment variables of the user's login shell."""

import logging
from collections.abc import Mapping
from typing import Any

from shellvars import host
from shellvars.capture import capture_across_profiles, capture_with_helper
from shellvars.config import resolve_configuration
from shellvars.invocation import build_shell_prefix
from shellvars.models import ShellConfiguration
from shellvars.paths import augment_path
from shellvars.profiles import find_profiles, shell_name

log = logging.getLogger(__name__)


def get_environment_variables(
    user_configuration: ShellConfiguration | Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Return the environment variables the user has in their terminal.

    Tries, in order, a helper interpreter started from the shell, ``env``
    output after sourcing each login profile, and finally the host process's
    own environment. Capture failures are logged, never raised, so a caller
    cannot tell a captured environment from the fallback by the return value
    alone. On Windows the host environment is returned as-is.
    """
    platform = host.get_platform()
    if platform == "win32":
        return host.get_env()

    config = resolve_configuration(platform, user_configuration, host.get_env())
    prefix = build_shell_prefix(config)
    log.debug("shell prefix: %s", prefix)

    env = capture_with_helper(prefix, timeout=config.timeout)
    if env is None:
        profiles = find_profiles(shell_name(config.shell))
        env = capture_across_profiles(prefix, profiles, timeout=config.timeout)
    if env is None:
        log.warning("could not capture the environment of %s, using the current one", config.shell)
        env = host.get_env()

    return augment_path(env)
