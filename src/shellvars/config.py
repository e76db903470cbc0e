"""Configuration for shellvars."""

import logging
import math
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from shellvars.models import ShellConfiguration, TerminalConfiguration
from shellvars.models.shell_configuration import DEFAULT_SHELL

log = logging.getLogger(__name__)

PATH_LIST_FILE = "/etc/paths"
TIMEOUT_ENV_VAR = "SHELLVARS_TIMEOUT"


def get_timeout(env: Mapping[str, str] | None = None) -> float | None:
    """Return the shell invocation timeout from env, or None for no timeout."""
    env = os.environ if env is None else env
    raw = env.get(TIMEOUT_ENV_VAR, "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        log.warning("ignoring %s=%r: not a number", TIMEOUT_ENV_VAR, raw)
        return None
    if not math.isfinite(timeout):
        log.warning("ignoring %s=%r: must be finite", TIMEOUT_ENV_VAR, raw)
        return None
    if timeout <= 0:
        log.warning("ignoring %s=%r: must be positive", TIMEOUT_ENV_VAR, raw)
        return None
    return timeout


def default_configuration(
    platform: str, env: Mapping[str, str] | None = None
) -> ShellConfiguration:
    """Return the shell configuration used when the caller overrides nothing."""
    env = os.environ if env is None else env
    shell = env.get("SHELL", "").strip() or DEFAULT_SHELL
    # Linux terminal emulators start non-login shells; macOS starts login shells.
    is_login = platform != "linux"
    return ShellConfiguration(
        shell=shell,
        terminal_configuration=TerminalConfiguration(is_interactive=True, is_login=is_login),
        timeout=get_timeout(env),
    )


def _field_names(model: type[BaseModel], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite camelCase alias keys to field names, recursing into nested models.

    Unknown keys are kept so validation can reject them.
    """
    names = {field.alias or name: name for name, field in model.model_fields.items()}
    normalized: dict[str, Any] = {}
    for key, value in overrides.items():
        name = names.get(key, key)
        annotation = model.model_fields[name].annotation if name in model.model_fields else None
        if (
            isinstance(value, Mapping)
            and isinstance(annotation, type)
            and issubclass(annotation, BaseModel)
        ):
            value = _field_names(annotation, value)
        normalized[name] = value
    return normalized


def _deep_merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def resolve_configuration(
    platform: str,
    user_configuration: ShellConfiguration | Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> ShellConfiguration:
    """Merge caller overrides over the platform defaults.

    Keys missing from ``user_configuration`` (or set to None) keep their
    default. Nested ``terminal_configuration`` mappings are merged key by key,
    so overriding ``is_login`` alone keeps the default ``is_interactive``.
    Keys may use the field names or their camelCase aliases.
    Raises ``pydantic.ValidationError`` for values of the wrong type.
    """
    defaults = default_configuration(platform, env)
    if user_configuration is None:
        return defaults
    if isinstance(user_configuration, ShellConfiguration):
        overrides = user_configuration.model_dump(exclude_unset=True)
    else:
        overrides = _field_names(ShellConfiguration, user_configuration)
    merged = _deep_merge(defaults.model_dump(), overrides)
    return ShellConfiguration.model_validate(merged)
