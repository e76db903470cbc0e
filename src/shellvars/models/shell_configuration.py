"""Shell invocation model."""

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat
from pydantic.alias_generators import to_camel

DEFAULT_SHELL = "/bin/bash"


class TerminalConfiguration(BaseModel):
    """Startup mode flags passed to the shell."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    is_interactive: bool = True
    is_login: bool = True


class ShellConfiguration(BaseModel):
    """Which shell to spawn and how to spawn it.

    Fields are accepted under their Python names or camelCase aliases
    (``terminalConfiguration.isLogin``). Unknown keys are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    shell: str = DEFAULT_SHELL
    terminal_configuration: TerminalConfiguration = Field(default_factory=TerminalConfiguration)
    timeout: PositiveFloat | None = None
