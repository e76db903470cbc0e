"""Parse ``KEY=VALUE`` listings captured from a shell."""

import logging
import re

log = logging.getLogger(__name__)

# Shell integrations (iTerm2 and friends) emit OSC metadata: ESC ... BEL.
ESCAPE_SEQUENCE_RE = re.compile(r"\x1b.*?\x07")

# Variable names cannot contain "=", so the first "=" splits key from value.
ENV_LINE_RE = re.compile(r"^(.+?)=(.*)$")


def strip_escape_sequences(text: str) -> str:
    """Remove ESC...BEL terminal escape sequences from text."""
    return ESCAPE_SEQUENCE_RE.sub("", text)


def parse_env_output(text: str, command: str = "env") -> dict[str, str]:
    """Return the variables listed in ``text``, one ``NAME=value`` per line.

    Values are kept exactly as captured, including surrounding whitespace.
    Lines that are not assignments are logged and skipped.
    """
    variables: dict[str, str] = {}
    for raw_line in strip_escape_sequences(text).split("\n"):
        line = raw_line.lstrip()
        if not line:
            continue
        match = ENV_LINE_RE.match(line)
        if match is None:
            log.warning("%r from %r does not match NAME=value, skipping", line, command)
            continue
        variables[match.group(1).strip()] = match.group(2)
    log.debug("parsed %d variables from %r", len(variables), command)
    return variables
