"""Configuration for the command-line wrapper.

The output format is resolved from, in priority order, the explicit
``--format`` argument, the ``VALID_NPM_NAME_FORMAT`` environment variable, and
finally the ``text`` default.
"""

from __future__ import annotations

import os

from .errors import ConfigError

FORMAT_ENV_VAR = "VALID_NPM_NAME_FORMAT"
DEFAULT_FORMAT = "text"
OUTPUT_FORMATS = ("text", "json")


def resolve_output_format(explicit: str | None = None) -> str:
    """Return the output format to use.

    Raises:
        ConfigError: If the resolved value is not a supported format.
    """
    if explicit is not None:
        value = explicit
        origin = "--format"
    else:
        value = os.environ.get(FORMAT_ENV_VAR, "")
        origin = FORMAT_ENV_VAR
        if not value.strip():
            return DEFAULT_FORMAT

    fmt = value.strip().lower()
    if fmt not in OUTPUT_FORMATS:
        supported = ", ".join(OUTPUT_FORMATS)
        raise ConfigError(f"Invalid output format {value!r} from {origin}. Supported: {supported}")
    return fmt
