"""
Core Domain Constants

Shared names and delimiters written into every managed slash command file.
"""

from typing import NamedTuple


class Markers(NamedTuple):
    """Delimiter pair identifying a tool-managed region."""

    start: str
    end: str


OPENSPEC_DIR_NAME = "openspec"

OPENSPEC_MARKERS = Markers(
    start="<!-- OPENSPEC:START -->",
    end="<!-- OPENSPEC:END -->",
)

MANAGED_CONTENT_VERSION = "1.0"

# Multi-line basic string delimiter used for the TOML `prompt` field
TOML_STRING_DELIMITER = '"""'
