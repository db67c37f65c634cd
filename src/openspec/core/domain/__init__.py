"""
Domain Models

This package contains the core domain models for OpenSpec slash commands:
- Command identifiers and targets
- Managed content constants
- Error types
"""

from openspec.core.domain.constants import (
    MANAGED_CONTENT_VERSION,
    OPENSPEC_DIR_NAME,
    OPENSPEC_MARKERS,
    Markers,
)
from openspec.core.domain.errors import (
    ConfigError,
    ConfiguratorDefinitionError,
    OpenSpecError,
    UnknownToolError,
)
from openspec.core.domain.slash_commands import (
    ALL_COMMANDS,
    COMMAND_DESCRIPTIONS,
    SlashCommandId,
    SlashCommandTarget,
)

__all__ = [
    "ALL_COMMANDS",
    "COMMAND_DESCRIPTIONS",
    "ConfigError",
    "ConfiguratorDefinitionError",
    "MANAGED_CONTENT_VERSION",
    "Markers",
    "OPENSPEC_DIR_NAME",
    "OPENSPEC_MARKERS",
    "OpenSpecError",
    "SlashCommandId",
    "SlashCommandTarget",
    "UnknownToolError",
]
