"""
Slash Command Domain Models

The closed set of OpenSpec slash commands and the targets a tool
configurator writes for them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from openspec.core.domain.errors import ConfiguratorDefinitionError


class SlashCommandId(str, Enum):
    """OpenSpec workflow steps exposed as slash commands."""

    PROPOSAL = "proposal"
    APPLY = "apply"
    ARCHIVE = "archive"


ALL_COMMANDS: tuple[SlashCommandId, ...] = (
    SlashCommandId.PROPOSAL,
    SlashCommandId.APPLY,
    SlashCommandId.ARCHIVE,
)


@dataclass(frozen=True)
class SlashCommandTarget:
    """
    A single file a configurator owns.

    Attributes:
        id: Command this file defines
        path: Path relative to the project root (POSIX separators)
        kind: Target kind, always "slash" for command files
    """

    id: SlashCommandId
    path: str
    kind: str = "slash"


COMMAND_DESCRIPTIONS: Mapping[SlashCommandId, str] = {
    SlashCommandId.PROPOSAL: "Scaffold a new OpenSpec change and validate strictly",
    SlashCommandId.APPLY: "Implement an approved OpenSpec change and keep tasks in sync",
    SlashCommandId.ARCHIVE: "Archive a deployed OpenSpec change and update specs",
}


def check_exhaustive(table: Mapping[SlashCommandId, Any], name: str) -> None:
    """
    Verify that a lookup table has an entry for every command id.

    Args:
        table: Static table keyed by SlashCommandId
        name: Table name used in the error message

    Raises:
        ConfiguratorDefinitionError: If any command id is missing
    """
    missing = [command.value for command in ALL_COMMANDS if command not in table]
    if missing:
        raise ConfiguratorDefinitionError(
            f"{name} is missing entries for: {', '.join(missing)}",
            details={"table": name, "missing": missing},
        )


def build_targets(
    lookup: Callable[[SlashCommandId], str],
) -> tuple[SlashCommandTarget, ...]:
    """Derive the ordered targets from a relative path lookup."""
    return tuple(SlashCommandTarget(id=command, path=lookup(command)) for command in ALL_COMMANDS)


check_exhaustive(COMMAND_DESCRIPTIONS, "COMMAND_DESCRIPTIONS")
