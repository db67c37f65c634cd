"""Qwen Code slash commands (.qwen/commands/*.toml)."""

from openspec.core.domain.slash_commands import SlashCommandId
from openspec.core.interfaces.logging import LoggerProtocol
from openspec.core.interfaces.slash_commands import (
    FileSystemProtocol,
    SlashCommandBodyProvider,
)
from openspec.infrastructure.slash_commands.toml_configurator import (
    TomlSlashCommandConfigurator,
)

QWEN_TOOL_ID = "qwen"

QWEN_FILE_PATHS: dict[SlashCommandId, str] = {
    SlashCommandId.PROPOSAL: ".qwen/commands/openspec_proposal.toml",
    SlashCommandId.APPLY: ".qwen/commands/openspec_apply.toml",
    SlashCommandId.ARCHIVE: ".qwen/commands/openspec_archive.toml",
}


def create_qwen_configurator(
    body_provider: SlashCommandBodyProvider | None = None,
    file_system: FileSystemProtocol | None = None,
    logger: LoggerProtocol | None = None,
) -> TomlSlashCommandConfigurator:
    """Create the Qwen Code configurator."""
    return TomlSlashCommandConfigurator(
        QWEN_TOOL_ID,
        QWEN_FILE_PATHS,
        body_provider=body_provider,
        file_system=file_system,
        logger=logger,
    )
