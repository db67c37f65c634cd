"""Gemini CLI slash commands (.gemini/commands/*.toml)."""

from openspec.core.domain.slash_commands import SlashCommandId
from openspec.core.interfaces.logging import LoggerProtocol
from openspec.core.interfaces.slash_commands import (
    FileSystemProtocol,
    SlashCommandBodyProvider,
)
from openspec.infrastructure.slash_commands.toml_configurator import (
    TomlSlashCommandConfigurator,
)

GEMINI_TOOL_ID = "gemini"

GEMINI_FILE_PATHS: dict[SlashCommandId, str] = {
    SlashCommandId.PROPOSAL: ".gemini/commands/openspec_proposal.toml",
    SlashCommandId.APPLY: ".gemini/commands/openspec_apply.toml",
    SlashCommandId.ARCHIVE: ".gemini/commands/openspec_archive.toml",
}


def create_gemini_configurator(
    body_provider: SlashCommandBodyProvider | None = None,
    file_system: FileSystemProtocol | None = None,
    logger: LoggerProtocol | None = None,
) -> TomlSlashCommandConfigurator:
    """Create the Gemini CLI configurator."""
    return TomlSlashCommandConfigurator(
        GEMINI_TOOL_ID,
        GEMINI_FILE_PATHS,
        body_provider=body_provider,
        file_system=file_system,
        logger=logger,
    )
