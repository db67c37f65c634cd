"""
TOML Slash Command Configurator

Writes OpenSpec slash commands for assistants that read TOML command
files (Gemini CLI, Qwen Code). Each file carries a `description`, a
`prompt` multi-line string embedding the markdown body with its own
frontmatter, and an `[openspec]` table marking the file as managed.
"""

from collections.abc import Mapping

import structlog

from openspec.core.domain.constants import (
    MANAGED_CONTENT_VERSION,
    OPENSPEC_MARKERS,
    TOML_STRING_DELIMITER,
)
from openspec.core.domain.slash_commands import (
    COMMAND_DESCRIPTIONS,
    SlashCommandId,
    SlashCommandTarget,
    build_targets,
    check_exhaustive,
)
from openspec.core.interfaces.logging import LoggerProtocol
from openspec.core.interfaces.slash_commands import (
    FileSystemProtocol,
    SlashCommandBodyProvider,
    SlashCommandConfiguratorProtocol,
)
from openspec.core.prompts.slash_command_templates import get_slash_command_body
from openspec.infrastructure.file_system import FileSystemUtils


class TomlSlashCommandConfigurator(SlashCommandConfiguratorProtocol):
    """
    Slash command configurator for TOML based tools.

    One instance per tool; the tool is described entirely by its id and
    its static command-to-path table.
    """

    def __init__(
        self,
        tool_id: str,
        file_paths: Mapping[SlashCommandId, str],
        *,
        body_provider: SlashCommandBodyProvider | None = None,
        file_system: FileSystemProtocol | None = None,
        logger: LoggerProtocol | None = None,
        is_available: bool = True,
    ):
        """
        Initialize the configurator.

        Args:
            tool_id: Tool identifier (e.g. "gemini")
            file_paths: Relative file path per command id
            body_provider: Markdown body per command (defaults to shared templates)
            file_system: File operations (defaults to FileSystemUtils)
            logger: Logger (defaults to a bound structlog logger)
            is_available: Whether the tool can be selected

        Raises:
            ConfiguratorDefinitionError: If file_paths misses a command id
        """
        check_exhaustive(file_paths, f"{tool_id} file paths")
        self.tool_id = tool_id
        self.is_available = is_available
        self._file_paths = dict(file_paths)
        self._body_provider = body_provider or get_slash_command_body
        self._fs = file_system or FileSystemUtils()
        self.logger = logger or structlog.get_logger().bind(
            component="slash_configurator", tool=tool_id
        )

    def get_targets(self) -> tuple[SlashCommandTarget, ...]:
        return build_targets(self.get_relative_path)

    def get_relative_path(self, command_id: SlashCommandId) -> str:
        return self._file_paths[command_id]

    def get_frontmatter(self, command_id: SlashCommandId) -> str | None:
        # Frontmatter lives inside the TOML prompt string instead
        return None

    def get_body(self, command_id: SlashCommandId) -> str:
        return self._body_provider(command_id).strip()

    def render_content(self, command_id: SlashCommandId) -> str:
        return self.generate_toml_content(command_id, self.get_body(command_id))

    async def generate_all(self, project_path: str, openspec_dir: str) -> list[str]:
        """Write all command files unconditionally."""
        created_or_updated: list[str] = []

        for target in self.get_targets():
            body = self.get_body(target.id)
            file_path = self._fs.join_path(project_path, target.path)
            content = self.generate_toml_content(target.id, body)

            await self._fs.write_file(file_path, content)
            created_or_updated.append(target.path)

        self.logger.info("slash_commands.generated", count=len(created_or_updated))
        return created_or_updated

    async def update_existing(self, project_path: str, openspec_dir: str) -> list[str]:
        """Rewrite command files that already exist; never create new ones."""
        updated: list[str] = []

        for target in self.get_targets():
            file_path = self._fs.join_path(project_path, target.path)
            if not await self._fs.file_exists(file_path):
                self.logger.debug("slash_command.skipped", path=target.path)
                continue

            body = self.get_body(target.id)
            content = self.generate_toml_content(target.id, body)
            await self._fs.write_file(file_path, content)
            updated.append(target.path)

        self.logger.info("slash_commands.updated", count=len(updated))
        return updated

    def generate_toml_content(self, command_id: SlashCommandId, body: str) -> str:
        """
        Render the TOML command file for a command.

        The body is embedded verbatim in a multi-line basic string. A body
        containing the string delimiter yields invalid TOML; it is logged
        but not escaped.

        Args:
            command_id: Command being rendered
            body: Markdown body

        Returns:
            Complete file content, ending with a newline
        """
        description = COMMAND_DESCRIPTIONS[command_id]

        if TOML_STRING_DELIMITER in body:
            self.logger.warning(
                "toml.delimiter_collision",
                command=command_id.value,
                delimiter=TOML_STRING_DELIMITER,
            )

        markdown_content = f"---\ndescription: {description}\n---\n\n{body}"

        return (
            f'description = "{description}"\n'
            "\n"
            f"prompt = {TOML_STRING_DELIMITER}\n"
            f"{markdown_content}\n"
            f"{TOML_STRING_DELIMITER}\n"
            "\n"
            "[openspec]\n"
            "managed = true\n"
            f'version = "{MANAGED_CONTENT_VERSION}"\n'
            f'markers = {{ start = "{OPENSPEC_MARKERS.start}", '
            f'end = "{OPENSPEC_MARKERS.end}" }}\n'
        )
