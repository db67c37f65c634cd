"""
Slash Command Configurator Protocol

Defines the contract every tool-specific configurator satisfies.
A configurator maps the OpenSpec commands onto one tool's file format
and directory layout, and writes the resulting files.
"""

from collections.abc import Callable
from typing import Protocol

from openspec.core.domain.slash_commands import SlashCommandId, SlashCommandTarget

SlashCommandBodyProvider = Callable[[SlashCommandId], str]


class FileSystemProtocol(Protocol):
    """Protocol for the file operations configurators need."""

    def join_path(self, *parts: str) -> str:
        """Join path segments using the platform separator."""
        ...

    async def file_exists(self, path: str) -> bool:
        """Return True if a regular file exists at path."""
        ...

    async def write_file(self, path: str, content: str) -> None:
        """
        Write a UTF-8 text file.

        Creates missing parent directories and overwrites existing content.
        """
        ...


class SlashCommandConfiguratorProtocol(Protocol):
    """
    Protocol for per-tool slash command configurators.

    Attributes:
        tool_id: Stable identifier of the external tool (e.g. "gemini")
        is_available: Whether the tool can be selected for scaffolding
    """

    tool_id: str
    is_available: bool

    def get_targets(self) -> tuple[SlashCommandTarget, ...]:
        """Return one target per command id, in command order."""
        ...

    def get_relative_path(self, command_id: SlashCommandId) -> str:
        """Return the project-relative file path for a command."""
        ...

    def get_frontmatter(self, command_id: SlashCommandId) -> str | None:
        """Return the frontmatter block written ahead of the body, if any."""
        ...

    def get_body(self, command_id: SlashCommandId) -> str:
        """Return the shared markdown body for a command."""
        ...

    def render_content(self, command_id: SlashCommandId) -> str:
        """Render the complete file content for a command without writing it."""
        ...

    async def generate_all(self, project_path: str, openspec_dir: str) -> list[str]:
        """
        Write every command file, overwriting existing content.

        Returns:
            Relative paths of all files written, in target order.
        """
        ...

    async def update_existing(self, project_path: str, openspec_dir: str) -> list[str]:
        """
        Rewrite only the command files that already exist.

        Returns:
            Relative paths of the files rewritten. Missing files are skipped.
        """
        ...
