"""
Application Layer - Slash Command Service

Orchestrates configurators for a project: first-time scaffolding and
in-place refresh of previously scaffolded files.
"""

from pathlib import Path
from typing import Optional

import structlog

from openspec.application.slash_command_registry import SlashCommandRegistry
from openspec.core.domain.config_schema import OpenSpecConfigSchema
from openspec.core.interfaces.slash_commands import SlashCommandConfiguratorProtocol
from openspec.infrastructure.config_loader import load_openspec_config


class SlashCommandService:
    """Application service for generating and updating slash command files."""

    def __init__(
        self,
        registry: Optional[SlashCommandRegistry] = None,
        config: Optional[OpenSpecConfigSchema] = None,
    ):
        """
        Initialize the service.

        Args:
            registry: Configurator registry (defaults to the built-in tools)
            config: Project configuration (loaded per project when omitted)
        """
        self.registry = registry or SlashCommandRegistry()
        self._config = config
        self.logger = structlog.get_logger().bind(component="slash_command_service")

    def get_config(self, project_path: str | Path) -> OpenSpecConfigSchema:
        """Return the injected configuration or load it from the project."""
        if self._config is not None:
            return self._config
        return load_openspec_config(project_path)

    def resolve_tools(
        self,
        tool_ids: Optional[list[str]],
        default: list[str],
    ) -> list[SlashCommandConfiguratorProtocol]:
        """
        Resolve tool ids to configurators.

        All ids are resolved before anything is written, so an unknown id
        fails the whole operation.

        Raises:
            UnknownToolError: If any id is not registered
        """
        selected = tool_ids if tool_ids else default
        configurators: list[SlashCommandConfiguratorProtocol] = []
        for tool_id in selected:
            configurator = self.registry.get(tool_id)
            if configurator not in configurators:
                configurators.append(configurator)
        return configurators

    async def generate(
        self,
        project_path: str | Path,
        tool_ids: Optional[list[str]] = None,
    ) -> dict[str, list[str]]:
        """
        Scaffold slash command files, overwriting existing ones.

        Args:
            project_path: Project root directory
            tool_ids: Tools to scaffold (defaults to configured tools, then
                all available tools)

        Returns:
            Written relative paths per tool id
        """
        config = self.get_config(project_path)
        configurators = self.resolve_tools(
            tool_ids, config.tools or self.registry.available_tools()
        )

        results: dict[str, list[str]] = {}
        for configurator in configurators:
            results[configurator.tool_id] = await configurator.generate_all(
                str(project_path), config.openspec_dir
            )

        self.logger.info(
            "slash_commands.scaffolded",
            tools=list(results),
            count=sum(len(paths) for paths in results.values()),
        )
        return results

    async def update(
        self,
        project_path: str | Path,
        tool_ids: Optional[list[str]] = None,
    ) -> dict[str, list[str]]:
        """
        Refresh slash command files that already exist.

        Args:
            project_path: Project root directory
            tool_ids: Tools to refresh (defaults to every registered tool)

        Returns:
            Rewritten relative paths per tool id (empty lists included)
        """
        config = self.get_config(project_path)
        configurators = self.resolve_tools(
            tool_ids, [c.tool_id for c in self.registry.get_all()]
        )

        results: dict[str, list[str]] = {}
        for configurator in configurators:
            results[configurator.tool_id] = await configurator.update_existing(
                str(project_path), config.openspec_dir
            )

        self.logger.info(
            "slash_commands.refreshed",
            tools=list(results),
            count=sum(len(paths) for paths in results.values()),
        )
        return results
