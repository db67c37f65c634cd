"""
Slash Command Registry

Central registry of tool configurators, keyed by tool id.
"""

import structlog

from openspec.core.domain.errors import UnknownToolError
from openspec.core.interfaces.slash_commands import SlashCommandConfiguratorProtocol
from openspec.infrastructure.slash_commands import (
    create_gemini_configurator,
    create_qwen_configurator,
)


class SlashCommandRegistry:
    """
    Registry of slash command configurators.

    Responsibilities:
    - Hold one configurator per tool id
    - Resolve tool ids, rejecting unknown ones
    - Report which tools can be scaffolded
    """

    def __init__(
        self,
        configurators: list[SlashCommandConfiguratorProtocol] | None = None,
    ):
        """
        Initialize the registry.

        Args:
            configurators: Configurators to register (defaults to Gemini and Qwen)
        """
        self.logger = structlog.get_logger().bind(component="slash_command_registry")
        self._configurators: dict[str, SlashCommandConfiguratorProtocol] = {}

        if configurators is None:
            configurators = [create_gemini_configurator(), create_qwen_configurator()]
        for configurator in configurators:
            self.register(configurator)

    def register(self, configurator: SlashCommandConfiguratorProtocol) -> None:
        """Register a configurator, replacing any with the same tool id."""
        tool_id = configurator.tool_id.lower()
        if tool_id in self._configurators:
            self.logger.debug("configurator.replaced", tool=tool_id)
        self._configurators[tool_id] = configurator

    def get(self, tool_id: str) -> SlashCommandConfiguratorProtocol:
        """
        Resolve a configurator by tool id.

        Raises:
            UnknownToolError: If no configurator is registered for tool_id
        """
        configurator = self._configurators.get(tool_id.strip().lower())
        if configurator is None:
            raise UnknownToolError(tool_id, available=list(self._configurators))
        return configurator

    def get_all(self) -> list[SlashCommandConfiguratorProtocol]:
        """Return all registered configurators in registration order."""
        return list(self._configurators.values())

    def available_tools(self) -> list[str]:
        """Return sorted ids of configurators that can be selected."""
        return sorted(
            tool_id
            for tool_id, configurator in self._configurators.items()
            if configurator.is_available
        )
