"""
Core Protocol Interfaces

Contracts for the collaborators of slash command configurators. Tool
variants, file system access, and logging are expressed as protocols so
each configurator can be tested against in-memory doubles.

Usage:
    from openspec.core.interfaces import SlashCommandConfiguratorProtocol

    async def refresh(configurator: SlashCommandConfiguratorProtocol) -> list[str]:
        return await configurator.update_existing(".", "openspec")
"""

from openspec.core.interfaces.logging import LoggerProtocol
from openspec.core.interfaces.slash_commands import (
    FileSystemProtocol,
    SlashCommandBodyProvider,
    SlashCommandConfiguratorProtocol,
)

__all__ = [
    "FileSystemProtocol",
    "LoggerProtocol",
    "SlashCommandBodyProvider",
    "SlashCommandConfiguratorProtocol",
]
