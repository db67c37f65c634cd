"""
Slash Commands Infrastructure

File-writing configurators for TOML based coding assistants.
"""

from openspec.infrastructure.slash_commands.gemini import (
    GEMINI_FILE_PATHS,
    create_gemini_configurator,
)
from openspec.infrastructure.slash_commands.qwen import (
    QWEN_FILE_PATHS,
    create_qwen_configurator,
)
from openspec.infrastructure.slash_commands.toml_configurator import (
    TomlSlashCommandConfigurator,
)

__all__ = [
    "GEMINI_FILE_PATHS",
    "QWEN_FILE_PATHS",
    "TomlSlashCommandConfigurator",
    "create_gemini_configurator",
    "create_qwen_configurator",
]
