"""Domain-specific exception types for OpenSpec."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class OpenSpecError(Exception):
    """Base exception for OpenSpec domain errors."""

    message: str
    code: str = "openspec_error"
    details: Dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class ConfigError(OpenSpecError):
    """Error raised for configuration failures."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="config_error", details=details)


class UnknownToolError(OpenSpecError):
    """Error raised when no configurator is registered for a tool id."""

    def __init__(
        self,
        tool_id: str,
        *,
        available: list[str] | None = None,
    ) -> None:
        self.tool_id = tool_id
        available = sorted(available or [])
        message = f"Unknown tool '{tool_id}'"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(
            message=message,
            code="unknown_tool",
            details={"tool_id": tool_id, "available": available},
        )


class ConfiguratorDefinitionError(OpenSpecError):
    """Error raised when a configurator's static tables are incomplete."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message, code="configurator_definition_error", details=details
        )
