"""
Logging Protocol Interface.

The subset of a structlog bound logger that configurators call, so tests
can pass any object with the same methods.
"""

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger used by slash command configurators."""

    def debug(self, event: str, **kwargs: Any) -> None:
        ...

    def info(self, event: str, **kwargs: Any) -> None:
        ...

    def warning(self, event: str, **kwargs: Any) -> None:
        ...
