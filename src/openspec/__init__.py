"""OpenSpec slash command scaffolding for TOML based coding assistants."""

__version__ = "0.1.0"
