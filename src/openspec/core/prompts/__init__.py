"""Prompt bodies shared by all slash command configurators."""

from openspec.core.prompts.slash_command_templates import get_slash_command_body

__all__ = ["get_slash_command_body"]
