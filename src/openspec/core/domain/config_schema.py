"""
Configuration Schema Validation

Pydantic model for the optional project configuration file (.openspec.yaml).
"""

from __future__ import annotations

from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from openspec.core.domain.constants import OPENSPEC_DIR_NAME


class OpenSpecConfigSchema(BaseModel):
    """
    Schema for project-level slash command settings.

    Attributes:
        openspec_dir: Directory holding OpenSpec specs and changes
        tools: Tool ids to scaffold by default (empty means all available)
    """

    model_config = ConfigDict(extra="forbid")

    openspec_dir: str = Field(
        OPENSPEC_DIR_NAME,
        description="OpenSpec directory, relative to the project root",
    )
    tools: list[str] = Field(
        default_factory=list,
        description="Tool ids scaffolded by 'init' when none are given",
    )

    @field_validator("openspec_dir")
    @classmethod
    def validate_openspec_dir(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("openspec_dir must not be empty")
        if PurePath(value).is_absolute():
            raise ValueError("openspec_dir must be relative to the project root")
        return value

    @field_validator("tools")
    @classmethod
    def normalize_tools(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for tool_id in value:
            tool_id = tool_id.strip().lower()
            if tool_id and tool_id not in normalized:
                normalized.append(tool_id)
        return normalized
