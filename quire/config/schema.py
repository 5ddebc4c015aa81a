"""Configuration schema for quire."""

from __future__ import annotations

from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


class FrontmatterConfig(BaseModel):
    """Configuration for front-matter splitting."""

    split_mode: Literal["all", "pair"] = "all"


class RenderingConfig(BaseModel):
    """Configuration for markdown rendering."""

    allow_html: bool = True


class OutputConfig(BaseModel):
    """Configuration for the document collection."""

    include_drafts: bool = True


class Config(BaseModel):
    """Main configuration class for quire."""

    frontmatter: FrontmatterConfig = Field(default_factory=FrontmatterConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return {
            "frontmatter": {
                "split_mode": self.frontmatter.split_mode,
            },
            "rendering": {
                "allow_html": self.rendering.allow_html,
            },
            "output": {
                "include_drafts": self.output.include_drafts,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary loaded from YAML.

        Unknown top-level sections are ignored.
        """
        pydantic_data: dict[str, Any] = {}

        for section in ("frontmatter", "rendering", "output"):
            if section in data:
                pydantic_data[section] = data[section]

        return cls.model_validate(pydantic_data)

    def to_yaml(self) -> str:
        """Convert config to YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)
