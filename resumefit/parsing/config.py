"""Configuration settings for resume parsing."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParsingConfig(BaseSettings):
    """Resume parsing limits.

    All settings have sensible defaults and can be overridden via
    environment variables with `PARSING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARSING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Entry caps
    max_skills: Annotated[int, Field(gt=0)] = Field(
        default=20,
        description="Maximum number of skills kept per document",
    )
    max_experience_entries: Annotated[int, Field(gt=0)] = Field(
        default=5,
        description="Maximum number of experience entries kept",
    )
    max_project_entries: Annotated[int, Field(gt=0)] = Field(
        default=5,
        description="Maximum number of project entries kept",
    )
    max_education_entries: Annotated[int, Field(gt=0)] | None = Field(
        default=None,
        description="Maximum number of education entries kept (None = no cap)",
    )

    # Summary settings
    summary_max_chars: Annotated[int, Field(gt=0)] = Field(
        default=500,
        description="Summary is truncated to this many characters",
    )
    summary_max_lines: Annotated[int, Field(gt=0)] = Field(
        default=5,
        description="Number of summary section lines joined into the summary",
    )
    summary_paragraph_min_chars: Annotated[int, Field(ge=0)] = Field(
        default=100,
        description="Minimum length of a fallback summary paragraph",
    )

    # Segmentation settings
    section_header_max_chars: Annotated[int, Field(gt=0)] = Field(
        default=50,
        description="Lines at least this long are never treated as section headings",
    )
    max_lines: Annotated[int, Field(gt=0)] | None = Field(
        default=None,
        description="Truncate input to this many lines before parsing (None = no limit)",
    )


# Singleton instance for easy import
_parsing_config: ParsingConfig | None = None


def get_parsing_config() -> ParsingConfig:
    """Get the parsing configuration singleton."""
    global _parsing_config
    if _parsing_config is None:
        _parsing_config = ParsingConfig()
    return _parsing_config


def reset_parsing_config() -> None:
    """Reset the parsing configuration singleton (useful for testing)."""
    global _parsing_config
    _parsing_config = None
