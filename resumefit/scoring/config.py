"""Configuration settings for match scoring and suggestions."""

from __future__ import annotations

import math
from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Weights, caps and thresholds for match scoring and suggestions.

    Override with `SCORING_*` environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Component weights
    weight_skills: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.7,
        description="Weight for the share of job skills found on the resume",
    )
    weight_text: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.3,
        description="Weight for whole-text word overlap",
    )

    # Similarity settings
    use_stemming: bool = Field(
        default=False,
        description="Apply Porter stemming to words before computing text overlap",
    )

    # Output limits
    max_missing_skills: Annotated[int, Field(gt=0)] = Field(
        default=10,
        description="Maximum missing skills reported in a match result",
    )
    max_suggested_skills: Annotated[int, Field(gt=0)] = Field(
        default=5,
        description="Maximum missing skills listed in a skills suggestion",
    )

    # Suggestion thresholds
    summary_min_chars: Annotated[int, Field(ge=0)] = Field(
        default=50,
        description="Summaries shorter than this trigger a summary suggestion",
    )

    @model_validator(mode="after")
    def check_weights(self) -> ScoringConfig:
        """Require the two score components to form a weighted average."""
        total = self.weight_skills + self.weight_text
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ValueError(
                f"weight_skills + weight_text must equal 1.0, got {total:.6f}"
            )
        return self


_scoring_config: ScoringConfig | None = None


def get_scoring_config() -> ScoringConfig:
    """Get the scoring configuration singleton."""
    global _scoring_config
    if _scoring_config is None:
        _scoring_config = ScoringConfig()
    return _scoring_config


def reset_scoring_config() -> None:
    """Reset the scoring configuration singleton (useful for testing)."""
    global _scoring_config
    _scoring_config = None
