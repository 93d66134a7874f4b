"""Data models for match scoring and suggestions."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Literal

from pydantic import BaseModel, Field

SuggestionType = Literal["skills", "summary", "contact", "experience"]
Priority = Literal["high", "medium", "low"]

_SUGGESTION_TYPES = {"skills", "summary", "contact", "experience"}
_PRIORITIES = {"high", "medium", "low"}


class JobPosting(BaseModel):
    """A job posting as supplied by the caller."""

    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Company name")
    description: str = Field(default="", description="Job description text")
    requirements: list[str] = Field(
        default_factory=list, description="Requirement lines"
    )

    @property
    def text(self) -> str:
        """Description and requirements combined into one job text."""
        return f"{self.description} {' '.join(self.requirements)}".strip()


@dataclass
class MatchResult:
    """Compatibility between one resume and one job text."""

    score: int
    skill_score: float = 0.0
    text_similarity: float = 0.0
    matching_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")
        for name in ("skill_score", "text_similarity"):
            value = getattr(self, name)
            if not (0.0 <= value <= 100.0):
                raise ValueError(f"{name} must be between 0 and 100 (got {value})")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass
class Suggestion:
    """One rule-based resume improvement suggestion."""

    type: SuggestionType
    message: str
    priority: Priority

    def __post_init__(self) -> None:
        if self.type not in _SUGGESTION_TYPES:
            raise ValueError(
                f"type must be one of: {', '.join(sorted(_SUGGESTION_TYPES))} "
                f"(got {self.type})"
            )
        if self.priority not in _PRIORITIES:
            raise ValueError(
                f"priority must be one of: high, medium, low (got {self.priority})"
            )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass
class RankedJob:
    """Score of one posting in a batch ranking."""

    index: int
    title: str
    company: str
    score: int

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)
