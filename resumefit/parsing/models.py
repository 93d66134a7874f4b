"""Data models for parsed resumes."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from resumefit.parsing.config import get_parsing_config
from resumefit.parsing.normalizer import dedupe_skills


class ExperienceEntry(BaseModel):
    """One position from the experience section."""

    role: str = Field(..., description="Job title as written")
    company: str = Field(..., description="Employer name as written")
    duration: str | None = Field(
        default=None, description="Date range line, e.g. '2020 - Present'"
    )
    description: list[str] = Field(
        default_factory=list, description="Bullet points and detail lines"
    )


class EducationEntry(BaseModel):
    """One degree or qualification from the education section."""

    degree: str = Field(..., description="Full degree line")
    institution: str | None = Field(default=None, description="School name")
    year: str | None = Field(default=None, description="First 4-digit year on the degree line")
    gpa: str | None = Field(default=None, description="GPA as written")


class ProjectEntry(BaseModel):
    """One project from the projects section."""

    name: str = Field(..., description="Project title")
    description: str = Field(default="", description="Project description")


class ContactInfo(BaseModel):
    """Contact details found anywhere in the resume."""

    email: str | None = Field(default=None, description="First email address")
    phone: str | None = Field(default=None, description="First phone number, as matched")
    linkedin: str | None = Field(default=None, description="LinkedIn profile URL")
    github: str | None = Field(default=None, description="GitHub profile URL")

    def is_empty(self) -> bool:
        """Return True when no contact field was found."""
        return not any((self.email, self.phone, self.linkedin, self.github))


class ParsedResume(BaseModel):
    """Structured result of resume text extraction.

    A ParsedResume is produced once per uploaded document and replaced
    wholesale when the document is re-uploaded.
    """

    skills: list[str] = Field(
        default_factory=list, description="Canonical skills, case-insensitively unique"
    )
    experience: list[ExperienceEntry] = Field(
        default_factory=list, description="Positions in document order"
    )
    education: list[EducationEntry] = Field(
        default_factory=list, description="Degrees in document order"
    )
    summary: str = Field(default="", description="Professional summary")
    contact: ContactInfo = Field(
        default_factory=ContactInfo, description="Contact details"
    )
    projects: list[ProjectEntry] = Field(
        default_factory=list, description="Projects in document order"
    )
    raw_text: str = Field(default="", description="Source text used for similarity scoring")

    @field_validator("skills")
    @classmethod
    def dedupe_and_cap_skills(cls, v: list[str]) -> list[str]:
        """Drop case-insensitive duplicates and apply the configured skill cap."""
        return dedupe_skills(v, limit=get_parsing_config().max_skills)

    def to_dict(self) -> dict:
        """Serialize to a dictionary, omitting absent optional fields."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict) -> ParsedResume:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class ResumeStats(BaseModel):
    """Counts and presence flags describing a parsed resume."""

    skills_count: int = Field(default=0, ge=0)
    experience_count: int = Field(default=0, ge=0)
    education_count: int = Field(default=0, ge=0)
    projects_count: int = Field(default=0, ge=0)
    has_summary: bool = False
    has_contact: bool = False

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")
