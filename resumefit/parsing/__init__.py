"""Resume text extraction.

This module turns unstructured resume text into a structured ParsedResume
using keyword-anchored section segmentation and per-entity heuristics.

Public API:
    - ResumeParser: Assemble ParsedResume records from text or documents
    - ParsedResume: Structured resume model
    - ParsingConfig: Configuration settings
    - extract_skills: Skill extraction shared with job-text analysis
    - extract_text / ExtractionFailure: Document-to-text adapter
"""

from resumefit.parsing.config import (
    ParsingConfig,
    get_parsing_config,
    reset_parsing_config,
)
from resumefit.parsing.document import ExtractionFailure, extract_text
from resumefit.parsing.extractors import (
    extract_contact,
    extract_education,
    extract_experience,
    extract_projects,
    extract_skills,
    extract_summary,
)
from resumefit.parsing.models import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
    ResumeStats,
)
from resumefit.parsing.service import ResumeParser

__all__ = [
    "ResumeParser",
    "ParsedResume",
    "ExperienceEntry",
    "EducationEntry",
    "ContactInfo",
    "ProjectEntry",
    "ResumeStats",
    "ParsingConfig",
    "get_parsing_config",
    "reset_parsing_config",
    "ExtractionFailure",
    "extract_text",
    "extract_skills",
    "extract_experience",
    "extract_education",
    "extract_summary",
    "extract_contact",
    "extract_projects",
]
