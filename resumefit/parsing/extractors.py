"""Per-entity extractors over raw resume text.

Every extractor is a pure function over a string. A missing section is not
an error: the extractor returns an empty list, an empty string or an empty
ContactInfo instead.
"""

from __future__ import annotations

import logging
import re

from resumefit.parsing.accumulator import Entry, accumulate_entries
from resumefit.parsing.models import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)
from resumefit.parsing.normalizer import (
    dedupe_skills,
    is_valid_candidate,
    normalize_skill,
)
from resumefit.parsing.sections import DEFAULT_HEADER_MAX_CHARS, find_section
from resumefit.parsing.vocabulary import (
    EDUCATION_SECTION_KEYWORDS,
    EXPERIENCE_SECTION_KEYWORDS,
    PROJECT_SECTION_KEYWORDS,
    SKILLS_VOCABULARY,
    SUMMARY_SECTION_KEYWORDS,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_SKILLS = 20
DEFAULT_MAX_EXPERIENCE = 5
DEFAULT_MAX_PROJECTS = 5
DEFAULT_SUMMARY_MAX_CHARS = 500
DEFAULT_SUMMARY_MAX_LINES = 5
DEFAULT_SUMMARY_PARAGRAPH_MIN_CHARS = 100


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text


# Skills

# Vocabulary entries match on token boundaries so "Java" is not found inside
# "JavaScript" and "R" is not found inside every word containing an r.
_VOCABULARY_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (
        skill,
        re.compile(
            rf"(?<![A-Za-z0-9]){re.escape(skill)}(?![A-Za-z0-9])", re.IGNORECASE
        ),
    )
    for skill in SKILLS_VOCABULARY
)

# Keywords must be whole words, so "tooling" does not open a skill list.
_SKILL_HEADER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:skills?|technologies?|tools?|languages?)\b[:\s]*([^\n\r]*)", re.I),
    re.compile(r"\b(?:proficient|experienced|familiar)\s+(?:in|with)[:\s]*([^\n\r]*)", re.I),
    re.compile(r"\b(?:knowledge|experience)\s+(?:of|in|with)[:\s]*([^\n\r]*)", re.I),
)

_SKILL_SEPARATORS = re.compile(r"[,;|•\n\r]")


def _vocabulary_skills(text: str) -> list[str]:
    return [skill for skill, pattern in _VOCABULARY_PATTERNS if pattern.search(text)]


def _pattern_skills(text: str) -> list[str]:
    found: list[str] = []
    for pattern in _SKILL_HEADER_PATTERNS:
        for match in pattern.finditer(text):
            for token in _SKILL_SEPARATORS.split(match.group(1)):
                if is_valid_candidate(token):
                    found.append(normalize_skill(token))
    return found


def extract_skills(text: str, limit: int = DEFAULT_MAX_SKILLS) -> list[str]:
    """Extract canonical skills from free text.

    Vocabulary hits come first (in vocabulary order), followed by tokens
    taken from lines such as "Skills: ..." or "proficient in ...". The
    result is case-insensitively unique and at most `limit` long.
    """
    text = _require_text(text)
    skills = dedupe_skills(_vocabulary_skills(text) + _pattern_skills(text), limit)
    logger.debug(f"Extracted {len(skills)} skills")
    return skills


# Experience

_ROLE_COMPANY = re.compile(r"^(.+?)\s*[-–—|@]\s*(.+?)(?:\s*\|\s*(.+?))?$")
_DATE_RANGE = re.compile(r"(\d{4})\s*[-–—]\s*(\d{4}|present|current)", re.I)
_BULLET_PREFIXES = ("•", "-", "*")


def _classify_experience_line(line: str, active: Entry | None) -> Entry | None:
    role_company = _ROLE_COMPANY.match(line)
    date_range = _DATE_RANGE.search(line)

    if role_company and not date_range:
        return {
            "role": role_company.group(1).strip(),
            "company": role_company.group(2).strip(),
            "description": [],
        }
    if active is None:
        return None
    if date_range:
        active["duration"] = line
    elif line.startswith(_BULLET_PREFIXES):
        active["description"].append(line[1:].strip())
    elif len(line) > 20:
        active["description"].append(line)
    return None


def extract_experience(
    text: str,
    limit: int = DEFAULT_MAX_EXPERIENCE,
    max_header_chars: int = DEFAULT_HEADER_MAX_CHARS,
) -> list[ExperienceEntry]:
    """Extract work history entries from the experience section."""
    text = _require_text(text)
    section = find_section(text, EXPERIENCE_SECTION_KEYWORDS, max_header_chars)
    if section is None:
        return []
    entries = accumulate_entries(
        section.split("\n"), _classify_experience_line, limit=limit
    )
    return [ExperienceEntry.model_validate(entry) for entry in entries]


# Education

# Full words may carry suffixes ("Masters", "Bachelor's"); abbreviations must
# stand alone so that "ma" inside "Massachusetts" does not open an entry.
_DEGREE = re.compile(
    r"(?<![a-z])(?:bachelor|master|doctorate|diploma|certificate|ph\.?\s?d)"
    r"|(?<![a-z])(?:b\.?\s?tech|m\.?\s?tech|b\.?\s?sc|m\.?\s?sc|mba|bba"
    r"|b\.?s\.?|m\.?s\.?|b\.?a\.?|m\.?a\.?)(?![a-z])",
    re.I,
)
_YEAR = re.compile(r"(?<!\d)(\d{4})(?!\d)")
_GPA = re.compile(r"gpa[:\s]*(\d+\.?\d*)", re.I)


def _classify_education_line(line: str, active: Entry | None) -> Entry | None:
    year = _YEAR.search(line)

    if _DEGREE.search(line):
        entry: Entry = {"degree": line}
        if year:
            entry["year"] = year.group(1)
        if gpa := _GPA.search(line):
            entry["gpa"] = gpa.group(1)
        return entry
    if active is not None and len(line) > 5 and not year and "institution" not in active:
        active["institution"] = line
    return None


def extract_education(
    text: str,
    limit: int | None = None,
    max_header_chars: int = DEFAULT_HEADER_MAX_CHARS,
) -> list[EducationEntry]:
    """Extract degrees from the education section."""
    text = _require_text(text)
    section = find_section(text, EDUCATION_SECTION_KEYWORDS, max_header_chars)
    if section is None:
        return []
    entries = accumulate_entries(
        section.split("\n"), _classify_education_line, limit=limit
    )
    return [EducationEntry.model_validate(entry) for entry in entries]


# Summary


def extract_summary(
    text: str,
    max_chars: int = DEFAULT_SUMMARY_MAX_CHARS,
    max_lines: int = DEFAULT_SUMMARY_MAX_LINES,
    paragraph_min_chars: int = DEFAULT_SUMMARY_PARAGRAPH_MIN_CHARS,
    max_header_chars: int = DEFAULT_HEADER_MAX_CHARS,
) -> str:
    """Extract the professional summary.

    Uses the first lines of a summary/objective/profile section. Without such
    a section, falls back to the first blank-line-delimited paragraph whose
    length is in [paragraph_min_chars, max_chars).
    """
    text = _require_text(text)
    section = find_section(text, SUMMARY_SECTION_KEYWORDS, max_header_chars)
    if section is not None:
        lines = [line.strip() for line in section.split("\n") if line.strip()]
        return " ".join(lines[:max_lines])[:max_chars]

    for paragraph in text.split("\n\n"):
        if paragraph_min_chars <= len(paragraph) < max_chars:
            return paragraph.strip()
    return ""


# Contact

_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE = re.compile(r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")
_LINKEDIN = re.compile(
    r"linkedin\.com/(?:in/|profile/view\?id=)([a-zA-Z0-9-]+)", re.I
)
_GITHUB = re.compile(r"github\.com/([a-zA-Z0-9-]+)", re.I)


def extract_contact(text: str) -> ContactInfo:
    """Find email, phone, LinkedIn and GitHub details anywhere in the text."""
    text = _require_text(text)
    contact = ContactInfo()

    if match := _EMAIL.search(text):
        contact.email = match.group(0)
    if match := _PHONE.search(text):
        contact.phone = match.group(0)
    if match := _LINKEDIN.search(text):
        contact.linkedin = f"https://linkedin.com/in/{match.group(1)}"
    if match := _GITHUB.search(text):
        contact.github = f"https://github.com/{match.group(1)}"

    return contact


# Projects

_PROJECT_TITLE = re.compile(r"^[A-Z][a-zA-Z\s]+:")
_BULLETED_TITLE = re.compile(r"^•\s*[A-Z]")
_LEADING_BULLET = re.compile(r"^•\s*")


def _classify_project_line(line: str, active: Entry | None) -> Entry | None:
    if _PROJECT_TITLE.match(line) or _BULLETED_TITLE.match(line):
        name, _, rest = _LEADING_BULLET.sub("", line).partition(":")
        return {"name": name.strip(), "description": rest.strip()}
    if active is not None and len(line) > 10:
        active["description"] = f"{active['description']} {line}".strip()
    return None


def extract_projects(
    text: str,
    limit: int = DEFAULT_MAX_PROJECTS,
    max_header_chars: int = DEFAULT_HEADER_MAX_CHARS,
) -> list[ProjectEntry]:
    """Extract projects from the projects/portfolio section."""
    text = _require_text(text)
    section = find_section(text, PROJECT_SECTION_KEYWORDS, max_header_chars)
    if section is None:
        return []
    entries = accumulate_entries(
        section.split("\n"), _classify_project_line, limit=limit
    )
    return [ProjectEntry.model_validate(entry) for entry in entries]
