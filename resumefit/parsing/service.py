"""Resume parsing service: raw text in, ParsedResume out."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from resumefit.parsing.config import ParsingConfig, get_parsing_config
from resumefit.parsing.document import ExtractionFailure, extract_text
from resumefit.parsing.extractors import (
    extract_contact,
    extract_education,
    extract_experience,
    extract_projects,
    extract_skills,
    extract_summary,
)
from resumefit.parsing.models import ParsedResume, ResumeStats

logger = logging.getLogger(__name__)


class ResumeParser:
    """Service for assembling ParsedResume records from resume text."""

    def __init__(self, config: ParsingConfig | None = None) -> None:
        self.config = config or get_parsing_config()

    def _apply_line_budget(self, text: str) -> str:
        budget = self.config.max_lines
        if budget is None:
            return text
        lines = text.split("\n")
        if len(lines) <= budget:
            return text
        logger.warning(f"Resume truncated from {len(lines)} to {budget} lines")
        return "\n".join(lines[:budget])

    def parse_text(self, text: str) -> ParsedResume:
        """Parse resume text into a ParsedResume.

        Never fails on well-formed strings: sections that cannot be found
        simply come back empty.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        cfg = self.config
        body = self._apply_line_budget(text)
        header_chars = cfg.section_header_max_chars

        parsed = ParsedResume(
            skills=extract_skills(body, limit=cfg.max_skills),
            experience=extract_experience(
                body, limit=cfg.max_experience_entries, max_header_chars=header_chars
            ),
            education=extract_education(
                body, limit=cfg.max_education_entries, max_header_chars=header_chars
            ),
            summary=extract_summary(
                body,
                max_chars=cfg.summary_max_chars,
                max_lines=cfg.summary_max_lines,
                paragraph_min_chars=cfg.summary_paragraph_min_chars,
                max_header_chars=header_chars,
            ),
            contact=extract_contact(body),
            projects=extract_projects(
                body, limit=cfg.max_project_entries, max_header_chars=header_chars
            ),
            raw_text=text,
        )
        logger.info(
            f"Parsed resume: {len(parsed.skills)} skills, "
            f"{len(parsed.experience)} experience, {len(parsed.education)} education, "
            f"{len(parsed.projects)} projects"
        )
        return parsed

    def parse_document(self, path: Path | str) -> ParsedResume:
        """Extract text from a resume document and parse it.

        Raises:
            ExtractionFailure: The document could not be read.
        """
        try:
            text = extract_text(path)
        except ExtractionFailure as e:
            logger.warning(f"Could not read resume {e.path}: {e.reason}")
            raise
        return self.parse_text(text)

    def stats(self, parsed: ParsedResume) -> ResumeStats:
        """Summarize a parsed resume as counts and presence flags."""
        return ResumeStats(
            skills_count=len(parsed.skills),
            experience_count=len(parsed.experience),
            education_count=len(parsed.education),
            projects_count=len(parsed.projects),
            has_summary=bool(parsed.summary),
            has_contact=not parsed.contact.is_empty(),
        )

    def load_parsed(self, path: Path | str) -> ParsedResume:
        """Load a previously stored ParsedResume from YAML or JSON."""
        parsed_path = Path(path)
        if not parsed_path.exists():
            raise FileNotFoundError(f"Parsed resume not found: {parsed_path}")

        suffix = parsed_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            data = self._load_yaml(parsed_path)
        elif suffix == ".json":
            data = self._load_json(parsed_path)
        else:
            data = self._load_unknown(parsed_path)

        return ParsedResume.from_dict(data)

    def _load_yaml(self, path: Path) -> dict:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML parsed resume: {path}") from e
        return _require_mapping(data, path)

    def _load_json(self, path: Path) -> dict:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON parsed resume: {path}") from e
        return _require_mapping(data, path)

    def _load_unknown(self, path: Path) -> dict:
        """Sniff JSON by its leading brace, otherwise read the file as YAML."""
        if path.read_text(encoding="utf-8").lstrip().startswith("{"):
            return self._load_json(path)
        return self._load_yaml(path)


def _require_mapping(data: object, path: Path) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Parsed resume must be a mapping/dict: {path}")
    return data
