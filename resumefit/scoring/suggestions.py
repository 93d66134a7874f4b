"""Rule-based resume improvement suggestions."""

from __future__ import annotations

import logging

from resumefit.parsing.config import ParsingConfig, get_parsing_config
from resumefit.parsing.extractors import extract_skills
from resumefit.parsing.models import ParsedResume
from resumefit.scoring.config import ScoringConfig, get_scoring_config
from resumefit.scoring.matchers import find_matching_skills
from resumefit.scoring.models import Suggestion

logger = logging.getLogger(__name__)


class SuggestionEngine:
    """Compare a parsed resume with a job text and suggest improvements.

    Each rule is evaluated independently; any subset may fire. Suggestions
    are returned in rule order: skills, summary, contact, experience.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        parsing_config: ParsingConfig | None = None,
    ) -> None:
        self.config = config or get_scoring_config()
        self.parsing_config = parsing_config or get_parsing_config()

    def _skills_rule(self, resume: ParsedResume, job_text: str) -> Suggestion | None:
        job_skills = extract_skills(job_text, limit=self.parsing_config.max_skills)
        _, missing = find_matching_skills(job_skills, resume.skills)
        if not missing:
            return None
        listed = ", ".join(missing[: self.config.max_suggested_skills])
        return Suggestion(
            type="skills",
            message=f"Consider adding these relevant skills: {listed}",
            priority="high",
        )

    def _summary_rule(self, resume: ParsedResume) -> Suggestion | None:
        if resume.summary and len(resume.summary) >= self.config.summary_min_chars:
            return None
        return Suggestion(
            type="summary",
            message="Add a professional summary to highlight your key qualifications",
            priority="medium",
        )

    def _contact_rule(self, resume: ParsedResume) -> Suggestion | None:
        if resume.contact.email:
            return None
        return Suggestion(
            type="contact",
            message="Ensure your email address is clearly visible",
            priority="high",
        )

    def _experience_rule(self, resume: ParsedResume) -> Suggestion | None:
        if any(entry.description for entry in resume.experience):
            return None
        return Suggestion(
            type="experience",
            message=(
                "Add detailed descriptions of your work experience "
                "with quantifiable achievements"
            ),
            priority="high",
        )

    def suggest(self, resume: ParsedResume, job_text: str) -> list[Suggestion]:
        """Return improvement suggestions for a resume against a job text."""
        if not isinstance(job_text, str):
            raise TypeError(f"expected str, got {type(job_text).__name__}")

        candidates = (
            self._skills_rule(resume, job_text),
            self._summary_rule(resume),
            self._contact_rule(resume),
            self._experience_rule(resume),
        )
        suggestions = [s for s in candidates if s is not None]
        logger.debug(f"Generated {len(suggestions)} suggestions")
        return suggestions
