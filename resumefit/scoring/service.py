"""Match scoring service implementation."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from resumefit.parsing.config import ParsingConfig, get_parsing_config
from resumefit.parsing.extractors import extract_skills
from resumefit.parsing.models import ParsedResume
from resumefit.scoring.config import ScoringConfig, get_scoring_config
from resumefit.scoring.matchers import find_matching_skills
from resumefit.scoring.models import JobPosting, MatchResult, RankedJob
from resumefit.scoring.similarity import text_similarity

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_score(value: float) -> int:
    return max(0, min(100, _round_half_up(value)))


class MatchScorer:
    """Service for scoring a parsed resume against job texts.

    Holds only read-only configuration, so one instance can score any number
    of resume/job pairs, including from several threads.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        parsing_config: ParsingConfig | None = None,
    ) -> None:
        self.config = config or get_scoring_config()
        self.parsing_config = parsing_config or get_parsing_config()

    def job_skills(self, job_text: str) -> list[str]:
        """Run a job text through the same skill extractor used for resumes."""
        return extract_skills(job_text, limit=self.parsing_config.max_skills)

    def match(self, resume: ParsedResume, job_text: str) -> MatchResult:
        """Score a resume against a job text with a full breakdown."""
        if not isinstance(job_text, str):
            raise TypeError(f"expected str, got {type(job_text).__name__}")
        if not job_text.strip():
            return MatchResult(score=0)

        job_skills = self.job_skills(job_text)
        matching, missing = find_matching_skills(job_skills, resume.skills)

        skill_score = 100.0 * len(matching) / len(job_skills) if job_skills else 0.0
        similarity = text_similarity(
            resume.raw_text, job_text, stem=self.config.use_stemming
        )
        score = _clamp_score(
            skill_score * self.config.weight_skills
            + similarity * self.config.weight_text
        )

        logger.debug(
            f"skill_score={skill_score:.1f} text_similarity={similarity:.1f} "
            f"score={score}"
        )
        return MatchResult(
            score=score,
            skill_score=skill_score,
            text_similarity=similarity,
            matching_skills=matching,
            missing_skills=missing[: self.config.max_missing_skills],
        )

    def score(self, resume: ParsedResume, job_text: str) -> int:
        """Return the 0..100 compatibility score of a resume and a job text."""
        return self.match(resume, job_text).score

    def rank(
        self, resume: ParsedResume, postings: Iterable[JobPosting]
    ) -> list[RankedJob]:
        """Score one resume against many postings, best match first.

        Postings with equal scores keep their input order.
        """
        ranked = [
            RankedJob(
                index=i,
                title=posting.title,
                company=posting.company,
                score=self.score(resume, posting.text),
            )
            for i, posting in enumerate(postings)
        ]
        ranked.sort(key=lambda job: job.score, reverse=True)
        logger.info(f"Ranked {len(ranked)} postings")
        return ranked
