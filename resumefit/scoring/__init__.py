"""Resume-to-job match scoring and improvement suggestions.

Public API:
    - MatchScorer: Score a ParsedResume against job texts, single or batch
    - SuggestionEngine: Rule-based improvement suggestions
    - MatchResult / Suggestion / RankedJob / JobPosting: Result and input models
    - ScoringConfig: Configuration settings
"""

from resumefit.scoring.config import ScoringConfig, get_scoring_config, reset_scoring_config
from resumefit.scoring.models import JobPosting, MatchResult, RankedJob, Suggestion
from resumefit.scoring.service import MatchScorer
from resumefit.scoring.suggestions import SuggestionEngine

__all__ = [
    "MatchScorer",
    "SuggestionEngine",
    "MatchResult",
    "Suggestion",
    "RankedJob",
    "JobPosting",
    "ScoringConfig",
    "get_scoring_config",
    "reset_scoring_config",
]
