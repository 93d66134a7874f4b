"""Skill token validation and canonicalization."""

from __future__ import annotations

import re
from collections.abc import Iterable

from resumefit.parsing.vocabulary import CANDIDATE_STOPLIST, SKILL_ALIASES

_MIN_CANDIDATE_LENGTH = 2
_MAX_CANDIDATE_LENGTH = 29
_HAS_LETTER = re.compile(r"[a-zA-Z]")
_ALL_DIGITS = re.compile(r"^\d+$")


def is_valid_candidate(token: str) -> bool:
    """Return True if a raw token could plausibly be a skill.

    Rejects tokens that are too short or too long, purely numeric, free of
    letters, or generic experience/education vocabulary such as "degree".
    """
    cleaned = token.strip().lower()
    if not (_MIN_CANDIDATE_LENGTH <= len(cleaned) <= _MAX_CANDIDATE_LENGTH):
        return False
    if _ALL_DIGITS.match(cleaned):
        return False
    if not _HAS_LETTER.search(cleaned):
        return False
    return cleaned not in CANDIDATE_STOPLIST


def normalize_skill(token: str) -> str:
    """Map a skill token to its canonical display name.

    Alias lookup is case-insensitive ("JS" -> "JavaScript"); unknown tokens
    are returned with surrounding whitespace trimmed.
    """
    value = token.strip()
    return SKILL_ALIASES.get(value.lower(), value)


def skill_key(skill: str) -> str:
    """Comparison key used for case-insensitive skill equality."""
    return skill.strip().lower()


def dedupe_skills(skills: Iterable[str], limit: int | None = None) -> list[str]:
    """Drop case-insensitive duplicates, keeping first occurrences in order."""
    seen: set[str] = set()
    result: list[str] = []
    for skill in skills:
        key = skill_key(skill)
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(skill)
        if limit is not None and len(result) >= limit:
            break
    return result
