"""Skill matching utilities for match scoring."""

from __future__ import annotations

from resumefit.parsing.normalizer import skill_key


def find_matching_skills(
    required: list[str], available: list[str]
) -> tuple[list[str], list[str]]:
    """Return the subset of required skills that match, and those missing.

    Matching is case-insensitive equality of canonical names. Both lists keep
    the order of `required`.
    """
    available_keys = {skill_key(skill) for skill in available}
    matched: list[str] = []
    missing: list[str] = []

    for requirement in required:
        if skill_key(requirement) in available_keys:
            matched.append(requirement)
        else:
            missing.append(requirement)

    return matched, missing
