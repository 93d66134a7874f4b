"""Keyword-anchored section segmentation for resume text."""

from __future__ import annotations

from collections.abc import Sequence

from resumefit.parsing.vocabulary import MAJOR_SECTIONS

DEFAULT_HEADER_MAX_CHARS = 50


def is_header_line(
    line: str,
    keywords: Sequence[str],
    max_chars: int = DEFAULT_HEADER_MAX_CHARS,
) -> bool:
    """Return True if a line looks like a heading mentioning one of `keywords`.

    Long lines are treated as prose even when they contain a keyword.
    """
    lowered = line.strip().lower()
    if len(lowered) >= max_chars:
        return False
    return any(keyword in lowered for keyword in keywords)


def find_section(
    text: str,
    start_keywords: Sequence[str],
    max_header_chars: int = DEFAULT_HEADER_MAX_CHARS,
) -> str | None:
    """Return the body of the first section headed by one of `start_keywords`.

    The body runs from the line after the heading up to (not including) the
    next line that looks like any major section heading, or to the end of the
    document. Returns None when no heading is found.
    """
    lines = text.split("\n")

    start = next(
        (
            i
            for i, line in enumerate(lines)
            if is_header_line(line, start_keywords, max_header_chars)
        ),
        None,
    )
    if start is None:
        return None

    end = next(
        (
            i
            for i in range(start + 1, len(lines))
            if is_header_line(lines[i], MAJOR_SECTIONS, max_header_chars)
        ),
        len(lines),
    )
    return "\n".join(lines[start + 1 : end])
