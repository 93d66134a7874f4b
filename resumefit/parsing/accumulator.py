"""Grouping of consecutive section lines into discrete entries.

Experience, education and project sections share the same shape: a
"heading" line opens a new entry and the lines after it add detail until
the next heading or the end of the section. The loop lives here once; each
extractor supplies only a line classifier.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

Entry = dict[str, Any]

# Called with (line, active_entry). Returning a dict starts a new entry and
# flushes the active one. Returning None means the line was either folded
# into the active entry (by mutating it) or ignored.
LineClassifier = Callable[[str, Entry | None], Entry | None]


def accumulate_entries(
    lines: Iterable[str],
    classify: LineClassifier,
    limit: int | None = None,
) -> list[Entry]:
    """Group `lines` into entries, keeping at most one entry open at a time.

    Blank lines are skipped and every other line is stripped before it is
    classified. The pending entry is flushed at the end of input.
    """
    entries: list[Entry] = []
    active: Entry | None = None

    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        started = classify(line, active)
        if started is not None:
            if active is not None:
                entries.append(active)
            active = started

    if active is not None:
        entries.append(active)

    if limit is not None:
        return entries[:limit]
    return entries
