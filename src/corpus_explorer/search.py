from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import NGramData, SearchSettings


@dataclass(frozen=True, slots=True)
class DisplayStats:
    """
    Counts shown next to a table after search/limit.

    total      : sum of frequencies after the core filters, before search/limit
    displayed  : sum of frequencies of the rows actually shown
    percentage : displayed / total * 100 (0 when total is 0)
    has_filters: True when a query or a limit narrowed the table
    """
    total: int
    displayed: int
    percentage: float
    has_filters: bool


def compile_query(settings: SearchSettings) -> Optional[re.Pattern]:
    """Pattern for the query, or None when the query is not a valid regex."""
    flags = 0 if settings.filters.case_sensitive else re.IGNORECASE
    source = settings.query if settings.use_regex else re.escape(settings.query)
    try:
        return re.compile(source, flags)
    except re.error:
        return None


def regex_error(settings: SearchSettings) -> Optional[str]:
    """Human readable reason the regex query does not compile (None if it does)."""
    if not settings.use_regex or not settings.query:
        return None
    try:
        re.compile(settings.query)
    except re.error as exc:
        return str(exc)
    return None


def matches_search(sequence: str, settings: SearchSettings, pattern: Optional[re.Pattern] = None) -> bool:
    """
    Literal substring match, or regex search when use_regex is set.
    Case is ignored unless the filters are case sensitive.
    An invalid regex matches nothing.
    """
    if not settings.query:
        return True
    if pattern is None:
        pattern = compile_query(settings)
        if pattern is None:
            return False
    return pattern.search(sequence) is not None


def apply_search(entries: Sequence[NGramData], settings: SearchSettings) -> List[NGramData]:
    """Filter by query (re-ranking densely from 1), then truncate to limit when limit > 0."""
    rows = list(entries)
    if settings.query:
        pattern = compile_query(settings)
        if pattern is None:
            rows = []
        else:
            rows = [
                NGramData(sequence=e.sequence, frequency=e.frequency, rank=i)
                for i, e in enumerate((e for e in rows if pattern.search(e.sequence)), start=1)
            ]
    if settings.limit > 0:
        rows = rows[:settings.limit]
    return rows


def display_stats(entries: Sequence[NGramData], shown: Sequence[NGramData], settings: SearchSettings) -> DisplayStats:
    total = sum(e.frequency for e in entries)
    displayed = sum(e.frequency for e in shown)
    pct = (displayed / total) * 100 if total > 0 else 0.0
    return DisplayStats(
        total=total,
        displayed=displayed,
        percentage=pct,
        has_filters=bool(settings.query) or settings.limit > 0,
    )
