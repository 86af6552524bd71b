from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Mapping

from .models import AnalysisResults, FilterSettings, NGramData, Totals
from .normalize import contains_punctuation, contains_whitespace, normalize_sequence
from .scanner import calculate_ngrams


@dataclass(frozen=True, slots=True)
class CountMap:
    """Filtered, re-aggregated table plus the total of every surviving occurrence."""
    counts: Dict[str, int]
    total: int


def filter_and_reaggregate(raw: Mapping[str, int], filters: FilterSettings) -> CountMap:
    """
    Drop sequences failing the whitespace/punctuation filters, normalize case,
    and sum counts of keys that collapse to the same normalized sequence.
    The total is accumulated per surviving raw pair, before keys collapse.
    """
    out: Dict[str, int] = {}
    total = 0

    for sequence, frequency in raw.items():
        if filters.filter_whitespace and contains_whitespace(sequence):
            continue
        if filters.filter_punctuation and contains_punctuation(sequence):
            continue

        total += frequency
        key = normalize_sequence(sequence, filters.case_sensitive)
        out[key] = out.get(key, 0) + frequency

    return CountMap(counts=out, total=total)


def _rank_key(item: tuple[str, int]) -> tuple[int, str]:
    # frequency descending, then sequence ascending (code point order)
    sequence, frequency = item
    return (-frequency, sequence)


def rank_entries(counts: Mapping[str, int]) -> List[NGramData]:
    """Sorted rows with dense 1-based ranks; order never depends on dict insertion order."""
    ordered = sorted(counts.items(), key=_rank_key)
    return [
        NGramData(sequence=seq, frequency=freq, rank=i)
        for i, (seq, freq) in enumerate(ordered, start=1)
    ]


def calculate_filtered_ngrams(text: str, filters: FilterSettings | None = None) -> AnalysisResults:
    """
    Scan once, then filter + rank each of the five tables under one shared
    FilterSettings. Pure: no state survives between calls.
    """
    if not isinstance(text, str):
        raise TypeError(f"corpus text must be str, got {type(text).__name__}")
    filters = filters or FilterSettings()

    raw = calculate_ngrams(text)
    filtered = {name: filter_and_reaggregate(table, filters) for name, table in raw.as_dict().items()}

    totals = Totals(**{name: cm.total for name, cm in filtered.items()})
    return AnalysisResults(
        monograms=rank_entries(filtered["monograms"].counts),
        bigrams=rank_entries(filtered["bigrams"].counts),
        trigrams=rank_entries(filtered["trigrams"].counts),
        skipgrams=rank_entries(filtered["skipgrams"].counts),
        words=rank_entries(filtered["words"].counts),
        totals=totals,
    )


# short public name for the composite entry point
compute = calculate_filtered_ngrams
