# src/corpus_explorer/models.py
"""
Data models for the corpus explorer.

These classes carry no business logic; they only give shape to what flows
between the scanner, the aggregator and the consumers of the results:

- FilterSettings: the three boolean filters shared by all five tables.
- NGramData: one ranked row (sequence, frequency, rank).
- Totals / AnalysisResults: the five ranked lists plus their totals.
- SearchSettings: presentation-side search/limit on top of the filters.
- CorpusData / ExplorerState: what the orchestration layer keeps around.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Literal, Optional

from . import config as CFG

NGramType = Literal["monograms", "bigrams", "trigrams", "skipgrams", "words"]


def parse_ngram_type(value: str) -> NGramType:
    """Validate a table name coming from a user (CLI, query string)."""
    v = (value or "").strip().lower()
    if v not in CFG.NGRAM_TYPES:
        raise ValueError(f"unknown n-gram type {value!r}; expected one of {', '.join(CFG.NGRAM_TYPES)}")
    return v  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class FilterSettings:
    """
    Filters applied by the aggregator to every raw table.

    Attributes
    ----------
    filter_whitespace : bool
        Drop any sequence containing a whitespace character.
    filter_punctuation : bool
        Drop any sequence containing a character that is neither
        alphanumeric nor whitespace.
    case_sensitive : bool
        When False, surviving sequences are lowercased and colliding keys
        ("The" / "the") are summed into one entry.
    """
    filter_whitespace: bool = CFG.DEFAULT_FILTER_WHITESPACE
    filter_punctuation: bool = CFG.DEFAULT_FILTER_PUNCTUATION
    case_sensitive: bool = CFG.DEFAULT_CASE_SENSITIVE


@dataclass(frozen=True, slots=True)
class NGramData:
    """One row of a ranked table. rank is dense and 1-based."""
    sequence: str
    frequency: int
    rank: int


@dataclass(frozen=True, slots=True)
class Totals:
    monograms: int = 0
    bigrams: int = 0
    trigrams: int = 0
    skipgrams: int = 0
    words: int = 0

    def of(self, ngram_type: NGramType) -> int:
        return getattr(self, parse_ngram_type(ngram_type))

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class AnalysisResults:
    """
    Output of calculate_filtered_ngrams().

    Each list is ordered by frequency (descending) then sequence (ascending).
    totals holds the sum of every surviving occurrence per table, counted
    before case collapsing merged keys, so sum(frequency) == total.
    """
    monograms: List[NGramData]
    bigrams: List[NGramData]
    trigrams: List[NGramData]
    skipgrams: List[NGramData]
    words: List[NGramData]
    totals: Totals

    def table(self, ngram_type: NGramType) -> List[NGramData]:
        return getattr(self, parse_ngram_type(ngram_type))

    def to_dict(self) -> dict:
        out: dict = {t: [asdict(e) for e in self.table(t)] for t in CFG.NGRAM_TYPES}
        out["totals"] = self.totals.as_dict()
        return out


@dataclass(frozen=True, slots=True)
class SearchSettings:
    query: str = ""
    use_regex: bool = False
    filters: FilterSettings = field(default_factory=FilterSettings)
    limit: int = CFG.DEFAULT_LIMIT  # 0 = no limit


@dataclass(frozen=True, slots=True)
class CorpusData:
    name: str
    text: str
    is_custom: bool = False


@dataclass
class ExplorerState:
    """Mutable session state held by engine.Explorer."""
    corpus: Optional[CorpusData] = None
    search: SearchSettings = field(default_factory=SearchSettings)
    analysis: Optional[AnalysisResults] = None
    selected_type: NGramType = CFG.DEFAULT_NGRAM_TYPE  # type: ignore[assignment]
