"""
Corpus Explorer

Frequency statistics over a text corpus: single characters, adjacent
character pairs and triples, skipgrams (first and last character of each
triple) and whitespace-delimited words. One scan fills all five tables;
the aggregator then filters, case-folds, re-aggregates and ranks them.

Main Functions:
    calculate_filtered_ngrams(text, filters): the pure pipeline
    Explorer: stateful wrapper used by the CLI and the Flask service

Example Usage:
    from corpus_explorer import calculate_filtered_ngrams, FilterSettings

    results = calculate_filtered_ngrams("ab ab", FilterSettings())
    for row in results.words:
        print(row.rank, row.sequence, row.frequency)
"""

# src/corpus_explorer/__init__.py
from .aggregator import calculate_filtered_ngrams, compute  # re-export
from .engine import Explorer
from .models import AnalysisResults, FilterSettings, NGramData, SearchSettings, Totals

__version__ = "1.0.0"
__all__ = [
    "calculate_filtered_ngrams",
    "compute",
    "Explorer",
    "AnalysisResults",
    "FilterSettings",
    "NGramData",
    "SearchSettings",
    "Totals",
]
