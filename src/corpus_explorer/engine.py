# corpus_explorer/engine.py
from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Mapping, Optional, Union

from . import config as CFG
from . import loader
from .aggregator import calculate_filtered_ngrams
from .export import export_filename, export_to_csv
from .models import (
    AnalysisResults, CorpusData, ExplorerState, FilterSettings, NGramData,
    NGramType, SearchSettings, parse_ngram_type,
)
from .search import DisplayStats, apply_search, display_stats, regex_error
from .url_state import deserialize_state, merge_state, serialize_state

log = logging.getLogger(__name__)


class NoCorpusError(RuntimeError):
    """A view/export was requested before any corpus was loaded."""


@dataclass(frozen=True)
class TableView:
    """One table as a consumer shows it: rows after search/limit plus the counts around them."""
    ngram_type: NGramType
    label: str
    rows: List[NGramData]
    total: int                 # core total (filters only), the percentage denominator
    stats: DisplayStats
    regex_error: Optional[str] = None


class Explorer:
    """
    Thin orchestration layer that glues together:
      - the corpus source (loader: presets, uploads, files),
      - the counting pipeline (aggregator.calculate_filtered_ngrams),
      - the consumers (search/limit view, CSV export, URL state).

    Public API (used by CLI/Flask):
      * load_preset(name) / load_text(text) / load_file(path)
      * set_filters(filters): re-runs the analysis
      * set_search(settings): search/limit only, no re-analysis
      * set_type(ngram_type)
      * view() / export_csv()
      * to_query() / from_query(params)

    Every analysis is a fresh call into the pure core; the Explorer only
    keeps the latest result for the current filters.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, corpus_dir: Optional[Union[str, Path]] = None, verbose: bool = False) -> None:
        if verbose or os.environ.get("CORPUS_EXPLORER_VERBOSE") == "1":
            logging.basicConfig(level=logging.INFO)
        self.corpus_dir = corpus_dir
        self.state = ExplorerState()

    @property
    def filters(self) -> FilterSettings:
        return self.state.search.filters

    @property
    def analysis(self) -> Optional[AnalysisResults]:
        return self.state.analysis

    # ------------- corpus -------------

    # /* ~~~ Load a preset corpus and analyze it with the current filters ~~~ */
    def load_preset(self, name: str) -> AnalysisResults:
        corpus = loader.load_preset(name, corpus_dir=self.corpus_dir)
        return self._set_corpus(corpus)

    def load_text(self, text: Union[str, bytes], name: str = CFG.CUSTOM_CORPUS_NAME) -> AnalysisResults:
        return self._set_corpus(loader.load_custom(text, name=name))

    def load_file(self, path: Union[str, Path]) -> AnalysisResults:
        return self._set_corpus(loader.load_path(path))

    # ------------- settings -------------

    def set_filters(self, filters: FilterSettings) -> Optional[AnalysisResults]:
        """Filters change the counts themselves, so the corpus is analyzed again."""
        self.state.search = replace(self.state.search, filters=filters)
        if self.state.corpus is None:
            return None
        return self._analyze()

    def set_search(self, settings: SearchSettings) -> None:
        # search/limit never touch the filters in effect
        self.state.search = replace(settings, filters=self.state.search.filters)

    def set_type(self, ngram_type: str) -> None:
        self.state.selected_type = parse_ngram_type(ngram_type)

    # ------------- consumers -------------

    def view(self, ngram_type: Optional[str] = None) -> TableView:
        results = self._require_analysis()
        t = parse_ngram_type(ngram_type) if ngram_type else self.state.selected_type
        entries = results.table(t)
        settings = self.state.search
        rows = apply_search(entries, settings)
        return TableView(
            ngram_type=t,
            label=CFG.TYPE_LABELS[t],
            rows=rows,
            total=results.totals.of(t),
            stats=display_stats(entries, rows, settings),
            regex_error=regex_error(settings),
        )

    def export_csv(self, ngram_type: Optional[str] = None) -> tuple[str, str]:
        """(filename, csv_text) for the table as currently displayed."""
        v = self.view(ngram_type)
        return export_filename(v.ngram_type), export_to_csv(v.rows, v.ngram_type, v.total)

    # ------------- URL state -------------

    def to_query(self) -> str:
        return serialize_state(self.state)

    def from_query(
        self, params: Union[str, Mapping[str, str]], *, load_corpus: bool = True
    ) -> Optional[AnalysisResults]:
        """
        Restore type/search/filters from a query string; keys it leaves out
        go back to their defaults. If it names a preset corpus and load_corpus
        is set, load it. A custom corpus has to be uploaded again.
        """
        url = deserialize_state(params)
        prev_filters = self.state.search.filters
        self.state = merge_state(self.state, url)

        if url.needs_upload:
            log.info("URL references a custom corpus; waiting for upload")
        if url.corpus_name and load_corpus:
            return self.load_preset(url.corpus_name)
        if self.state.corpus is not None and self.state.search.filters != prev_filters:
            return self._analyze()
        return self.state.analysis

    # ------------- internals -------------

    def _set_corpus(self, corpus: CorpusData) -> AnalysisResults:
        self.state.corpus = corpus
        return self._analyze()

    def _analyze(self) -> AnalysisResults:
        corpus = self.state.corpus
        if corpus is None:
            raise NoCorpusError("Explorer has no corpus loaded. Call load_preset() or load_text() first.")
        t0 = time.perf_counter()
        results = calculate_filtered_ngrams(corpus.text, self.state.search.filters)
        self.state.analysis = results
        log.info(
            "Analyzed %s (%d chars) in %.3fs: totals=%s",
            corpus.name, len(corpus.text), time.perf_counter() - t0, results.totals.as_dict(),
        )
        return results

    def _require_analysis(self) -> AnalysisResults:
        if self.state.analysis is None:
            raise NoCorpusError("Explorer has no corpus loaded. Call load_preset() or load_text() first.")
        return self.state.analysis
