from __future__ import annotations
import re
from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional, Union
from urllib.parse import parse_qs, urlencode

from . import config as CFG
from .models import ExplorerState, FilterSettings, NGramType, SearchSettings

# Query keys
K_CORPUS = "corpus"
K_TYPE = "type"
K_LIMIT = "limit"
K_SEARCH = "search"
K_REGEX = "regex"
K_WHITESPACE = "whitespace"
K_PUNCT = "punct"
K_CASE = "case"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class URLState:
    """
    What a query string restores. Fields left as None were absent.
    A custom corpus cannot travel in a URL, so corpus=custom only sets
    needs_upload and leaves corpus_name empty.
    """
    corpus_name: Optional[str] = None
    needs_upload: bool = False
    selected_type: Optional[NGramType] = None
    search: Optional[SearchSettings] = None


def serialize_params(state: ExplorerState) -> Dict[str, str]:
    """Flat key/value form of the state; defaults are left out."""
    params: Dict[str, str] = {}

    if state.corpus is not None:
        params[K_CORPUS] = CFG.CUSTOM_CORPUS_NAME if state.corpus.is_custom else state.corpus.name

    if state.selected_type and state.selected_type != CFG.DEFAULT_NGRAM_TYPE:
        params[K_TYPE] = state.selected_type

    s = state.search
    if s is not None:
        if s.limit > 0:
            params[K_LIMIT] = str(s.limit)
        if s.query:
            params[K_SEARCH] = s.query
        if s.use_regex:
            params[K_REGEX] = "true"
        f = s.filters
        if f.filter_whitespace != CFG.DEFAULT_FILTER_WHITESPACE:
            params[K_WHITESPACE] = str(f.filter_whitespace).lower()
        if f.filter_punctuation != CFG.DEFAULT_FILTER_PUNCTUATION:
            params[K_PUNCT] = str(f.filter_punctuation).lower()
        if f.case_sensitive != CFG.DEFAULT_CASE_SENSITIVE:
            params[K_CASE] = str(f.case_sensitive).lower()

    return params


def serialize_state(state: ExplorerState) -> str:
    return urlencode(serialize_params(state))


def _first(params: Union[str, Mapping[str, str]]) -> Mapping[str, str]:
    if isinstance(params, str):
        parsed = parse_qs(params.lstrip("?"), keep_blank_values=True)
        return {k: v[0] for k, v in parsed.items()}
    return params


def _parse_limit(raw: Optional[str]) -> Optional[int]:
    # leading digits only, so "5abc" reads as 5
    m = _LEADING_INT.match(raw or "")
    if m is None:
        return None
    value = int(m.group(1), 10)
    return value if value > 0 else None


def deserialize_state(params: Union[str, Mapping[str, str]]) -> URLState:
    """
    Inverse of serialize_state. Unknown types and invalid limits are ignored;
    absent filter keys take their defaults.
    """
    p = _first(params)

    corpus_name: Optional[str] = None
    needs_upload = False
    raw_corpus = p.get(K_CORPUS)
    if raw_corpus:
        if raw_corpus == CFG.CUSTOM_CORPUS_NAME:
            needs_upload = True
        else:
            corpus_name = raw_corpus

    selected_type: Optional[NGramType] = None
    raw_type = p.get(K_TYPE)
    if raw_type and raw_type in CFG.NGRAM_TYPES:
        selected_type = raw_type  # type: ignore[assignment]

    limit = _parse_limit(p.get(K_LIMIT))
    query = p.get(K_SEARCH)
    use_regex = p.get(K_REGEX) == "true"
    ws = p.get(K_WHITESPACE)
    punct = p.get(K_PUNCT)
    case = p.get(K_CASE)

    search: Optional[SearchSettings] = None
    touched = (
        limit is not None or query is not None or use_regex
        or ws == "false" or punct == "true" or case == "true"
    )
    if touched:
        search = SearchSettings(
            query=query or "",
            use_regex=use_regex,
            limit=limit or CFG.DEFAULT_LIMIT,
            filters=FilterSettings(
                filter_whitespace=False if ws == "false" else CFG.DEFAULT_FILTER_WHITESPACE,
                filter_punctuation=True if punct == "true" else CFG.DEFAULT_FILTER_PUNCTUATION,
                case_sensitive=True if case == "true" else CFG.DEFAULT_CASE_SENSITIVE,
            ),
        )

    return URLState(
        corpus_name=corpus_name,
        needs_upload=needs_upload,
        selected_type=selected_type,
        search=search,
    )


def merge_state(state: ExplorerState, url: URLState) -> ExplorerState:
    """
    Rebuild the view settings from a restored URLState. A locator carries the
    whole selection, so keys it leaves out fall back to their defaults rather
    than to whatever was selected before. Corpus and analysis are kept; the
    caller decides whether to reload.
    """
    merged = replace(state)
    merged.selected_type = url.selected_type or CFG.DEFAULT_NGRAM_TYPE  # type: ignore[assignment]
    merged.search = url.search if url.search is not None else SearchSettings()
    return merged
