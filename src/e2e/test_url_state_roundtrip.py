from corpus_explorer.models import CorpusData, ExplorerState, FilterSettings, SearchSettings
from corpus_explorer.url_state import deserialize_state, serialize_params, serialize_state


def test_defaults_serialize_to_empty_string():
    assert serialize_state(ExplorerState()) == ""


def test_non_defaults_are_written():
    state = ExplorerState(
        corpus=CorpusData(name="e1k.txt", text="", is_custom=False),
        selected_type="words",
        search=SearchSettings(
            query="th", use_regex=True, limit=10,
            filters=FilterSettings(filter_whitespace=False, filter_punctuation=True, case_sensitive=True),
        ),
    )
    assert serialize_params(state) == {
        "corpus": "e1k.txt",
        "type": "words",
        "limit": "10",
        "search": "th",
        "regex": "true",
        "whitespace": "false",
        "punct": "true",
        "case": "true",
    }


def test_custom_corpus_is_marked_not_embedded():
    state = ExplorerState(corpus=CorpusData(name="mine.txt", text="secret", is_custom=True))
    assert serialize_params(state) == {"corpus": "custom"}
    url = deserialize_state("corpus=custom")
    assert url.needs_upload is True
    assert url.corpus_name is None


def test_absent_keys_mean_defaults():
    url = deserialize_state("")
    assert url.selected_type is None
    assert url.search is None
    url = deserialize_state("punct=true")
    assert url.search == SearchSettings(filters=FilterSettings(filter_punctuation=True))


def test_invalid_values_are_ignored():
    url = deserialize_state("type=quadgrams&limit=-3")
    assert url.selected_type is None
    assert url.search is None
    url = deserialize_state("limit=abc&case=true")
    assert url.search is not None
    assert url.search.limit == 0
    assert url.search.filters.case_sensitive is True


def test_skipgrams_type_is_accepted():
    assert deserialize_state("?type=skipgrams").selected_type == "skipgrams"


def test_roundtrip_preserves_search_and_type():
    search = SearchSettings(query="a b&c", use_regex=False, limit=5,
                            filters=FilterSettings(filter_whitespace=False))
    state = ExplorerState(selected_type="trigrams", search=search)
    url = deserialize_state(serialize_state(state))
    assert url.selected_type == "trigrams"
    assert url.search == search


def test_accepts_mapping_input():
    url = deserialize_state({"type": "monograms", "search": "é"})
    assert url.selected_type == "monograms"
    assert url.search is not None and url.search.query == "é"


def test_limit_reads_leading_digits():
    assert deserialize_state("limit=5abc").search.limit == 5
    assert deserialize_state("limit=+7").search.limit == 7
    assert deserialize_state("limit=abc5").search is None
    assert deserialize_state("limit=0").search is None


def test_merge_fills_absent_keys_with_defaults():
    from corpus_explorer.url_state import merge_state
    state = ExplorerState(
        selected_type="words",
        search=SearchSettings(query="x", limit=3, filters=FilterSettings(case_sensitive=True)),
    )
    merged = merge_state(state, deserialize_state(""))
    assert merged.selected_type == "bigrams"
    assert merged.search == SearchSettings()
