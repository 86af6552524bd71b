import pytest
from corpus_explorer.aggregator import calculate_filtered_ngrams, filter_and_reaggregate
from corpus_explorer.models import FilterSettings
from corpus_explorer.normalize import contains_punctuation, contains_whitespace


def test_whitespace_filter_drops_pairs_entirely():
    raw = {"ab": 2, "b ": 1, " a": 1}
    cm = filter_and_reaggregate(raw, FilterSettings(filter_whitespace=True))
    assert cm.counts == {"ab": 2}
    assert cm.total == 2


def test_whitespace_kept_when_filter_off():
    raw = {"ab": 2, "b ": 1, " a": 1}
    cm = filter_and_reaggregate(raw, FilterSettings(filter_whitespace=False))
    assert cm.counts == raw
    assert cm.total == 4


def test_punctuation_filter():
    raw = {"be,": 1, "be": 3, "to": 2, "o_o": 1}
    cm = filter_and_reaggregate(raw, FilterSettings(filter_punctuation=True))
    assert cm.counts == {"be": 3, "to": 2}
    assert cm.total == 5


def test_punctuation_filter_keeps_non_ascii_letters_and_digits():
    raw = {"café": 1, "naïve": 1, "٣٤": 1, "«x»": 1, "x—y": 1}
    cm = filter_and_reaggregate(raw, FilterSettings(filter_punctuation=True))
    assert set(cm.counts) == {"café", "naïve", "٣٤"}


def test_character_class_predicates():
    assert contains_whitespace("a\u00a0b")
    assert contains_whitespace("\t")
    assert not contains_whitespace("ab")
    assert contains_punctuation("¿")
    assert contains_punctuation("a_b")
    assert not contains_punctuation("Ωμέγα 12")


def test_case_collapse_sums_colliding_keys():
    r = calculate_filtered_ngrams("The the THE", FilterSettings())
    assert [(e.sequence, e.frequency, e.rank) for e in r.words] == [("the", 3, 1)]
    assert r.totals.words == 3


def test_case_sensitive_keeps_keys_apart():
    r = calculate_filtered_ngrams("The the THE", FilterSettings(case_sensitive=True))
    assert [e.sequence for e in r.words] == ["THE", "The", "the"]
    assert r.totals.words == 3


def test_total_matches_sum_of_frequencies_for_every_table():
    text = "It was the best of times, it was the worst of times; It WAS."
    for filters in (
        FilterSettings(),
        FilterSettings(filter_whitespace=False),
        FilterSettings(filter_punctuation=True),
        FilterSettings(case_sensitive=True, filter_whitespace=False),
    ):
        r = calculate_filtered_ngrams(text, filters)
        for name in ("monograms", "bigrams", "trigrams", "skipgrams", "words"):
            assert sum(e.frequency for e in r.table(name)) == r.totals.of(name)


def test_empty_corpus_yields_empty_results():
    r = calculate_filtered_ngrams("", FilterSettings())
    assert r.monograms == [] and r.words == []
    assert r.totals.as_dict() == {"monograms": 0, "bigrams": 0, "trigrams": 0, "skipgrams": 0, "words": 0}


def test_non_string_corpus_is_a_type_error():
    with pytest.raises(TypeError):
        calculate_filtered_ngrams(b"bytes", FilterSettings())  # type: ignore[arg-type]


def test_whitespace_class_edges():
    # information separators count as whitespace; the byte order mark does not
    for ch in "\x1c\x1d\x1e\x1f\u00a0 \u3000":
        assert contains_whitespace(ch)
    assert not contains_whitespace("\ufeff")
    assert contains_punctuation("\ufeff")
