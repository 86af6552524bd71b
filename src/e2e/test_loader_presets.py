from pathlib import Path

import pytest
from corpus_explorer.loader import CorpusLoadError, list_presets, load_custom, load_path, load_preset


def _seed(tmp: Path) -> Path:
    root = tmp / "corpus"; root.mkdir()
    (root / "e200.txt").write_text("the quick brown fox\n", encoding="utf-8")
    (root / "mr.txt").write_bytes(b"\xff\xfe\x00bad")
    return root


def test_list_presets_order():
    names = list_presets()
    assert names[0] == "e200.txt" and names[-1] == "tr.txt"
    assert len(names) == 9


def test_load_preset(tmp_path: Path):
    root = _seed(tmp_path)
    c = load_preset("e200.txt", corpus_dir=root)
    assert c.name == "e200.txt"
    assert c.text == "the quick brown fox\n"
    assert c.is_custom is False


def test_unknown_preset_is_a_load_error(tmp_path: Path):
    with pytest.raises(CorpusLoadError):
        load_preset("secret.txt", corpus_dir=_seed(tmp_path))


def test_missing_preset_file_is_a_load_error(tmp_path: Path):
    with pytest.raises(CorpusLoadError):
        load_preset("e1k.txt", corpus_dir=_seed(tmp_path))


def test_undecodable_bytes_are_a_load_error(tmp_path: Path):
    with pytest.raises(CorpusLoadError):
        load_preset("mr.txt", corpus_dir=_seed(tmp_path))


def test_load_path_and_custom(tmp_path: Path):
    p = tmp_path / "mine.txt"
    p.write_text("Café", encoding="utf-8")
    assert load_path(p).text == "Café"
    assert load_path(p).is_custom is True
    assert load_custom("Café".encode("utf-8")).text == "Café"
    with pytest.raises(CorpusLoadError):
        load_path(tmp_path / "nope.txt")


def test_byte_order_mark_is_not_corpus_text(tmp_path: Path):
    from corpus_explorer.aggregator import calculate_filtered_ngrams
    from corpus_explorer.models import FilterSettings

    p = tmp_path / "bom.txt"
    p.write_bytes(b"\xef\xbb\xbfhello world")
    text = load_path(p).text
    assert text == "hello world"
    r = calculate_filtered_ngrams(text, FilterSettings(filter_punctuation=True))
    assert sorted(e.sequence for e in r.words) == ["hello", "world"]
    assert load_custom(b"\xef\xbb\xbfhi").text == "hi"
    assert load_custom("\ufeffhi").text == "hi"
