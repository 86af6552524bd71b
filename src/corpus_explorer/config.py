from __future__ import annotations
import os
from pathlib import Path

# Default filters (what the explorer starts with and what URL state omits)
DEFAULT_FILTER_WHITESPACE: bool = True
DEFAULT_FILTER_PUNCTUATION: bool = False
DEFAULT_CASE_SENSITIVE: bool = False

# 0 = no limit
DEFAULT_LIMIT: int = 0
DEFAULT_NGRAM_TYPE: str = "bigrams"

# Table order used everywhere results are listed
NGRAM_TYPES: tuple[str, ...] = ("monograms", "bigrams", "trigrams", "skipgrams", "words")

# Column header of the sequence column (table view and CSV export)
SEQUENCE_LABELS: dict[str, str] = {
    "monograms": "Monogram",
    "bigrams": "Bigram",
    "trigrams": "Trigram",
    "skipgrams": "Skipgram",
    "words": "Word",
}

TYPE_LABELS: dict[str, str] = {
    "monograms": "Monograms",
    "bigrams": "Bigrams",
    "trigrams": "Trigrams",
    "skipgrams": "Skipgrams",
    "words": "Words",
}

# /* ~~~ preset corpora shipped next to the app ~~~ */
PRESET_CORPORA: tuple[str, ...] = (
    "e200.txt",
    "e1k.txt",
    "e5k.txt",
    "e10k.txt",
    "e25k.txt",
    "e450k.txt",
    "mr.txt",
    "mt.txt",
    "tr.txt",
)

# project root: two levels above this file (src/corpus_explorer -> repo)
PROJECT_ROOT = Path(__file__).resolve().parents[2]
CORPUS_DIR: Path = Path(os.environ.get("CORPUS_EXPLORER_DIR", PROJECT_ROOT / "corpus"))
ENCODING: str = "utf-8"
# reading side drops a leading byte order mark
READ_ENCODING: str = "utf-8-sig"

# Locator value for text that was uploaded rather than picked from presets
CUSTOM_CORPUS_NAME: str = "custom"

# Flask upload cap
MAX_UPLOAD_BYTES: int = 64 * 1024 * 1024
