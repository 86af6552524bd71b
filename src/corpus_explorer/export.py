from __future__ import annotations
import csv
import io
from typing import Iterable

from . import config as CFG
from .models import NGramData, NGramType, parse_ngram_type


def sequence_label(ngram_type: NGramType) -> str:
    return CFG.SEQUENCE_LABELS[parse_ngram_type(ngram_type)]


def format_frequency(frequency: int, total: int) -> str:
    """Share of total as a percentage with 3 decimals ("0.000" when total is 0)."""
    if total <= 0:
        return "0.000"
    return f"{(frequency / total) * 100:.3f}"


def export_to_csv(entries: Iterable[NGramData], ngram_type: NGramType, total: int) -> str:
    """
    Render a ranked list as CSV text:

        Rank,<Label>,Counts,Frequency
        1,th,120,3.512%

    Fields containing a comma, quote or newline are quoted with embedded
    quotes doubled (csv.QUOTE_MINIMAL). Rows end with "\\n".
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(["Rank", sequence_label(ngram_type), "Counts", "Frequency"])
    for e in entries:
        writer.writerow([e.rank, e.sequence, e.frequency, f"{format_frequency(e.frequency, total)}%"])
    return buf.getvalue()


def export_filename(ngram_type: NGramType) -> str:
    return f"{parse_ngram_type(ngram_type)}_export.csv"
