from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from .normalize import is_whitespace


@dataclass(slots=True)
class RawNGramCounts:
    """Raw counts straight out of the scan, before any filtering."""
    monograms: Counter = field(default_factory=Counter)
    bigrams: Counter = field(default_factory=Counter)
    trigrams: Counter = field(default_factory=Counter)
    skipgrams: Counter = field(default_factory=Counter)
    words: Counter = field(default_factory=Counter)

    def as_dict(self) -> Dict[str, Counter]:
        return {
            "monograms": self.monograms,
            "bigrams": self.bigrams,
            "trigrams": self.trigrams,
            "skipgrams": self.skipgrams,
            "words": self.words,
        }


def calculate_ngrams(text: str) -> RawNGramCounts:
    """
    /* ~~~ One forward pass over text filling all five tables ~~~ */
    - monogram: text[i]
    - bigram:   text[i:i+2]                 (when i+1 is in range)
    - trigram:  text[i:i+3]                 (when i+2 is in range)
    - skipgram: text[i] + text[i+2]         (same window, middle char skipped)
    - word:     maximal run of non-whitespace characters
    Iteration is per code point, so every table agrees on what a character is.
    """
    counts = RawNGramCounts()
    mono, bi, tri, skip, words = (
        counts.monograms, counts.bigrams, counts.trigrams, counts.skipgrams, counts.words
    )

    n = len(text)
    word_start = -1  # start index of the word being accumulated, -1 when none

    for i, ch in enumerate(text):
        mono[ch] += 1

        if i + 1 < n:
            bi[text[i:i + 2]] += 1

        if i + 2 < n:
            tri[text[i:i + 3]] += 1
            skip[ch + text[i + 2]] += 1

        if is_whitespace(ch):
            # flush the pending word (if any) on a boundary
            if word_start >= 0:
                words[text[word_start:i]] += 1
                word_start = -1
        elif word_start < 0:
            word_start = i

    # text that does not end in whitespace
    if word_start >= 0:
        words[text[word_start:]] += 1

    return counts
