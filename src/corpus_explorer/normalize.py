from __future__ import annotations


def is_whitespace(ch: str) -> bool:
    """Unicode whitespace; the same predicate decides word boundaries in the scanner."""
    return ch.isspace()


def _is_word_char(ch: str) -> bool:
    """Letters and digits (any script). Everything else that is not whitespace is punctuation."""
    return ch.isalnum()


def contains_whitespace(sequence: str) -> bool:
    return any(is_whitespace(ch) for ch in sequence)


def contains_punctuation(sequence: str) -> bool:
    """True if any character is neither alphanumeric nor whitespace."""
    for ch in sequence:
        if not _is_word_char(ch) and not is_whitespace(ch):
            return True
    return False


def normalize_sequence(sequence: str, case_sensitive: bool) -> str:
    # simple lowercasing, no casefold / locale rules
    return sequence if case_sensitive else sequence.lower()
