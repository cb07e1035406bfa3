"""Lexical tokens and their grammatical roles."""

from .word import (
    DEFAULT_WORD_LENGTH,
    Word,
    WordRole,
    classify_role,
    sanitize_word,
    sorted_words,
)

__all__ = [
    "DEFAULT_WORD_LENGTH",
    "Word",
    "WordRole",
    "classify_role",
    "sanitize_word",
    "sorted_words",
]
