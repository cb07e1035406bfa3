"""Word value type with rudimentary grammatical roles.

Responsibilities:
- Store one sanitized, lowercase token together with its grammatical role.
- Classify raw tokens by inspecting their first unsanitized character.
- Order words by ordinal comparison of their characters.

Key types:
- `WordRole`: grammatical role assigned at construction.
- `Word`: immutable token value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re
from typing import Iterable

from ..errors import InvalidArgumentError
from ..random_source import RandomSource, resolve_random_source
from ..text.generation import random_char

DEFAULT_WORD_LENGTH = 5
VOWELS = frozenset("aeiou")
TRAILING_PUNCTUATION = frozenset(".!?")
COMMA_PUNCTUATION = frozenset(",;:-")

_WHITESPACE_RUN_RE = re.compile(r"\s+")


class WordRole(Enum):
    """Grammatical role of a word within a sentence."""

    DEFAULT = "default"
    PROPER_NOUN = "proper_noun"
    TRAILING_PUNCTUATION = "trailing_punctuation"
    COMMA_DELINEATED = "comma_delineated"


def sanitize_word(text: str) -> str:
    """Trim text, drop all internal whitespace, and lowercase the rest."""

    return _WHITESPACE_RUN_RE.sub("", text.strip()).lower()


def classify_role(raw_text: str) -> WordRole:
    """Return the role implied by the first character of unsanitized text.

    Tests run in a fixed order and the first match wins: an uppercase first
    character marks a proper noun (only for text longer than one character,
    so a lone ``"I"`` or ``"A"`` stays default), then trailing punctuation
    (``.!?``), then comma-like punctuation (``,;:-``).
    """

    if not raw_text:
        return WordRole.DEFAULT
    first = raw_text[0]
    if len(raw_text) > 1 and first.isupper():
        return WordRole.PROPER_NOUN
    if first in TRAILING_PUNCTUATION:
        return WordRole.TRAILING_PUNCTUATION
    if first in COMMA_PUNCTUATION:
        return WordRole.COMMA_DELINEATED
    return WordRole.DEFAULT


@dataclass(frozen=True, slots=True)
class Word:
    """An immutable token of lowercase characters and a grammatical role.

    Attributes:
        characters: Sanitized characters; lowercase with no whitespace.
        role: Role fixed at construction.

    Ordering compares `characters` only, by code point. Two words with the
    same characters but different roles are neither less nor greater than
    each other, although they are not `==`.
    """

    characters: str
    role: WordRole = WordRole.DEFAULT

    def __post_init__(self) -> None:
        object.__setattr__(self, "characters", sanitize_word(self.characters))

    @classmethod
    def classify(cls, raw_text: str) -> Word:
        """Build a word from raw text, deriving its role from the first character."""

        return cls(raw_text, classify_role(raw_text))

    @classmethod
    def from_random(
        cls,
        role: WordRole = WordRole.DEFAULT,
        length: int = DEFAULT_WORD_LENGTH,
        *,
        source: RandomSource | None = None,
    ) -> Word:
        """Build a word of `length` random ASCII letters with the given role.

        Raises:
            InvalidArgumentError: If `length` is negative.
        """

        if length < 0:
            raise InvalidArgumentError(f"length must be non-negative, got {length}.")
        rng = resolve_random_source(source)
        letters = "".join(random_char("A", "Z", source=rng) for _ in range(length))
        return cls(letters.lower(), role)

    @classmethod
    def random(cls, *, source: RandomSource | None = None) -> Word:
        """Build a default-role word of `DEFAULT_WORD_LENGTH` random letters."""

        return cls.from_random(WordRole.DEFAULT, DEFAULT_WORD_LENGTH, source=source)

    def vowel_count(self) -> int:
        """Return how many of the characters are `a`, `e`, `i`, `o`, or `u`."""

        return sum(1 for character in self.characters if character in VOWELS)

    def consonant_count(self) -> int:
        """Return the number of characters that are not vowels."""

        return len(self.characters) - self.vowel_count()

    def compare(self, other: Word) -> int:
        """Return -1, 0, or 1 as this word orders before, with, or after `other`."""

        if self.characters < other.characters:
            return -1
        if self.characters > other.characters:
            return 1
        return 0

    def is_proper_noun(self) -> bool:
        return self.role is WordRole.PROPER_NOUN

    def is_trailing_punctuation(self) -> bool:
        return self.role is WordRole.TRAILING_PUNCTUATION

    def is_comma_delineated(self) -> bool:
        return self.role is WordRole.COMMA_DELINEATED

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.characters < other.characters

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.characters <= other.characters

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.characters > other.characters

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.characters >= other.characters

    def __str__(self) -> str:
        return self.characters


def sorted_words(words: Iterable[Word]) -> list[Word]:
    """Return words in ordinal order of their characters; ties keep input order."""

    return sorted(words, key=lambda word: word.characters)
