"""Deterministic string transformations.

Responsibilities:
- Provide pure, stateless rewrites of a single string value.
- Keep edge-case behavior for empty and whitespace-only input explicit.

Every function here is total over `str` unless its docstring names an error.
"""

from __future__ import annotations

import math
import re

from ..errors import FormatError, InvalidArgumentError

BRAND_EXCEPTIONS = frozenset({"iPod", "iPhone", "iPad", "iCloud", "iOS"})

_BRAND_EXCEPTIONS_FOLDED = frozenset(brand.casefold() for brand in BRAND_EXCEPTIONS)
_STYLIZE_STRIP_RE = re.compile(r"[.,]")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]*")


def stylize(text: str) -> str:
    """Rewrite text as a run of one-word, capitalized sentences.

    Periods and commas are removed first, then every word is emitted with its
    first character uppercased and followed by `". "`. Brand names from
    `BRAND_EXCEPTIONS` are matched case-insensitively and kept verbatim.

    Example:
        ``stylize("We are profoundly passionate about music.")`` returns
        ``"We. Are. Profoundly. Passionate. About. Music. "``.
    """

    stripped = _STYLIZE_STRIP_RE.sub("", text)
    parts: list[str] = []
    for word in extract_words(stripped):
        if not word:
            continue
        if word.casefold() in _BRAND_EXCEPTIONS_FOLDED:
            parts.append(word)
        else:
            parts.append(_capitalize_first(word))
        parts.append(". ")
    return "".join(parts)


def _capitalize_first(word: str) -> str:
    """Uppercase the first character when it maps to exactly one character."""

    first = word[0].upper()
    if len(first) != 1:
        return word
    return first + word[1:]


def extract_words(text: str) -> list[str]:
    """Split text on runs of whitespace.

    Trailing empty tokens are dropped, while text that starts with whitespace
    keeps a leading empty token. Empty input yields `[""]`.
    """

    if not text:
        return [""]
    words = _WHITESPACE_RUN_RE.split(text)
    while words and not words[-1]:
        words.pop()
    return words


def normalize(text: str) -> str:
    """Remove all whitespace and uppercase the remaining characters."""

    return _WHITESPACE_RUN_RE.sub("", text).upper().strip()


def expand(text: str) -> str:
    """Spread normalized text across a row and a trailing column.

    The first line holds every character of `normalize(text)` separated by a
    single space. Each following line holds one character, starting from the
    second, so ``expand("A B CD")`` returns ``"A B C D\\nB\\nC\\nD"``.
    """

    normalized = normalize(text)
    column = "".join(f"\n{character}" for character in normalized[1:])
    return " ".join(normalized) + column


def reverse(text: str) -> str:
    """Return the characters of `text` in reverse order."""

    return text[::-1]


def to_hex(text: str) -> str:
    """Encode the UTF-8 bytes of `text` as uppercase hexadecimal."""

    return text.encode("utf-8", "surrogatepass").hex().upper()


def from_hex(hex_text: str) -> str:
    """Decode hexadecimal produced by `to_hex` back into text.

    Raises:
        FormatError: If the input has odd length, contains non-hex digits, or
            does not decode as UTF-8.
    """

    if len(hex_text) % 2 != 0:
        raise FormatError(f"Hex input must have even length, got {len(hex_text)}.")
    if not _HEX_DIGITS_RE.fullmatch(hex_text):
        raise FormatError("Hex input contains non-hexadecimal characters.")
    payload = bytes.fromhex(hex_text)
    try:
        return payload.decode("utf-8", "surrogatepass")
    except UnicodeDecodeError as exc:
        raise FormatError(f"Hex input does not decode as UTF-8: {exc.reason}.") from exc


def repeat(length: int, character: str) -> str:
    """Return `length` copies of `character`.

    Raises:
        InvalidArgumentError: If `length` is negative.
    """

    if length < 0:
        raise InvalidArgumentError(f"length must be non-negative, got {length}.")
    return character * length


def delimit(text: str, separator: str) -> str:
    """Insert `separator` between every pair of adjacent characters.

    ``delimit("abc", " ")`` returns ``"a b c"``; no separator is placed before
    the first or after the last character.
    """

    return separator.join(text)


def sort_chars(text: str) -> str:
    """Return the characters of `text` sorted by ascending code point."""

    return "".join(sorted(text))


def to_sentence_case(text: str) -> str:
    """Lowercase and trim text, then uppercase its first character."""

    result = text.lower().strip()
    if not result:
        return ""
    return _capitalize_first(result)


def format_list(text: str) -> str:
    """Format characters as a comma-separated list closed by a period.

    Whitespace is removed first, so ``format_list("Hello World")`` returns
    ``"H, e, l, l, o, W, o, r, l, d."``. Input with no other characters
    returns ``"."``.
    """

    sanitized = _WHITESPACE_RUN_RE.sub("", text)
    return ", ".join(sanitized) + "."


def percent_of(fraction: float) -> str:
    """Format a fraction as a whole-number percentage string.

    Rounding is half-to-even and no digit grouping is applied, so the output
    is independent of locale. `NaN` formats as ``"0%"``.
    """

    if math.isnan(fraction):
        return "0%"
    scaled = fraction * 100
    if math.isinf(scaled):
        return "∞%" if scaled > 0 else "-∞%"
    return f"{int(round(scaled))}%"


def unique_chars(text: str) -> str:
    """Reduce text to the first occurrence of each character, keeping order."""

    return "".join(dict.fromkeys(text))


def contains(text: str, character: str) -> bool:
    """Return whether `character` occurs at least once in `text`.

    Raises:
        InvalidArgumentError: If `character` is not exactly one character.
    """

    if len(character) != 1:
        raise InvalidArgumentError(
            f"character must be a single character, got {len(character)} characters."
        )
    return character in text
