"""Text transformation and generation components.

This package provides deterministic string rewrites and bounded random text
generation backed by an injectable random source.
"""

from .generation import (
    random_alpha_string,
    random_char,
    random_message,
    random_string,
    random_string_array,
    random_unique_string,
)
from .transform import (
    BRAND_EXCEPTIONS,
    contains,
    delimit,
    expand,
    extract_words,
    format_list,
    from_hex,
    normalize,
    percent_of,
    repeat,
    reverse,
    sort_chars,
    stylize,
    to_hex,
    to_sentence_case,
    unique_chars,
)

__all__ = [
    "BRAND_EXCEPTIONS",
    "contains",
    "delimit",
    "expand",
    "extract_words",
    "format_list",
    "from_hex",
    "normalize",
    "percent_of",
    "random_alpha_string",
    "random_char",
    "random_message",
    "random_string",
    "random_string_array",
    "random_unique_string",
    "repeat",
    "reverse",
    "sort_chars",
    "stylize",
    "to_hex",
    "to_sentence_case",
    "unique_chars",
]
