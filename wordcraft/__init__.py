"""Top-level package for wordcraft.

This package provides deterministic text transformations, bounded random text
generation, and a small `Word` value type that classifies tokens into
grammatical roles. The command-line front end lives in `wordcraft.cli`.
"""

from .errors import FormatError, InvalidArgumentError
from .language import Word, WordRole
from .random_source import RandomSource, use_random_source

__all__ = [
    "FormatError",
    "InvalidArgumentError",
    "RandomSource",
    "Word",
    "WordRole",
    "__version__",
    "use_random_source",
]

__version__ = "0.1.0"
