"""kjbpass - Memorable passwords from the King James Bible.

Builds passwords by joining random words from a fixed word list,
optionally followed by a symbol and/or a digit.

Core concepts:
    - The word corpus is loaded once, on first use, and shared
    - Options are tolerant: invalid values fall back to defaults
    - Words are drawn independently and may repeat

Example:
    {"wordCount": 3, "symbol": True, "number": True}
    → "created-the-light@7"

Usage:
    from kjbpass import generate_password, PasswordBuilder

    generate_password()                      # "in-the-beginning-god"
    generate_password({"wordCount": 5, "hyphenate": False})
    generate_password(symbol="#", number=4)

    # Custom corpus
    builder = PasswordBuilder(["in", "the", "beginning", "god", "created"])
    builder.build({"wordCount": 3})
"""

from .corpus import WordCorpus, load_corpus, reset_corpus
from .errors import CorpusError, KJBPassError
from .generator import PasswordBuilder, generate_password
from .options import GenerationOptions, validate_and_fill

__version__ = "0.1.0"

__all__ = [
    "CorpusError",
    "GenerationOptions",
    "KJBPassError",
    "PasswordBuilder",
    "WordCorpus",
    "generate_password",
    "load_corpus",
    "reset_corpus",
    "validate_and_fill",
]
