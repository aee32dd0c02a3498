"""Password generation options.

Options arrive as a loosely typed mapping and are normalized into a
GenerationOptions record. Invalid or missing values silently fall back
to their defaults; parsing never fails.

Example:
    {"wordCount": "cat", "symbol": "#"}
    → GenerationOptions(word_count=4, symbol="#", number=False, hyphenate=True)
      applied defaults: ["word_count", "number", "hyphenate", "seed"]
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from . import config as cfg

logger = logging.getLogger(__name__)

# Recognized option keys
OPTION_WORD_COUNT = "wordCount"
OPTION_SYMBOL = "symbol"
OPTION_NUMBER = "number"
OPTION_HYPHENATE = "hyphenate"
OPTION_SEED = "seed"

# Accepted spellings -> field name
OPTION_ALIASES: dict[str, str] = {
    OPTION_WORD_COUNT: "word_count",
    "word_count": "word_count",
    OPTION_SYMBOL: "symbol",
    "useSymbol": "symbol",
    OPTION_NUMBER: "number",
    "useNumber": "number",
    OPTION_HYPHENATE: "hyphenate",
    "useHyphens": "hyphenate",
    OPTION_SEED: "seed",
    "seedValue": "seed",
}

DEFAULT_WORD_COUNT = 4
DEFAULT_SYMBOL = False
DEFAULT_NUMBER = False
DEFAULT_HYPHENATE = True

Seed = Union[int, str]


def is_valid_word_count(value: Any) -> bool:
    """A valid word count is a positive integer."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_valid_symbol(value: Any) -> bool:
    """Valid symbol options are booleans or non-empty strings.

    Multi-character strings are accepted and appended whole.
    """
    return isinstance(value, bool) or (isinstance(value, str) and value != "")


def is_valid_number(value: Any) -> bool:
    """Valid number options are booleans, non-empty strings or integers."""
    return is_valid_symbol(value) or (
        isinstance(value, int) and not isinstance(value, bool)
    )


def is_valid_hyphenate(value: Any) -> bool:
    return isinstance(value, bool)


def is_valid_seed(value: Any) -> bool:
    return isinstance(value, str) or (
        isinstance(value, int) and not isinstance(value, bool)
    )


def _configured(value: Any, is_valid, fallback: Any) -> Any:
    """Use a configured default only if it passes the same validation."""
    return value if is_valid(value) else fallback


@dataclass(frozen=True)
class GenerationOptions:
    """Validated options for a single password."""

    word_count: int = DEFAULT_WORD_COUNT
    symbol: Union[bool, str] = DEFAULT_SYMBOL    # True → default symbol
    number: Union[bool, str] = DEFAULT_NUMBER    # True → random digit
    hyphenate: bool = DEFAULT_HYPHENATE
    seed: Optional[Seed] = None

    @classmethod
    def defaults(cls) -> "GenerationOptions":
        """Options built from config.json defaults."""
        return cls(
            word_count=_configured(
                cfg.default_word_count(), is_valid_word_count, DEFAULT_WORD_COUNT
            ),
            symbol=_configured(
                cfg.default_symbol_option(), is_valid_symbol, DEFAULT_SYMBOL
            ),
            number=_configured(
                cfg.default_number_option(), is_valid_number, DEFAULT_NUMBER
            ),
            hyphenate=_configured(
                cfg.default_hyphenate(), is_valid_hyphenate, DEFAULT_HYPHENATE
            ),
        )

    @classmethod
    def parse(cls, raw: Any) -> tuple["GenerationOptions", list[str]]:
        """Normalize a raw option mapping.

        Args:
            raw: Mapping of option keys to values, or None.

        Returns:
            Tuple of (options, names of fields that fell back to defaults).
        """
        if raw is None:
            raw = {}
        elif not isinstance(raw, Mapping):
            logger.debug("Ignoring non-mapping options: %r", raw)
            raw = {}

        values: dict[str, Any] = {}
        for key, value in raw.items():
            name = OPTION_ALIASES.get(key)
            if name is None:
                logger.debug("Ignoring unknown option %r", key)
                continue
            values[name] = value

        validators = {
            "word_count": is_valid_word_count,
            "symbol": is_valid_symbol,
            "number": is_valid_number,
            "hyphenate": is_valid_hyphenate,
            "seed": is_valid_seed,
        }
        defaults = cls.defaults()

        resolved: dict[str, Any] = {}
        applied_defaults: list[str] = []
        for f in fields(cls):
            value = values.get(f.name)
            if f.name in values and validators[f.name](value):
                resolved[f.name] = value
            else:
                if f.name in values:
                    logger.debug(
                        "Invalid %s option %r, using default", f.name, value
                    )
                resolved[f.name] = getattr(defaults, f.name)
                applied_defaults.append(f.name)

        # Integer literals are appended as text; 0 means no number
        number = resolved["number"]
        if isinstance(number, int) and not isinstance(number, bool):
            resolved["number"] = str(number) if number else False

        return cls(**resolved), applied_defaults


def validate_and_fill(raw: Any) -> GenerationOptions:
    """Validate options, replacing anything invalid with its default."""
    options, _ = GenerationOptions.parse(raw)
    return options
