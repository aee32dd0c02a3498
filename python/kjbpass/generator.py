"""Password builder.

Builds passwords from random corpus words:

    in-the-beginning-god        (defaults)
    inthebeginninggod@7         (hyphenate=False, symbol=True, number=True)
"""

import logging
from collections.abc import Mapping
import random
import secrets
from typing import Any, Optional, Sequence, Union

from . import config as cfg
from .corpus import WordCorpus, load_corpus
from .options import GenerationOptions

logger = logging.getLogger(__name__)

# Shared source for unseeded passwords
_system_random = secrets.SystemRandom()


class PasswordBuilder:
    """Builds passwords from a word corpus."""

    def __init__(self, corpus: Union[WordCorpus, Sequence[str], None] = None):
        """Initialize builder.

        Args:
            corpus: Corpus or plain word sequence to draw from. None uses
                the shared corpus, loaded on first build.
        """
        if corpus is not None and not isinstance(corpus, WordCorpus):
            corpus = WordCorpus(corpus)
        self._corpus = corpus

    @property
    def corpus(self) -> WordCorpus:
        if self._corpus is None:
            return load_corpus()
        return self._corpus

    @staticmethod
    def generate(
        words: WordCorpus,
        word_count: int,
        symbol: Union[bool, str],
        number: Union[bool, str],
        hyphenate: bool,
        rng: Optional[random.Random] = None,
    ) -> str:
        """Assemble a password.

        Words are drawn independently, so a word may repeat.

        Args:
            words: Corpus to draw from.
            word_count: Number of words.
            symbol: True for the default symbol, or a literal to append.
            number: True for a random digit, or a literal to append.
            hyphenate: Put "-" between words.
            rng: Random source. Defaults to the system source.

        Returns:
            The password.
        """
        rng = rng or _system_random
        password = ""
        for i in range(word_count):
            password += words.word_at(rng.randrange(len(words)))
            if hyphenate and i < word_count - 1:
                password += "-"

        if symbol:
            password += cfg.default_symbol() if symbol is True else str(symbol)

        if number:
            password += str(rng.randint(0, 9)) if number is True else str(number)

        return password

    def build(self, options: Any = None) -> str:
        """Generate a password from raw options.

        Malformed options fall back to defaults.

        Raises:
            CorpusError: If the shared corpus cannot be loaded.
        """
        opts, applied_defaults = GenerationOptions.parse(options)
        logger.debug("Generating password with %s (defaults: %s)", opts, applied_defaults)

        rng = random.Random(opts.seed) if opts.seed is not None else None
        return self.generate(
            self.corpus,
            opts.word_count,
            opts.symbol,
            opts.number,
            opts.hyphenate,
            rng=rng,
        )


_default_builder = PasswordBuilder()


def generate_password(options: Any = None, **overrides: Any) -> str:
    """Generate a password.

    Args:
        options: Mapping of option keys (wordCount, symbol, number,
            hyphenate, seed) to values. Anything invalid uses its default.
        **overrides: Same options as keywords, e.g. word_count=5.

    Returns:
        The password.

    Raises:
        CorpusError: If the word corpus cannot be loaded.
    """
    if overrides:
        merged = dict(options) if isinstance(options, Mapping) else {}
        merged.update(overrides)
        options = merged
    return _default_builder.build(options)
