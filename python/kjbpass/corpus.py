"""Word corpus for password generation.

Simple format: one word per line, as in the bundled King James Bible
word list. Empty lines are skipped. Lines keep their trailing whitespace
until a word is selected; word_at() trims it.

The process-wide corpus is loaded lazily on first use and shared by all
generation calls:

    corpus = load_corpus()
    corpus.word_at(0)
"""

import logging
import threading
from pathlib import Path
from typing import Iterator, Optional, Sequence

from . import config as cfg
from .errors import CorpusError

logger = logging.getLogger(__name__)


class WordCorpus:
    """An ordered, read-only list of corpus entries."""

    def __init__(self, words: Sequence[str], source: Optional[str] = None):
        """Initialize corpus.

        Args:
            words: Raw entries, one word each. May carry surrounding whitespace.
            source: Where the entries came from (for messages only).

        Raises:
            CorpusError: If there are no usable entries.
        """
        self._words = tuple(w for w in words if w.strip())
        self.source = source or "<memory>"
        if not self._words:
            raise CorpusError(self.source, "no words found")

    @staticmethod
    def parse(filepath: Path) -> Iterator[str]:
        """Parse a plain text word list.

        Args:
            filepath: Path to text file.

        Yields:
            Raw lines, newline included, skipping blank ones.
        """
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    yield line

    @classmethod
    def from_file(cls, filepath: Path | str) -> "WordCorpus":
        """Load a corpus from a word-per-line text file.

        Raises:
            CorpusError: If the file is missing, unreadable or empty.
        """
        filepath = Path(filepath)
        try:
            words = list(cls.parse(filepath))
        except FileNotFoundError as e:
            raise CorpusError(filepath, "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusError(filepath, str(e)) from e

        corpus = cls(words, source=str(filepath))
        logger.info("Loaded %d words from %s", len(corpus), filepath)
        return corpus

    def word_at(self, index: int) -> str:
        """Get the entry at index, trimmed of surrounding whitespace."""
        return self._words[index].strip()

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordCorpus({self.source}: {len(self._words)} words)"


_corpus: WordCorpus | None = None
_corpus_lock = threading.Lock()


def load_corpus() -> WordCorpus:
    """Get the shared corpus, loading it on first call.

    Concurrent first calls load the file exactly once. A failed load
    caches nothing, so the next call tries again.

    Raises:
        CorpusError: If the configured word list cannot be loaded.
    """
    global _corpus
    corpus = _corpus
    if corpus is not None:
        return corpus

    with _corpus_lock:
        if _corpus is None:
            _corpus = WordCorpus.from_file(cfg.default_corpus_path())
        return _corpus


def reset_corpus() -> None:
    """Drop the shared corpus so the next load_corpus() re-reads it."""
    global _corpus
    with _corpus_lock:
        _corpus = None
