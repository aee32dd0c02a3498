"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kjbpass import config, corpus


GENESIS_WORDS = ["in", "the", "beginning", "god", "created"]


@pytest.fixture(autouse=True)
def fresh_state():
    """Start every test without cached config or corpus."""
    config.reset()
    corpus.reset_corpus()
    yield
    config.reset()
    corpus.reset_corpus()


@pytest.fixture
def genesis_words():
    """The first five words of Genesis."""
    return list(GENESIS_WORDS)


@pytest.fixture
def sample_wordlist_content():
    """Sample word list, one word per line, with trailing whitespace."""
    return "in\nthe  \nbeginning\n\ngod\t\ncreated\n"


@pytest.fixture
def wordlist_file(tmp_path, sample_wordlist_content):
    """Sample word list written to disk."""
    path = tmp_path / "words.txt"
    path.write_text(sample_wordlist_content, encoding="utf-8")
    return path
