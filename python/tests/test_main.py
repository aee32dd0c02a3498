"""Tests for the command line interface."""

import re

from kjbpass.main import main


class TestMain:
    """Tests for main()."""

    def test_default_password(self, capsys):
        """Test that one default password is printed."""
        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert re.fullmatch(r"[a-z]+(-[a-z]+){3}", lines[0])

    def test_options(self, capsys):
        """Test word count, bare symbol and number flags."""
        assert main(["--word-count", "2", "--symbol", "--number"]) == 0
        out = capsys.readouterr().out.strip()
        assert re.fullmatch(r"[a-z]+-[a-z]+@[0-9]", out)

    def test_literal_values(self, capsys):
        """Test literal symbol and number values."""
        assert main(["-w", "1", "-s", "#", "-n", "42", "--no-hyphens"]) == 0
        out = capsys.readouterr().out.strip()
        assert re.fullmatch(r"[a-z]+#42", out)

    def test_count(self, capsys):
        """Test generating several passwords."""
        assert main(["--count", "5"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 5

    def test_seed(self, capsys):
        """Test that seeded runs repeat."""
        main(["--seed", "genesis", "--count", "3"])
        first = capsys.readouterr().out
        main(["--seed", "genesis", "--count", "3"])
        assert capsys.readouterr().out == first

    def test_custom_corpus(self, capsys, wordlist_file):
        """Test using a word list from disk."""
        assert main(["--corpus", str(wordlist_file), "-w", "3"]) == 0
        words = capsys.readouterr().out.strip().split("-")
        assert all(w in {"in", "the", "beginning", "god", "created"} for w in words)

    def test_missing_corpus(self, capsys, tmp_path):
        """Test that a missing word list exits with an error."""
        assert main(["--corpus", str(tmp_path / "missing.txt")]) == 1
        assert "ERROR" in capsys.readouterr().err
