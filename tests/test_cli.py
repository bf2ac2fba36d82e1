"""Tests for the passcraft command-line interface."""

import logging
from unittest.mock import patch

import pytest

from passcraft import GeneratedPassword
from passcraft.cli import main


@pytest.fixture(autouse=True)
def _restore_logging():
    logger = logging.getLogger("passcraft")
    handlers, level = logger.handlers[:], logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestGenerateCommand:
    def test_default(self, capsys):
        assert main(["generate"]) == 0
        line = capsys.readouterr().out.strip()
        pwd, _, rest = line.partition("  ")
        assert len(pwd) == 16
        assert "bits" in rest

    def test_count(self, capsys):
        assert main(["generate", "-n", "20", "-c", "3"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3

    def test_pin(self, capsys):
        assert main(["generate", "--pin", "-n", "6", "--avoid-ambiguous"]) == 0
        pin = capsys.readouterr().out.split()[0]
        assert len(pin) == 6
        assert set(pin) <= set("23456789")

    def test_custom_words(self, capsys):
        assert main(["generate", "-n", "8", "-w", "sun", "-w", "sun"]) == 0
        pwd = capsys.readouterr().out.split()[0]
        assert pwd.startswith("sun")
        assert "sun-sun" not in pwd

    @patch("passcraft.cli.generate")
    def test_rating_printed(self, mock_generate, capsys):
        mock_generate.return_value = GeneratedPassword("x" * 12, 12)
        assert main(["generate", "-n", "12", "--no-symbols"]) == 0
        assert "x" * 12 + "  (Good, 71.5 bits)" in capsys.readouterr().out

    def test_no_classes(self, capsys):
        argv = ["generate", "--no-uppercase", "--no-lowercase", "--no-digits", "--no-symbols"]
        assert main(argv) == 2
        assert "at least one character type" in capsys.readouterr().err

    def test_bad_length(self, capsys):
        assert main(["generate", "-n", "0"]) == 2
        assert "Error" in capsys.readouterr().err

    def test_bad_count(self, tmp_path, capsys):
        out = tmp_path / "generated-password.txt"
        for count in ("0", "-2"):
            assert main(["generate", "-c", count, "-o", str(out)]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "count must be at least 1" in captured.err
        assert not out.exists()

    def test_assess_help_describes_flags(self, capsys):
        with pytest.raises(SystemExit):
            main(["assess", "--help"])
        help_text = " ".join(capsys.readouterr().out.split())
        assert "Size the alphabet without" in help_text

    def test_output_file(self, tmp_path, capsys):
        out = tmp_path / "generated-password.txt"
        assert main(["generate", "-n", "10", "-c", "2", "-o", str(out)]) == 0
        printed = [line.split()[0] for line in capsys.readouterr().out.splitlines()]
        assert out.read_text().splitlines() == printed

    def test_verbose_logs_to_stderr(self, capsys):
        assert main(["-v", "generate", "-n", "12"]) == 0
        assert "DEBUG" in capsys.readouterr().err


class TestAssessCommand:
    def test_explicit_alphabet_size(self, capsys):
        assert main(["assess", "aaaa", "-N", "2"]) == 0
        assert "Weak (4.0 bits)" in capsys.readouterr().out

    def test_size_from_class_flags(self, capsys):
        assert main(["assess", "abcdefghijkl", "--no-symbols"]) == 0
        assert "Good (71.5 bits)" in capsys.readouterr().out

    def test_bad_alphabet_size(self, capsys):
        assert main(["assess", "abc", "-N", "0"]) == 2


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
