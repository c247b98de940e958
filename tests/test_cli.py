"""Tests for the command line entry point."""

import io
import logging

import pytest

from termhyo.cli import build_table, main, parse_alignments, parse_args
from termhyo.column import Alignment
from termhyo.config import Config
from termhyo.utils.logging_config import setup_logging


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Keep user configuration files out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def people_csv(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("ID,Name\n1,Alice\n\n2,Bob\n", encoding="utf-8")
    return path


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test options default to None so configuration values apply."""
        args = parse_args([])
        assert args.file is None
        assert args.border is None
        assert args.header_style is None
        assert args.max_width is None
        assert args.tsv is False
        assert args.no_align is False

    def test_alignments(self):
        """Test short and long alignment names."""
        assert parse_alignments("r,l,c,d") == [
            Alignment.RIGHT,
            Alignment.LEFT,
            Alignment.CENTER,
            Alignment.DEFAULT,
        ]
        assert parse_alignments("right, center") == [Alignment.RIGHT, Alignment.CENTER]
        assert parse_alignments(None) == []

    def test_invalid_alignment(self):
        """Test an unknown alignment name."""
        with pytest.raises(ValueError, match="Invalid align value"):
            parse_alignments("r,sideways")


class TestBuildTable:
    """Tests for building a table from records."""

    def test_empty_input(self):
        """Test input without a header row is rejected."""
        with pytest.raises(ValueError, match="Input is empty"):
            build_table([], Config(), [], io.StringIO())

    def test_alignments_and_max_width(self):
        """Test alignments apply in order and max width to every column."""
        table = build_table(
            [["ID", "Name"], ["1", "Alice"]],
            Config(max_width=4),
            [Alignment.RIGHT],
            io.StringIO(),
        )
        assert [column.align for column in table.columns] == [Alignment.RIGHT, Alignment.DEFAULT]
        assert all(column.max_width == 4 for column in table.columns)


class TestMain:
    """Tests for running the command line."""

    def test_csv_file(self, people_csv, capsys):
        """Test a CSV file rendered with ASCII borders, skipping blank lines."""
        assert main([str(people_csv), "--border", "ascii"]) == 0
        assert capsys.readouterr().out == (
            "+----+-------+\n"
            "| ID | Name  |\n"
            "+----+-------+\n"
            "| 1  | Alice |\n"
            "| 2  | Bob   |\n"
            "+----+-------+\n"
        )

    def test_tsv_stdin(self, monkeypatch, capsys):
        """Test tab-separated standard input rendered as TSV."""
        monkeypatch.setattr("sys.stdin", io.StringIO("A\tB\nx\ty\n"))
        assert main(["--tsv", "--border", "tsv"]) == 0
        assert capsys.readouterr().out == "A\tB\nx\ty\n"

    def test_markdown_with_alignment(self, people_csv, capsys):
        """Test Markdown output uses the alignment markers."""
        assert main([str(people_csv), "-b", "markdown", "-a", "r"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "| ID | Name  |",
            "|---:|-------|",
            "|  1 | Alice |",
            "|  2 | Bob   |",
        ]

    def test_max_width(self, people_csv, capsys):
        """Test long cells are truncated with an ellipsis."""
        assert main([str(people_csv), "-b", "ascii", "-m", "4"]) == 0
        assert "| A... |" in capsys.readouterr().out

    def test_config_file_is_used(self, isolated, people_csv, capsys):
        """Test the working directory configuration applies."""
        (isolated / "termhyo.yaml").write_text("border: tsv\n", encoding="utf-8")
        assert main([str(people_csv)]) == 0
        assert capsys.readouterr().out == "ID\tName \n1 \tAlice\n2 \tBob  \n"

    def test_flags_override_config(self, isolated, people_csv, capsys):
        """Test command line flags beat the configuration file."""
        (isolated / "termhyo.yaml").write_text("border: tsv\n", encoding="utf-8")
        assert main([str(people_csv), "--border", "ascii"]) == 0
        assert capsys.readouterr().out.startswith("+----+")

    def test_missing_input(self, tmp_path, capsys):
        """Test a missing input file."""
        assert main([str(tmp_path / "absent.csv")]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_empty_input(self, monkeypatch, capsys):
        """Test empty standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main([]) == 1
        assert "Input is empty" in capsys.readouterr().err

    def test_unknown_border(self, people_csv, capsys):
        """Test an unknown border style."""
        assert main([str(people_csv), "--border", "fancy"]) == 1
        assert "Unknown border style" in capsys.readouterr().err

    def test_missing_config(self, people_csv, tmp_path, capsys):
        """Test an explicit configuration file that does not exist."""
        assert main([str(people_csv), "--config", str(tmp_path / "none.yaml")]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_invalid_config(self, isolated, people_csv, capsys):
        """Test an invalid configuration value."""
        (isolated / "termhyo.yaml").write_text("padding: -1\n", encoding="utf-8")
        assert main([str(people_csv)]) == 1
        assert "(Key: padding)" in capsys.readouterr().err

    def test_markdown_without_header(self, monkeypatch, capsys):
        """Test Markdown output with only empty header titles."""
        monkeypatch.setattr("sys.stdin", io.StringIO(",\na,b\n"))
        assert main(["-b", "markdown"]) == 1
        assert "non-empty header" in capsys.readouterr().err


class TestLogging:
    """Tests for logging setup."""

    def test_repeated_setup_keeps_one_handler(self):
        """Test calling setup twice replaces the handler."""
        setup_logging()
        logger = setup_logging(verbose=True)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_quiet_by_default(self):
        """Test debug messages are filtered without verbose."""
        logger = setup_logging()
        assert logger.level == logging.WARNING
