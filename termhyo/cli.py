"""
termhyo - render CSV/TSV data as a terminal table

Usage:
    termhyo [FILE] [--border STYLE] [--header-style NAME] [--align SPEC]

Examples:
    termhyo data.csv                           # Box-drawing table from a CSV file
    cat data.tsv | termhyo --tsv -b markdown   # Markdown table from TSV on stdin
    termhyo data.csv --align r,l,c -m 20       # Per-column alignment, 20-column cap
"""

import argparse
import csv
import io
import logging
import sys
from typing import List, Optional

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import ANSI

from termhyo import __version__
from termhyo.borders import BorderStyle
from termhyo.column import Alignment, Column
from termhyo.config import Config
from termhyo.exceptions import TermhyoError
from termhyo.header_styles import Ansi, HeaderStyle
from termhyo.table import Table
from termhyo.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="termhyo",
        description="termhyo - render CSV/TSV data as a terminal table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  termhyo data.csv                           # Box-drawing table from a CSV file
  cat data.tsv | termhyo --tsv -b markdown   # Markdown table from TSV on stdin
  termhyo data.csv --align r,l,c -m 20       # Per-column alignment, 20-column cap
        """,
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Input file (default: standard input); the first row is the header",
    )
    parser.add_argument(
        "--tsv",
        action="store_true",
        help="Read tab-separated input instead of CSV",
    )
    parser.add_argument(
        "--border",
        "-b",
        type=str,
        default=None,
        help=f"Border style: {', '.join(style.value for style in BorderStyle)}",
    )
    parser.add_argument(
        "--header-style",
        type=str,
        default=None,
        help="Header style: none, default, bold, underline",
    )
    parser.add_argument(
        "--align",
        "-a",
        type=str,
        default=None,
        help="Comma-separated column alignments, e.g. 'r,l,c' or 'right,left'",
    )
    parser.add_argument(
        "--max-width",
        "-m",
        type=int,
        default=None,
        help="Maximum width of every auto-sized column (0 = no limit)",
    )
    parser.add_argument(
        "--padding",
        type=int,
        default=None,
        help="Spaces on each side of a cell",
    )
    parser.add_argument(
        "--no-align",
        action="store_true",
        help="Write cells as-is without truncation or padding",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Configuration file (default: ./termhyo.yaml, then ~/.termhyo/config.yaml)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"termhyo {__version__}",
    )

    return parser.parse_args(argv)


def parse_alignments(value: Optional[str]) -> List[Alignment]:
    """Parse a comma-separated alignment list ("r,l,c")."""
    if not value:
        return []
    return [Alignment.parse(name) for name in value.split(",")]


def read_records(source, delimiter: str) -> List[List[str]]:
    """Read delimited records, skipping blank lines."""
    return [record for record in csv.reader(source, delimiter=delimiter) if record]


def build_table(records: List[List[str]], config: Config, alignments: List[Alignment], writer) -> Table:
    """Create a table from records whose first entry is the header row."""
    if not records:
        raise ValueError("Input is empty: expected a header row")

    header, *rows = records
    columns = []
    for i, title in enumerate(header):
        align = alignments[i] if i < len(alignments) else Alignment.DEFAULT
        columns.append(Column(title=title, max_width=config.max_width, align=align))

    table = Table(
        columns,
        writer=writer,
        border=config.border,
        header_style=HeaderStyle.from_name(config.header_style),
        auto_align=config.auto_align,
        padding=config.padding,
    )
    for row in rows:
        table.add_row(*row)
    return table


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command line flags on top of the loaded configuration."""
    if args.border is not None:
        config.border = BorderStyle.parse(args.border)
    if args.header_style is not None:
        HeaderStyle.from_name(args.header_style)
        config.header_style = args.header_style
    if args.max_width is not None:
        config.max_width = max(args.max_width, 0)
    if args.padding is not None:
        config.padding = max(args.padding, 0)
    if args.no_align:
        config.auto_align = False
    return config


def emit(text: str, stream=None) -> None:
    """Write rendered output, through prompt_toolkit when on a terminal."""
    stream = stream if stream is not None else sys.stdout
    if stream.isatty():
        print_formatted_text(ANSI(text), end="")
    else:
        stream.write(text)


def print_error(message: str) -> None:
    print(f"{Ansi.RED}❌ Error: {message}{Ansi.RESET}", file=sys.stderr)


def run(args: argparse.Namespace) -> int:
    """Render the input described by args

    Returns:
        Process exit code
    """
    try:
        config = apply_overrides(Config.load(args.config), args)
        alignments = parse_alignments(args.align)
    except FileNotFoundError as e:
        print_error(str(e))
        return 1
    except ValueError as e:
        print_error(str(e))
        print(f"{Ansi.YELLOW}Please check the configuration and options{Ansi.RESET}", file=sys.stderr)
        return 1

    delimiter = "\t" if args.tsv else ","
    try:
        if args.file:
            with open(args.file, newline="", encoding="utf-8") as source:
                records = read_records(source, delimiter)
        else:
            records = read_records(sys.stdin, delimiter)
    except FileNotFoundError:
        print_error(f"Input file not found: {args.file}")
        return 1
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        print_error(f"Failed to read input: {e}")
        return 1

    logger.debug("Read %d records with delimiter %r", len(records), delimiter)

    buffer = io.StringIO()
    try:
        table = build_table(records, config, alignments, buffer)
        table.render()
    except (TermhyoError, ValueError) as e:
        print_error(str(e))
        return 1

    emit(buffer.getvalue())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI"""
    args = parse_args(argv)
    setup_logging(args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
