"""Terminal display utilities for proper text alignment.

This module provides utilities for calculating the visible width of text in
terminals, handling ANSI escape codes, control characters, grapheme clusters
(combining marks, emoji ZWJ sequences) and East Asian characters correctly,
and for truncating and padding text to an exact column width.

None of these functions raise: degenerate input (empty strings, negative
widths, malformed escape sequences) produces degenerate but well-defined
output.
"""

import re
import unicodedata
from typing import Iterator, Tuple

from wcwidth import wcswidth, wcwidth
from wcwidth.grapheme import iter_graphemes

# Compile regex once at module level for performance.
# An escape sequence is ESC [, parameter digits, ';' or '?', then one ASCII
# letter. When no letter follows ESC [ at all it runs to the end of the
# string; any other malformed ESC is a plain control character.
SEGMENT_RE = re.compile(
    r"(?P<escape>\x1b\[(?:[0-9;?]*[A-Za-z]|[^A-Za-z]*\Z))"
    r"|(?P<control>[\x00-\x08\x0a-\x1f\x7f])"
    r"|(?P<text>[^\x00-\x08\x0a-\x1f\x7f]+)"
)

ELLIPSIS = "..."
TAB_WIDTH = 1
MAX_GRAPHEME_WIDTH = 2


def iter_segments(text: str) -> Iterator[Tuple[str, str]]:
    """Split text into escape, control and printable spans.

    Yields ``(kind, span)`` pairs in their original order, where ``kind`` is
    one of ``"escape"`` (an ANSI CSI sequence), ``"control"`` (a single C0
    control character or DEL other than tab) or ``"text"`` (a run of
    printable characters, tabs and spaces included).

    Examples:
        >>> list(iter_segments("\\033[31mRed\\033[0m"))
        [('escape', '\\x1b[31m'), ('text', 'Red'), ('escape', '\\x1b[0m')]
    """
    for match in SEGMENT_RE.finditer(text):
        yield match.lastgroup, match.group()


def strip_escape_sequences(text: str) -> str:
    """Remove ANSI escape sequences and control characters, keeping tabs.

    Examples:
        >>> strip_escape_sequences("hello\\r\\n\\tworld")
        'hello\\tworld'
    """
    return "".join(span for kind, span in iter_segments(text) if kind == "text")


def _grapheme_width(grapheme: str) -> int:
    """Width of a single (NFC-normalized) grapheme cluster: 0, 1 or 2."""
    if grapheme == "\t":
        return TAB_WIDTH

    width = wcswidth(grapheme)
    if width < 0:
        # C1 controls and other non-printables count as zero width
        width = sum(max(wcwidth(char), 0) for char in grapheme)
    return min(width, MAX_GRAPHEME_WIDTH)


def calculate_display_width(text: str) -> int:
    """Calculate the visible width of text in terminal columns.

    This function correctly handles:
    - ANSI escape codes and control characters (removed from width calculation)
    - Grapheme clusters: a base character with its combining marks, variation
      selectors or zero-width-joined emoji counts once
    - East Asian Wide/Fullwidth characters and emoji (counted as 2 columns)
    - Tabs (counted as a single column)
    - Regular ASCII characters (counted as 1 column)

    Args:
        text: Input text that may contain ANSI codes, emoji, or unicode characters

    Returns:
        Number of terminal columns the text will occupy when displayed

    Examples:
        >>> calculate_display_width("Hello")
        5
        >>> calculate_display_width("こんにちは")
        10
        >>> calculate_display_width("\\033[31mRed\\033[0m")
        3
    """
    # Decomposed accents collapse onto their base character
    clean_text = unicodedata.normalize("NFC", strip_escape_sequences(text))
    return sum(_grapheme_width(grapheme) for grapheme in iter_graphemes(clean_text))


def truncate_with_ellipsis(text: str, max_width: int) -> str:
    """Truncate text to fit within max_width, adding an ellipsis if needed.

    Escape sequences are copied through unmodified and never split, control
    characters other than tab are dropped, and grapheme clusters are never
    cut in half. The returned text never measures wider than ``max_width``.

    Args:
        text: Text to truncate (ANSI codes are preserved but not counted)
        max_width: Maximum visible width in terminal columns

    Returns:
        ``text`` itself when it already fits, otherwise its longest fitting
        prefix followed by ``"..."``

    Examples:
        >>> truncate_with_ellipsis("hello world", 8)
        'hello...'
        >>> truncate_with_ellipsis("hello", 2)
        '..'
    """
    # No truncation needed
    if calculate_display_width(text) <= max_width:
        return text

    if max_width <= 0:
        return ""

    ellipsis_width = min(len(ELLIPSIS), max_width)
    available_width = max_width - ellipsis_width
    if available_width <= 0:
        return "." * max_width

    parts = []
    emitted = ""
    for kind, span in iter_segments(text):
        if kind == "escape":
            parts.append(span)
            continue
        if kind == "control":
            continue

        for grapheme in iter_graphemes(span):
            # Measure all printable text so far: a cluster split by an escape
            # or control rejoins once those are stripped
            candidate = emitted + grapheme
            if calculate_display_width(candidate) > available_width:
                return "".join(parts) + ELLIPSIS
            parts.append(grapheme)
            emitted = candidate

    return "".join(parts) + ELLIPSIS


def pad_to_width(text: str, target_width: int, align: str = "left", fill_char: str = " ") -> str:
    """Pad text to reach target width with proper alignment.

    Padding never truncates: text already at or beyond ``target_width`` is
    returned unchanged.

    Args:
        text: Text to pad (may contain ANSI codes)
        target_width: Target width in terminal columns
        align: Alignment mode - "left", "right" or "center"; anything else,
            including the empty default alignment, pads on the right
        fill_char: Single-column character to use for padding (default: space)

    Returns:
        Padded text

    Examples:
        >>> pad_to_width("Hello", 10)
        'Hello     '
        >>> pad_to_width("こんにちは", 12)
        'こんにちは  '
        >>> pad_to_width("Hi", 7, align="center")
        '  Hi   '
    """
    current_width = calculate_display_width(text)

    if current_width >= target_width:
        return text

    padding_needed = target_width - current_width

    if align == "right":
        return (fill_char * padding_needed) + text
    elif align == "center":
        left_padding = padding_needed // 2
        right_padding = padding_needed - left_padding
        return (fill_char * left_padding) + text + (fill_char * right_padding)
    else:
        return text + (fill_char * padding_needed)
