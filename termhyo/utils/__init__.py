"""Utility modules for termhyo."""

from .terminal_utils import (
    ELLIPSIS,
    calculate_display_width,
    iter_segments,
    pad_to_width,
    strip_escape_sequences,
    truncate_with_ellipsis,
)

__all__ = [
    "ELLIPSIS",
    "calculate_display_width",
    "iter_segments",
    "pad_to_width",
    "strip_escape_sequences",
    "truncate_with_ellipsis",
]
