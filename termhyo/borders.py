"""Border styles and their character tables."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict

BORDER_KEYS = (
    "horizontal",
    "vertical",
    "cross",
    "top_left",
    "top_right",
    "bottom_left",
    "bottom_right",
    "top_cross",
    "bottom_cross",
    "left_cross",
    "right_cross",
)


class BorderStyle(str, Enum):
    """Predefined border styles."""

    BOX_DRAWING = "box"
    ASCII = "ascii"
    ROUNDED = "rounded"
    DOUBLE = "double"
    MINIMAL = "minimal"
    VERTICAL_BAR = "vertical_bar"
    MARKDOWN = "markdown"
    TSV = "tsv"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name) -> "BorderStyle":
        """Parse a style name such as ``"rounded"`` or ``"vertical-bar"``."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(style.value for style in cls)
            raise ValueError(f"Unknown border style: {name}. Must be one of: {choices}") from None


@dataclass
class BorderConfig:
    """Border characters plus switches for each part of the frame.

    ``top``, ``middle`` and ``bottom`` control the horizontal lines above the
    header, below the header and below the last row. ``left``, ``right`` and
    ``vertical`` control the outer edges and the separators between columns.
    ``padding`` adds the table's padding on both sides of every cell.
    """

    chars: Dict[str, str] = field(default_factory=dict)
    top: bool = True
    bottom: bool = True
    middle: bool = True
    left: bool = True
    right: bool = True
    vertical: bool = True
    padding: bool = True

    def char(self, key: str) -> str:
        return self.chars.get(key, "")

    def copy(self) -> "BorderConfig":
        return replace(self, chars=dict(self.chars))


def _chars(*values: str) -> Dict[str, str]:
    return dict(zip(BORDER_KEYS, values))


_BORDER_CONFIGS = {
    BorderStyle.BOX_DRAWING: BorderConfig(
        chars=_chars("─", "│", "┼", "┌", "┐", "└", "┘", "┬", "┴", "├", "┤"),
    ),
    BorderStyle.ASCII: BorderConfig(
        chars=_chars("-", "|", "+", "+", "+", "+", "+", "+", "+", "+", "+"),
    ),
    BorderStyle.ROUNDED: BorderConfig(
        chars=_chars("─", "│", "┼", "╭", "╮", "╰", "╯", "┬", "┴", "├", "┤"),
    ),
    BorderStyle.DOUBLE: BorderConfig(
        chars=_chars("═", "║", "╬", "╔", "╗", "╚", "╝", "╦", "╩", "╠", "╣"),
    ),
    BorderStyle.MINIMAL: BorderConfig(
        chars=_chars(*(" " * len(BORDER_KEYS))),
        top=False,
        bottom=False,
        middle=False,
        left=False,
        right=False,
        vertical=False,
    ),
    # Column separators only
    BorderStyle.VERTICAL_BAR: BorderConfig(
        chars=_chars("", "|", "", "", "", "", "", "", "", "", ""),
        top=False,
        bottom=False,
        middle=False,
        left=False,
        right=False,
    ),
    BorderStyle.MARKDOWN: BorderConfig(
        chars=_chars("-", "|", "|", "", "", "", "", "|", "|", "|", "|"),
        top=False,
        bottom=False,
    ),
    BorderStyle.TSV: BorderConfig(
        chars=_chars("", "\t", "", "", "", "", "", "", "", "", ""),
        top=False,
        bottom=False,
        middle=False,
        left=False,
        right=False,
        padding=False,
    ),
}


def get_border_config(style) -> BorderConfig:
    """Return a fresh copy of the border configuration for a style.

    Unknown styles fall back to box drawing.
    """
    try:
        style = BorderStyle.parse(style)
    except ValueError:
        style = BorderStyle.BOX_DRAWING
    return _BORDER_CONFIGS[style].copy()
