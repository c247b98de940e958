"""termhyo - tables for the terminal.

The name combines "terminal" and the Japanese word 表 (hyo), "table".

Basic usage::

    from termhyo import Alignment, Column, Table

    table = Table([
        Column("ID", align=Alignment.RIGHT),
        Column("Name", align=Alignment.LEFT),
        Column("Score", align=Alignment.CENTER),
    ])
    table.add_row("1", "Alice", "85")
    table.add_row("2", "Bob", "92")
    table.render()
"""

from .borders import BorderConfig, BorderStyle, get_border_config
from .column import Alignment, Cell, Column, Row
from .exceptions import (
    AddAfterRenderError,
    ConfigError,
    NoColumnsError,
    NoMarkdownHeaderError,
    TableAlreadyRenderedError,
    TermhyoError,
)
from .header_styles import (
    Ansi,
    HeaderStyle,
    bg_rgb256,
    bold_header_style,
    colored_header_style,
    default_header_style,
    rgb256,
    true_color_bg,
    true_color_fg,
    underline_header_style,
)
from .markdown import MarkdownRenderer
from .renderer import BufferedRenderer, Renderer, RenderMode, StreamingRenderer
from .table import Table
from .utils import (
    calculate_display_width,
    pad_to_width,
    strip_escape_sequences,
    truncate_with_ellipsis,
)

__version__ = "0.1.0"

__all__ = [
    "AddAfterRenderError",
    "Alignment",
    "Ansi",
    "BorderConfig",
    "BorderStyle",
    "BufferedRenderer",
    "Cell",
    "Column",
    "ConfigError",
    "HeaderStyle",
    "MarkdownRenderer",
    "NoColumnsError",
    "NoMarkdownHeaderError",
    "RenderMode",
    "Renderer",
    "Row",
    "StreamingRenderer",
    "Table",
    "TableAlreadyRenderedError",
    "TermhyoError",
    "bg_rgb256",
    "bold_header_style",
    "calculate_display_width",
    "colored_header_style",
    "default_header_style",
    "get_border_config",
    "pad_to_width",
    "rgb256",
    "strip_escape_sequences",
    "true_color_bg",
    "true_color_fg",
    "truncate_with_ellipsis",
    "underline_header_style",
]
