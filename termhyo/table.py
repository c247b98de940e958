"""The table: columns, rows, border drawing and cell formatting."""

import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .borders import BorderConfig, BorderStyle, get_border_config
from .column import Alignment, Cell, Column, Row
from .exceptions import NoColumnsError
from .header_styles import HeaderStyle
from .markdown import MarkdownRenderer
from .renderer import BufferedRenderer, Renderer, RenderMode, StreamingRenderer
from .utils import calculate_display_width, pad_to_width, truncate_with_ellipsis

logger = logging.getLogger(__name__)

# Corner/cross characters for each horizontal border line: (left, cross, right)
_LINE_CHARS = {
    "top": ("top_left", "top_cross", "top_right"),
    "middle": ("left_cross", "cross", "right_cross"),
    "bottom": ("bottom_left", "bottom_cross", "bottom_right"),
}


class Table:
    """A table rendered to a text writer.

    Example:
        >>> columns = [Column("ID", align=Alignment.RIGHT), Column("Name")]
        >>> table = Table(columns, border=BorderStyle.ASCII)
        >>> table.add_row("1", "Alice")
        >>> table.render()
        +----+-------+
        | ID | Name  |
        +----+-------+
        |  1 | Alice |
        +----+-------+

    Args:
        columns: Column definitions; a width of 0 makes the column auto-width
        writer: Object with a ``write(str)`` method (default: ``sys.stdout``)
        border: Predefined border style
        border_config: Custom border configuration, overrides ``border``'s
        header_style: Styling for the header line
        auto_align: If False, cells are written raw without truncation or padding
        padding: Spaces on each side of a cell when the border enables padding
    """

    def __init__(
        self,
        columns: List[Column],
        writer=None,
        border=BorderStyle.BOX_DRAWING,
        border_config: Optional[BorderConfig] = None,
        header_style: Optional[HeaderStyle] = None,
        auto_align: bool = True,
        padding: int = 1,
    ):
        # Copies: auto widths are filled in during rendering. A negative
        # width means auto-width, like 0.
        self.columns = [replace(column, width=max(column.width, 0)) for column in columns]
        self.rows: List[Row] = []
        self.writer = writer if writer is not None else sys.stdout
        self.padding = max(padding, 0)

        self._border_style = BorderStyle.parse(border)
        self._border_config = border_config.copy() if border_config else get_border_config(self._border_style)
        self._header_style = header_style if header_style is not None else HeaderStyle()
        self._auto_align = auto_align

        self.mode = self._determine_render_mode()
        self.renderer = self._select_renderer()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _determine_render_mode(self) -> RenderMode:
        has_auto_width = any(column.is_auto_width for column in self.columns)

        # Nothing to measure, or nothing to align to the measurement
        if not has_auto_width or not self._auto_align:
            return RenderMode.STREAMING
        return RenderMode.BUFFERED

    def _select_renderer(self) -> Renderer:
        if self._border_style == BorderStyle.MARKDOWN:
            renderer = MarkdownRenderer()
        elif self.mode == RenderMode.STREAMING:
            renderer = StreamingRenderer()
        else:
            renderer = BufferedRenderer()
        logger.debug("Using %s for %d columns (%s mode)", type(renderer).__name__, len(self.columns), self.mode)
        return renderer

    def _reselect_renderer(self) -> None:
        self.mode = self._determine_render_mode()
        self.renderer = self._select_renderer()

    @property
    def auto_align(self) -> bool:
        return self._auto_align

    @auto_align.setter
    def auto_align(self, value: bool) -> None:
        self._auto_align = value
        self._reselect_renderer()

    @property
    def border_style(self) -> BorderStyle:
        return self._border_style

    @border_style.setter
    def border_style(self, style) -> None:
        self._border_style = BorderStyle.parse(style)
        self._border_config = get_border_config(self._border_style)
        self._reselect_renderer()

    @property
    def border_config(self) -> BorderConfig:
        """A copy of the current border configuration."""
        return self._border_config.copy()

    @border_config.setter
    def border_config(self, config: BorderConfig) -> None:
        self._border_config = config.copy()

    @property
    def header_style(self) -> HeaderStyle:
        return self._header_style

    @header_style.setter
    def header_style(self, style: HeaderStyle) -> None:
        self._header_style = style

    def set_renderer(self, renderer: Renderer) -> None:
        self.renderer = renderer

    def set_header_style_without_separator(self, style: HeaderStyle) -> None:
        """Set the header style and drop the line under the header."""
        self._header_style = style
        self._border_config.middle = False

    def set_header_style_without_borders(self, style: HeaderStyle) -> None:
        """Set the header style and drop every horizontal border line."""
        self._header_style = style
        self._border_config.top = False
        self._border_config.middle = False
        self._border_config.bottom = False

    def set_header_style_borderless(self, style: HeaderStyle) -> None:
        """Set the header style and keep only the separators between columns."""
        self.set_header_style_without_borders(style)
        self._border_config.left = False
        self._border_config.right = False
        self._border_config.vertical = True

    def set_header_style_minimal(self, style: HeaderStyle) -> None:
        """Set the header style and drop all borders and separators."""
        self.set_header_style_borderless(style)
        self._border_config.vertical = False

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def add_row(self, *cells: str) -> None:
        """Add a row of plain cell contents."""
        self.renderer.add_row(self, Row.from_strings(*cells))

    def add_row_cells(self, *cells: Cell) -> None:
        """Add a row of cells with per-cell alignment."""
        self.renderer.add_row(self, Row(cells=list(cells)))

    def render(self) -> None:
        """Render the table (or, when streaming, finish it)."""
        self.renderer.render(self)

    def calculate_column_widths(self) -> None:
        """Size auto-width columns to their widest header or cell."""
        auto_columns = [i for i, column in enumerate(self.columns) if column.is_auto_width]
        if not auto_columns:
            return

        max_widths = {i: calculate_display_width(self.columns[i].title) for i in auto_columns}
        for row in self.rows:
            for i in auto_columns:
                if i < len(row.cells):
                    max_widths[i] = max(max_widths[i], calculate_display_width(row.cells[i].content))

        for i in auto_columns:
            column = self.columns[i]
            width = max_widths[i]
            if column.max_width > 0:
                width = min(width, column.max_width)
            column.width = width

        logger.debug("Calculated column widths: %s", [column.width for column in self.columns])

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write_line(self, line: str) -> None:
        self.writer.write(line + "\n")

    def render_header(self) -> None:
        """Render the top border, the header row and the header separator."""
        if not self.columns:
            raise NoColumnsError()

        if self._border_config.top:
            self.render_border_line("top")

        header_row = Row(cells=[Cell(content=column.title, align=Alignment.CENTER) for column in self.columns])
        self.render_header_row(header_row)

        if self._border_config.middle:
            self.render_border_line("middle")

    def render_header_row(self, row: Row) -> None:
        """Render a header row, styling the whole line including borders."""
        style = self._header_style
        self.write_line(style.prefix() + self._join_cells(row) + style.suffix())

    def render_row(self, row: Row) -> None:
        self.write_line(self._join_cells(row))

    def render_footer(self) -> None:
        if self._border_config.bottom:
            self.render_border_line("bottom")

    def render_border_line(self, position: str) -> None:
        """Render a horizontal border line: "top", "middle" or "bottom"."""
        config = self._border_config
        left, cross, right = _LINE_CHARS.get(position, _LINE_CHARS["middle"])

        parts = []
        if config.left:
            parts.append(config.char(left))

        for i, column in enumerate(self.columns):
            cell_width = column.width
            if config.padding:
                cell_width += self.padding * 2
            parts.append(config.char("horizontal") * cell_width)

            if config.vertical and i < len(self.columns) - 1:
                parts.append(config.char(cross))

        if config.right:
            parts.append(config.char(right))

        self.write_line("".join(parts))

    def _join_cells(self, row: Row) -> str:
        config = self._border_config
        vertical = config.char("vertical")

        parts = []
        if config.left:
            parts.append(vertical)

        for i, column in enumerate(self.columns):
            parts.append(self._cell_content(row, i, column))
            # Separator between columns only
            if config.vertical and i < len(self.columns) - 1:
                parts.append(vertical)

        if config.right:
            parts.append(vertical)

        return "".join(parts)

    def _cell_content(self, row: Row, index: int, column: Column) -> str:
        if index < len(row.cells):
            cell = row.cells[index]
            if not self._auto_align:
                return cell.content

            align = column.align if cell.align == Alignment.DEFAULT else cell.align
            return self.format_cell(cell.content, column.width, align)

        # Missing cell
        if not self._auto_align:
            return ""
        return self.format_cell("", column.width, column.align)

    def format_cell(self, content: str, width: int, align: str) -> str:
        """Truncate and align content to the column width, then add padding."""
        if calculate_display_width(content) > width:
            content = truncate_with_ellipsis(content, width)
        content = pad_to_width(content, width, align)

        if not self._border_config.padding:
            return content
        padding = " " * self.padding
        return padding + content + padding
