"""Rendering strategies.

A table either buffers every row so auto-width columns can be sized from
their content (:class:`BufferedRenderer`), or writes each row as soon as it
is added (:class:`StreamingRenderer`). Markdown output has its own strategy
in :mod:`termhyo.markdown`.
"""

from abc import ABC, abstractmethod
from enum import Enum

from .exceptions import AddAfterRenderError, TableAlreadyRenderedError


class RenderMode(Enum):
    """When rows reach the writer."""

    # Collect all rows before rendering (for auto-width)
    BUFFERED = "buffered"
    # Render immediately (for fixed-width)
    STREAMING = "streaming"

    def __str__(self) -> str:
        return self.value.capitalize()


class Renderer(ABC):
    """Base class for rendering strategies."""

    def __init__(self):
        self.rendered = False

    @abstractmethod
    def add_row(self, table, row) -> None:
        """Accept a row added to the table."""

    @abstractmethod
    def render(self, table) -> None:
        """Finish the table."""

    def _check_open(self) -> None:
        if self.rendered:
            raise AddAfterRenderError()

    def _check_not_rendered(self) -> None:
        if self.rendered:
            raise TableAlreadyRenderedError()


class BufferedRenderer(Renderer):
    """Store rows and render everything at once."""

    def add_row(self, table, row) -> None:
        self._check_open()
        table.rows.append(row)

    def render(self, table) -> None:
        self._check_not_rendered()

        table.calculate_column_widths()
        table.render_header()
        for row in table.rows:
            table.render_row(row)
        table.render_footer()

        self.rendered = True


class StreamingRenderer(Renderer):
    """Write the header with the first row and every row as it arrives."""

    def __init__(self):
        super().__init__()
        self.header_done = False

    def _ensure_header(self, table) -> None:
        if not self.header_done:
            table.render_header()
            self.header_done = True

    def add_row(self, table, row) -> None:
        self._check_open()
        self._ensure_header(table)
        table.render_row(row)

    def render(self, table) -> None:
        self._check_not_rendered()

        # A table without rows still gets its header
        self._ensure_header(table)
        table.render_footer()

        self.rendered = True
