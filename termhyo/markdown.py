"""Markdown (GitHub pipe table) rendering."""

from .column import Alignment
from .exceptions import NoMarkdownHeaderError
from .renderer import Renderer
from .utils import pad_to_width, truncate_with_ellipsis


def alignment_separator(align: str, width: int) -> str:
    """Separator cell with alignment markers, at least 2 characters wide."""
    width = max(width, 2)

    if align == Alignment.RIGHT:
        return "-" * (width - 1) + ":"
    elif align == Alignment.CENTER:
        return ":" + "-" * (width - 2) + ":"
    return "-" * width


def format_markdown_cell(content: str, width: int, align: str) -> str:
    return pad_to_width(truncate_with_ellipsis(content, width), width, align)


class MarkdownRenderer(Renderer):
    """Buffer rows and render them as a Markdown table."""

    def add_row(self, table, row) -> None:
        self._check_open()
        table.rows.append(row)

    def render(self, table) -> None:
        self._check_not_rendered()

        if not any(column.title for column in table.columns):
            raise NoMarkdownHeaderError()

        table.calculate_column_widths()

        # Headers are centered
        table.write_line(
            self._line(format_markdown_cell(column.title, column.width, Alignment.CENTER) for column in table.columns)
        )
        table.write_line(
            "|" + "".join(alignment_separator(column.align, column.width + 2) + "|" for column in table.columns)
        )
        for row in table.rows:
            table.write_line(self._line(self._row_cells(table, row)))

        self.rendered = True

    @staticmethod
    def _line(contents) -> str:
        return "|" + "".join(f" {content} |" for content in contents)

    @staticmethod
    def _row_cells(table, row):
        for i, column in enumerate(table.columns):
            if i < len(row.cells):
                cell = row.cells[i]
                align = column.align if cell.align == Alignment.DEFAULT else cell.align
                yield format_markdown_cell(cell.content, column.width, align)
            else:
                yield format_markdown_cell("", column.width, column.align)
