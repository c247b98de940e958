"""Column, cell and row definitions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Alignment(str, Enum):
    """Text alignment options.

    Members compare equal to their plain string values, so ``"right"`` and
    ``Alignment.RIGHT`` are interchangeable. ``DEFAULT`` behaves like ``LEFT``
    and, on a cell, means "use the column's alignment".
    """

    DEFAULT = ""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Alignment":
        """Parse an alignment name or its first letter ("l", "c", "r")."""
        key = name.strip().lower()
        shorthand = {"l": cls.LEFT, "c": cls.CENTER, "r": cls.RIGHT, "d": cls.DEFAULT, "default": cls.DEFAULT}
        if key in shorthand:
            return shorthand[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Invalid align value: {name}. Must be 'left', 'center', 'right' or 'default'") from None


@dataclass
class Column:
    """Column properties.

    Attributes:
        title: Column header title
        width: Column width in terminal columns (0 or negative = auto-width)
        max_width: Upper bound for an auto-width column (0 = no limit)
        align: Alignment for the column's cells
    """

    title: str
    width: int = 0
    max_width: int = 0
    align: Alignment = Alignment.DEFAULT

    @property
    def is_auto_width(self) -> bool:
        return self.width <= 0


@dataclass
class Cell:
    """A table cell with an optional alignment override."""

    content: str
    align: Alignment = Alignment.DEFAULT


@dataclass
class Row:
    cells: List[Cell] = field(default_factory=list)

    @classmethod
    def from_strings(cls, *contents: str) -> "Row":
        return cls(cells=[Cell(content=content) for content in contents])
