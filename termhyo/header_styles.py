"""ANSI styling for table headers."""

from dataclasses import dataclass, fields


# ANSI escape sequences
class Ansi:
    """Terminal SGR sequences"""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    ITALIC = "\033[3m"
    UNDERLINE = "\033[4m"
    BLINK = "\033[5m"
    REVERSE = "\033[7m"
    STRIKE = "\033[9m"

    # Foreground colors
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    # Bright colors
    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"

    # Background colors
    BG_BLACK = "\033[40m"
    BG_RED = "\033[41m"
    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_BLUE = "\033[44m"
    BG_MAGENTA = "\033[45m"
    BG_CYAN = "\033[46m"
    BG_WHITE = "\033[47m"

    # Bright background colors
    BG_BRIGHT_BLACK = "\033[100m"
    BG_BRIGHT_RED = "\033[101m"
    BG_BRIGHT_GREEN = "\033[102m"
    BG_BRIGHT_YELLOW = "\033[103m"
    BG_BRIGHT_BLUE = "\033[104m"
    BG_BRIGHT_MAGENTA = "\033[105m"
    BG_BRIGHT_CYAN = "\033[106m"
    BG_BRIGHT_WHITE = "\033[107m"


def rgb256(color_code: int) -> str:
    """256-color foreground sequence."""
    return f"\033[38;5;{color_code}m"


def bg_rgb256(color_code: int) -> str:
    """256-color background sequence."""
    return f"\033[48;5;{color_code}m"


def true_color_fg(r: int, g: int, b: int) -> str:
    """24-bit foreground sequence."""
    return f"\033[38;2;{r};{g};{b}m"


def true_color_bg(r: int, g: int, b: int) -> str:
    """24-bit background sequence."""
    return f"\033[48;2;{r};{g};{b}m"


# Attribute name -> SGR sequence, in the order prefixes are emitted
_FLAG_SEQUENCES = (
    ("bold", Ansi.BOLD),
    ("dim", Ansi.DIM),
    ("italic", Ansi.ITALIC),
    ("underline", Ansi.UNDERLINE),
    ("blink", Ansi.BLINK),
    ("reverse", Ansi.REVERSE),
    ("strike", Ansi.STRIKE),
)


@dataclass
class HeaderStyle:
    """Styling applied to the whole header line.

    Colors and custom prefix/suffix are pre-built escape strings (see
    :class:`Ansi`, :func:`rgb256`, :func:`true_color_fg`); they are passed
    through untouched.
    """

    bold: bool = False
    underline: bool = False
    italic: bool = False
    dim: bool = False
    blink: bool = False
    reverse: bool = False
    strike: bool = False

    foreground_color: str = ""
    background_color: str = ""

    custom_prefix: str = ""
    custom_suffix: str = ""

    @classmethod
    def from_name(cls, name: str) -> "HeaderStyle":
        """Return a preset by name: none, default, bold or underline."""
        presets = {
            "none": HeaderStyle,
            "default": default_header_style,
            "bold": bold_header_style,
            "underline": underline_header_style,
        }
        key = name.strip().lower()
        if key not in presets:
            choices = ", ".join(presets)
            raise ValueError(f"Unknown header style: {name}. Must be one of: {choices}")
        return presets[key]()

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def prefix(self) -> str:
        if self.is_empty():
            return ""

        parts = [self.custom_prefix]
        parts.extend(sequence for name, sequence in _FLAG_SEQUENCES if getattr(self, name))
        parts.append(self.foreground_color)
        parts.append(self.background_color)
        return "".join(parts)

    def suffix(self) -> str:
        if self.is_empty():
            return ""
        return self.custom_suffix + Ansi.RESET

    def apply_style(self, text: str) -> str:
        """Wrap text in this style's prefix and suffix.

        Examples:
            >>> HeaderStyle(bold=True, foreground_color=Ansi.RED).apply_style("Test")
            '\\x1b[1m\\x1b[31mTest\\x1b[0m'
        """
        if self.is_empty():
            return text
        return self.prefix() + text + self.suffix()

    def combine(self, other: "HeaderStyle") -> "HeaderStyle":
        """Merge two styles; whatever ``other`` sets takes precedence."""
        values = {}
        for f in fields(self):
            mine, theirs = getattr(self, f.name), getattr(other, f.name)
            values[f.name] = theirs if theirs else mine
        return HeaderStyle(**values)


def default_header_style() -> HeaderStyle:
    return HeaderStyle(bold=True, underline=True)


def bold_header_style() -> HeaderStyle:
    return HeaderStyle(bold=True)


def underline_header_style() -> HeaderStyle:
    return HeaderStyle(underline=True)


def colored_header_style(fg_color: str, bg_color: str = "") -> HeaderStyle:
    return HeaderStyle(foreground_color=fg_color, background_color=bg_color)
