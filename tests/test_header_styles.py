"""Tests for header_styles module."""

import pytest

from termhyo.header_styles import (
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


class TestHeaderStyle:
    """Tests for HeaderStyle."""

    def test_apply_style(self):
        """Test flags come before colors and a reset closes the text."""
        style = HeaderStyle(bold=True, foreground_color=Ansi.RED, background_color=Ansi.BG_YELLOW)
        assert style.apply_style("Test") == "\033[1m\033[31m\033[43mTest\033[0m"

    def test_flag_order(self):
        """Test every flag in prefix order."""
        style = HeaderStyle(bold=True, underline=True, italic=True, dim=True, blink=True, reverse=True, strike=True)
        assert style.prefix() == "\033[1m\033[2m\033[3m\033[4m\033[5m\033[7m\033[9m"

    def test_custom_prefix_and_suffix(self):
        """Test custom sequences wrap the generated ones."""
        style = HeaderStyle(bold=True, custom_prefix="<", custom_suffix=">")
        assert style.apply_style("x") == "<\033[1mx>\033[0m"

    def test_empty_style(self):
        """Test an empty style leaves text untouched."""
        style = HeaderStyle()
        assert style.is_empty()
        assert style.prefix() == ""
        assert style.suffix() == ""
        assert style.apply_style("Test") == "Test"

    def test_non_empty_style(self):
        """Test any attribute makes the style non-empty."""
        assert not HeaderStyle(bold=True).is_empty()
        assert not HeaderStyle(foreground_color=Ansi.GREEN).is_empty()
        assert not HeaderStyle(custom_suffix="!").is_empty()

    def test_combine(self):
        """Test the other style wins where it sets a value."""
        base = HeaderStyle(bold=True, foreground_color=Ansi.RED, background_color=Ansi.BG_BLUE)
        other = HeaderStyle(underline=True, foreground_color=Ansi.GREEN)
        combined = base.combine(other)
        assert combined == HeaderStyle(
            bold=True,
            underline=True,
            foreground_color=Ansi.GREEN,
            background_color=Ansi.BG_BLUE,
        )

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("none", HeaderStyle()),
            ("default", HeaderStyle(bold=True, underline=True)),
            ("Bold", HeaderStyle(bold=True)),
            ("underline", HeaderStyle(underline=True)),
        ],
    )
    def test_from_name(self, name, expected):
        """Test preset lookup by name."""
        assert HeaderStyle.from_name(name) == expected

    def test_from_name_unknown(self):
        """Test an unknown preset name."""
        with pytest.raises(ValueError, match="Unknown header style"):
            HeaderStyle.from_name("sparkly")


class TestPresetsAndColors:
    """Tests for preset constructors and color helpers."""

    def test_presets(self):
        """Test preset constructors."""
        assert default_header_style() == HeaderStyle(bold=True, underline=True)
        assert bold_header_style() == HeaderStyle(bold=True)
        assert underline_header_style() == HeaderStyle(underline=True)
        assert colored_header_style(Ansi.WHITE, Ansi.BG_BLUE) == HeaderStyle(
            foreground_color=Ansi.WHITE, background_color=Ansi.BG_BLUE
        )

    def test_color_helpers(self):
        """Test 256-color and true color sequences."""
        assert rgb256(196) == "\033[38;5;196m"
        assert bg_rgb256(21) == "\033[48;5;21m"
        assert true_color_fg(255, 0, 0) == "\033[38;2;255;0;0m"
        assert true_color_bg(0, 128, 255) == "\033[48;2;0;128;255m"
