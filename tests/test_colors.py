"""Tests for theme colour resolution."""

import pytest

from cverse.pdf.colors import BLACK, RGB, resolve_color


class TestResolveColor:
    """Tests for resolve_color."""

    def test_hex_with_hash(self) -> None:
        """Test decoding a colour with a leading hash."""
        assert resolve_color("#0000FF") == RGB(0, 0, 255)

    def test_hex_without_hash(self) -> None:
        """Test that the leading hash is optional."""
        assert resolve_color("1E3A5F") == RGB(30, 58, 95)

    def test_case_insensitive(self) -> None:
        """Test that upper and lower case hex digits decode the same."""
        assert resolve_color("#abcdef") == resolve_color("#ABCDEF") == RGB(171, 205, 239)

    def test_components_are_ints_in_range(self) -> None:
        """Test that every channel is an int between 0 and 255."""
        color = resolve_color("#FF8000")
        assert color == (255, 128, 0)
        assert all(isinstance(component, int) for component in color)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "#",
            "#FFF",
            "#FFFFFFF",
            "##FFFFFF",
            "#GGGGGG",
            "blue",
            "rgb(0, 0, 255)",
            " #FFFFFF",
            "#FFFFFF\n",
        ],
    )
    def test_malformed_falls_back_to_black(self, value: str) -> None:
        """Test that malformed values resolve to black."""
        assert resolve_color(value) == BLACK

    def test_none_falls_back_to_black(self) -> None:
        """Test that a missing colour resolves to black."""
        assert resolve_color(None) == RGB(0, 0, 0)
