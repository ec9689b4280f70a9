"""Theme colour resolution."""

import re
from typing import NamedTuple

HEX_COLOR_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


class RGB(NamedTuple):
    """An RGB triple, each component in [0, 255]."""

    r: int
    g: int
    b: int


BLACK = RGB(0, 0, 0)
BORDER_GRAY = RGB(200, 200, 200)


def resolve_color(value: str | None) -> RGB:
    """Parse a ``#RRGGBB`` / ``RRGGBB`` string.

    Anything that is not exactly six hex digits (after an optional ``#``)
    resolves to black. No error is raised: black is also the default theme
    colour.

    Examples:
        >>> resolve_color("#0000FF")
        RGB(r=0, g=0, b=255)
        >>> resolve_color("blue")
        RGB(r=0, g=0, b=0)
    """
    if not value:
        return BLACK
    match = HEX_COLOR_PATTERN.fullmatch(value)
    if not match:
        return BLACK
    return RGB(*(int(part, 16) for part in match.groups()))
