"""Abstract draw commands produced by the layout engine.

The layout phase only appends these values to a list; ``CVPDFSurface.replay``
turns them into fpdf2 calls. Coordinates are in millimetres, ``y`` of text is
the baseline, ``y`` of an image is its top edge.
"""

from dataclasses import dataclass, field
from typing import Literal

from cverse.pdf.colors import BLACK, RGB

FontStyle = Literal["", "B", "I", "BI"]


@dataclass(frozen=True)
class PlaceText:
    text: str
    x: float
    y: float
    size: float
    style: FontStyle = ""
    color: RGB = BLACK


@dataclass(frozen=True)
class PlaceLink:
    """Text that is also a clickable hyperlink."""

    text: str
    x: float
    y: float
    url: str
    size: float
    style: FontStyle = ""
    color: RGB = BLACK


@dataclass(frozen=True)
class PlaceLine:
    x1: float
    y1: float
    x2: float
    y2: float
    color: RGB = BLACK
    width: float = 0.2


@dataclass(frozen=True)
class PlaceImage:
    """A raster image given as a data URL, optionally framed by a border."""

    data: str
    x: float
    y: float
    w: float
    h: float
    border_color: RGB | None = None
    border_width: float = 0.2


@dataclass(frozen=True)
class PageBreak:
    pass


DrawCommand = PlaceText | PlaceLink | PlaceLine | PlaceImage | PageBreak


@dataclass
class DocumentLayout:
    """Result of a layout pass: the ordered draw commands plus a title."""

    title: str
    commands: list[DrawCommand] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return 1 + sum(isinstance(command, PageBreak) for command in self.commands)

    def pages(self) -> list[list[DrawCommand]]:
        """Group the commands by page (page breaks are dropped)."""
        pages: list[list[DrawCommand]] = [[]]
        for command in self.commands:
            if isinstance(command, PageBreak):
                pages.append([])
            else:
                pages[-1].append(command)
        return pages

    def texts(self, page: int | None = None) -> list[str]:
        """Visible text of every text/link command, optionally for one page."""
        source = self.commands if page is None else self.pages()[page]
        return [
            command.text for command in source if isinstance(command, (PlaceText, PlaceLink))
        ]
