"""Text flow and pagination cursor.

``TextFlow`` owns the mutable position state of one layout pass (vertical
offset and page index) and records every placement as a draw command. It is
created per render and passed explicitly to each section renderer.
"""

from typing import Protocol

from cverse.pdf.colors import BLACK, RGB
from cverse.pdf.commands import (
    DrawCommand,
    FontStyle,
    PageBreak,
    PlaceImage,
    PlaceLine,
    PlaceLink,
    PlaceText,
)
from cverse.pdf.layout import DEFAULT_LAYOUT, PageLayout
from cverse.pdf.markdown import LinkSegment, ParsedLine, parse_markdown


class TextMeasurer(Protocol):
    """Text metrics supplied by the drawing surface."""

    def measure_width(self, text: str, size: float, style: FontStyle = "") -> float: ...

    def wrap_text(
        self, text: str, max_width: float, size: float, style: FontStyle = ""
    ) -> list[str]: ...


class TextFlow:
    """Cursor over fixed-size pages that emits draw commands."""

    def __init__(self, measurer: TextMeasurer, layout: PageLayout = DEFAULT_LAYOUT) -> None:
        self.measurer = measurer
        self.layout = layout
        self.y = layout.top_margin
        self.page = 0
        self.commands: list[DrawCommand] = []

    # -- pagination -------------------------------------------------------

    def new_page(self) -> None:
        self.commands.append(PageBreak())
        self.page += 1
        self.y = self.layout.top_margin

    def ensure_room(self, required_height: float = 0.0, bottom: float | None = None) -> bool:
        """Break the page if ``required_height`` does not fit above ``bottom``.

        ``bottom`` defaults to the hard page bottom. Returns True when a page
        break was inserted.
        """
        limit = self.layout.page_bottom if bottom is None else bottom
        if self.y + required_height > limit:
            self.new_page()
            return True
        return False

    def advance(self, lines: float = 1) -> None:
        self.y += lines * self.layout.line_height

    def half_line(self) -> None:
        self.advance(0.5)

    def skip(self, height: float) -> None:
        self.y += height

    # -- primitive placement ----------------------------------------------

    def text(
        self,
        text: str,
        x: float,
        size: float,
        style: FontStyle = "",
        color: RGB = BLACK,
    ) -> None:
        self.commands.append(
            PlaceText(text=text, x=x, y=self.y, size=size, style=style, color=color)
        )

    def link(
        self,
        text: str,
        x: float,
        url: str,
        size: float,
        style: FontStyle = "",
        color: RGB = BLACK,
    ) -> None:
        self.commands.append(
            PlaceLink(text=text, x=x, y=self.y, url=url, size=size, style=style, color=color)
        )

    def line(self, x1: float, x2: float, y: float, color: RGB = BLACK, width: float = 0.2) -> None:
        """Horizontal rule at ``y``."""
        self.commands.append(PlaceLine(x1=x1, y1=y, x2=x2, y2=y, color=color, width=width))

    def image(
        self,
        data: str,
        x: float,
        y: float,
        size: float,
        border_color: RGB | None = None,
        border_width: float = 0.2,
    ) -> None:
        self.commands.append(
            PlaceImage(
                data=data,
                x=x,
                y=y,
                w=size,
                h=size,
                border_color=border_color,
                border_width=border_width,
            )
        )

    # -- flowing text -----------------------------------------------------

    def write_wrapped(
        self,
        text: str,
        x: float,
        max_width: float,
        size: float,
        style: FontStyle = "",
        color: RGB = BLACK,
    ) -> None:
        """Wrap ``text`` to ``max_width`` and place it line by line."""
        line_height = self.layout.line_height
        for physical_line in self.measurer.wrap_text(text, max_width, size, style):
            self.ensure_room(line_height)
            self.text(physical_line, x, size, style, color)
            self.advance()

    def write_segments(
        self,
        line: ParsedLine,
        x: float,
        right: float,
        size: float,
        link_color: RGB,
    ) -> None:
        """Place a line mixing text and link segments.

        A horizontal cursor runs across the segments. A segment that would
        cross ``right`` forces a soft wrap first; continuation lines start
        ``continuation_indent`` to the right of ``x``.
        """
        line_height = self.layout.line_height
        wrap_left = x + self.layout.continuation_indent

        self.ensure_room(line_height)
        cursor_x = x
        line_start = x

        for segment in line.segments:
            text = segment.visible_text
            if not text:
                continue
            url = segment.url if isinstance(segment, LinkSegment) else None
            color = link_color if url is not None else BLACK
            width = self.measurer.measure_width(text, size)

            if cursor_x + width > right and cursor_x > line_start:
                self._soft_wrap()
                cursor_x = line_start = wrap_left
                text = text.lstrip()
                width = self.measurer.measure_width(text, size)

            if cursor_x + width > right:
                text, cursor_x = self._place_overlong(
                    text, cursor_x, wrap_left, right, size, url, color
                )
                line_start = wrap_left
                width = self.measurer.measure_width(text, size)
            self._place_run(text, cursor_x, size, url, color)
            cursor_x += width

        self.advance()

    def _soft_wrap(self) -> None:
        self.advance()
        self.ensure_room(self.layout.line_height)

    def _place_run(self, text: str, x: float, size: float, url: str | None, color: RGB) -> None:
        if url is None:
            self.text(text, x, size, color=color)
        else:
            self.link(text, x, url, size, color=color)

    def _place_overlong(
        self,
        text: str,
        x: float,
        wrap_left: float,
        right: float,
        size: float,
        url: str | None = None,
        color: RGB = BLACK,
    ) -> tuple[str, float]:
        """Place all but the last physical line of a segment wider than the column.

        Link pieces keep the segment's URL. Returns the trailing piece and the
        x where it goes.
        """
        if right - x <= 0 or right - wrap_left <= 0:
            raise ValueError(f"No horizontal room between x={x} and right={right}")

        first, *rest = self.measurer.wrap_text(text, right - x, size) or [text]
        if not rest:
            return first, x
        self._place_run(first, x, size, url, color)
        self._soft_wrap()

        # Long words are split mid-word, so continue from the original text
        if text.startswith(first):
            remainder = text[len(first) :].lstrip()
        else:
            remainder = " ".join(rest)
        pieces = self.measurer.wrap_text(remainder, right - wrap_left, size) or [remainder]
        for piece in pieces[:-1]:
            self._place_run(piece, wrap_left, size, url, color)
            self._soft_wrap()
        return pieces[-1], wrap_left

    def write_markdown(
        self,
        text: str,
        x: float,
        right: float,
        size: float,
        link_color: RGB,
    ) -> None:
        """Render a markdown-lite block inside the column ``[x, right]``.

        Indentation stops where less than ``min_column_width`` would be left.
        """
        max_left = max(x, right - self.layout.min_column_width)
        for line in parse_markdown(text):
            if line.is_blank:
                self.half_line()
                continue
            left = min(x + line.indent * self.layout.indent_step, max_left)
            if line.has_links:
                self.write_segments(line, left, right, size, link_color)
            else:
                self.write_wrapped(line.visible_text, left, right - left, size)
