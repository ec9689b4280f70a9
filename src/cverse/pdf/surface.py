"""fpdf2 drawing surface.

``CVPDFSurface`` is the only place that talks to fpdf2. It measures and wraps
text for the layout pass and replays the resulting draw commands onto A4
pages.
"""

import io
import logging
from collections.abc import Iterable
from pathlib import Path

from fpdf import FPDF, ViewerPreferences  # type: ignore[import-untyped]
from fpdf.enums import MethodReturnValue  # type: ignore[import-untyped]

from cverse.pdf.commands import (
    DrawCommand,
    FontStyle,
    PageBreak,
    PlaceImage,
    PlaceLine,
    PlaceLink,
    PlaceText,
)
from cverse.pdf.photo import decode_photo

logger = logging.getLogger(__name__)

CORE_FONT = "Helvetica"

# Style suffixes of a Unicode TTF family, e.g. "Poppins-BoldItalic.ttf"
_TTF_STYLES: dict[FontStyle, str] = {
    "": "Regular",
    "B": "Bold",
    "I": "Italic",
    "BI": "BoldItalic",
}


def _sanitize_core_font_text(text: str) -> str:
    """Map characters outside the core fonts' Latin-1 range.

    The bullet goes to 0x95, which the WinAnsi-encoded core fonts draw as a
    bullet. Anything else that Latin-1 cannot hold becomes "?".
    """
    replacements = {
        "•": "\x95",  # • bullet
        "‘": "'",  # ' Left single quote
        "’": "'",  # ' Right single quote
        "“": '"',  # " Left double quote
        "”": '"',  # " Right double quote
        "–": "-",  # – En dash
        "—": "-",  # — Em dash
        "…": "...",  # … Ellipsis
    }
    for char, replacement in replacements.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _get_ttf_family(font_dir: Path | None) -> tuple[str, dict[FontStyle, Path]] | None:
    """Find a complete TTF family (Regular/Bold/Italic/BoldItalic) in ``font_dir``.

    Returns the family name and the file per style, or None if incomplete.
    """
    if font_dir is None or not font_dir.is_dir():
        return None

    for regular in sorted(font_dir.glob("*-Regular.ttf")):
        family = regular.name.removesuffix("-Regular.ttf")
        files: dict[FontStyle, Path] = {
            style: font_dir / f"{family}-{suffix}.ttf" for style, suffix in _TTF_STYLES.items()
        }
        if all(path.exists() for path in files.values()):
            return family, files
    return None


class CVPDFSurface(FPDF):
    """A4 drawing surface for rendered CVs.

    Page breaks are driven by the layout pass, so fpdf2's automatic page
    breaking is disabled. The first page is opened on construction.
    """

    def __init__(self, font_dir: Path | None = None) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self.set_auto_page_break(auto=False)
        self.set_margins(left=20, top=20, right=20)
        self.core_fonts_encoding = "latin-1"
        self._setup_font(font_dir)
        self.add_page()

    def _setup_font(self, font_dir: Path | None) -> None:
        family = _get_ttf_family(font_dir)
        if family:
            name, files = family
            for style, path in files.items():
                self.add_font(name, style, str(path))
            self.font_name = name
            self.uses_core_font = False
        else:
            self.font_name = CORE_FONT
            self.uses_core_font = True

    def _prepare(self, text: str) -> str:
        if self.uses_core_font:
            return _sanitize_core_font_text(text)
        return text

    def _use_font(self, size: float, style: FontStyle = "") -> None:
        self.set_font(self.font_name, style, size)

    # -- text metrics -----------------------------------------------------

    def measure_width(self, text: str, size: float, style: FontStyle = "") -> float:
        """Rendered width of ``text`` in mm."""
        self._use_font(size, style)
        return self.get_string_width(self._prepare(text))

    def wrap_text(
        self, text: str, max_width: float, size: float, style: FontStyle = ""
    ) -> list[str]:
        """Split ``text`` into the physical lines fpdf2 would produce at ``max_width``."""
        if max_width <= 0:
            raise ValueError(f"Cannot wrap text to a non-positive width: {max_width}")
        if not text:
            return []
        self._use_font(size, style)
        # multi_cell keeps a cell margin on both sides of the text
        cell_width = max_width + 2 * self.c_margin
        lines = self.multi_cell(
            cell_width,
            5,
            self._prepare(text),
            dry_run=True,
            output=MethodReturnValue.LINES,
        )
        if self.uses_core_font:
            lines = [line.replace("\x95", "•") for line in lines]
        return lines

    # -- command replay ---------------------------------------------------

    def replay(self, commands: Iterable[DrawCommand]) -> None:
        """Draw a layout's commands, in order."""
        for command in commands:
            if isinstance(command, PageBreak):
                self.add_page()
            elif isinstance(command, PlaceText):
                self._draw_text(command)
            elif isinstance(command, PlaceLink):
                self._draw_text(command)
                self._add_link_area(command)
            elif isinstance(command, PlaceLine):
                self.set_draw_color(*command.color)
                self.set_line_width(command.width)
                self.line(command.x1, command.y1, command.x2, command.y2)
            elif isinstance(command, PlaceImage):
                self._place_image(command)

    def _draw_text(self, command: PlaceText | PlaceLink) -> None:
        self._use_font(command.size, command.style)
        self.set_text_color(*command.color)
        self.text(command.x, command.y, self._prepare(command.text))

    def _add_link_area(self, command: PlaceLink) -> None:
        width = self.measure_width(command.text, command.size, command.style)
        height = self.font_size  # current font size in mm
        self.link(command.x, command.y - height, width, height * 1.25, command.url)

    def _place_image(self, command: PlaceImage) -> None:
        """Embed a photo; a bad image is logged and left out of the document."""
        try:
            photo = decode_photo(command.data)
            self.image(io.BytesIO(photo.data), x=command.x, y=command.y, w=command.w, h=command.h)
        except Exception as e:
            logger.warning(f"Could not place photo, continuing without it: {e}")
            return

        if command.border_color is not None:
            self.set_draw_color(*command.border_color)
            self.set_line_width(command.border_width)
            self.rect(command.x, command.y, command.w, command.h, style="D")

    # -- output -----------------------------------------------------------

    def set_document_info(self, title: str, author: str) -> None:
        """Set PDF metadata for better indexing."""
        self.set_title(title)
        self.set_author(author)
        self.set_subject("Curriculum Vitae")
        self.set_creator("cVerse")
        # Display document title in viewer (not filename)
        self.viewer_preferences = ViewerPreferences(display_doc_title=True)

    def output_bytes(self) -> bytes:
        return bytes(self.output())

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.output(str(path))
        return path
