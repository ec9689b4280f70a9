"""PDF layout engine and fpdf2 drawing surface."""

from cverse.pdf.colors import RGB, resolve_color
from cverse.pdf.composer import build_file_name, build_pdf_bytes, compose_layout, render_cv
from cverse.pdf.locale import Locale
from cverse.pdf.markdown import LinkSegment, ParsedLine, TextSegment, parse_markdown
from cverse.pdf.surface import CVPDFSurface

__all__ = [
    "CVPDFSurface",
    "LinkSegment",
    "Locale",
    "ParsedLine",
    "RGB",
    "TextSegment",
    "build_file_name",
    "build_pdf_bytes",
    "compose_layout",
    "parse_markdown",
    "render_cv",
    "resolve_color",
]
