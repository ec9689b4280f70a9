"""Document composer: lays out a whole CV and writes the PDF.

Rendering is split in two phases:

1. ``compose_layout`` walks the CV in a fixed order (personal header,
   experience, education, qualities, skills, interests) and produces a
   ``DocumentLayout``, a flat list of draw commands. It only needs text
   metrics, so it can run against any ``TextMeasurer``.
2. ``CVPDFSurface.replay`` draws those commands with fpdf2.

``render_cv`` chains both and saves the result as
``CV_<Name>_<timestamp>.pdf``.
"""

import logging
import re
import time
from pathlib import Path

from cverse.config import Settings, get_settings
from cverse.models.cv import CVData
from cverse.pdf.colors import resolve_color
from cverse.pdf.commands import DocumentLayout
from cverse.pdf.flow import TextFlow, TextMeasurer
from cverse.pdf.layout import DEFAULT_LAYOUT, PageLayout
from cverse.pdf.locale import CONTACT_LABELS, SECTION_TITLES, Locale, get_locale
from cverse.pdf.sections import (
    Theme,
    render_entry,
    render_personal_header,
    render_section_header,
    render_text_block,
)
from cverse.pdf.surface import CVPDFSurface

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")


def build_file_name(name: str, timestamp_ms: int | None = None) -> str:
    """Build the output file name for a CV.

    Examples:
        >>> build_file_name("Ada Lovelace", 1700000000000)
        'CV_Ada_Lovelace_1700000000000.pdf'
        >>> build_file_name("", 1700000000000)
        'CV_document_1700000000000.pdf'
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    name = name.strip()
    name_part = WHITESPACE_PATTERN.sub("_", name) if name else "document"
    return f"CV_{name_part}_{timestamp_ms}.pdf"


def compose_layout(
    cv: CVData,
    locale: Locale | str,
    measurer: TextMeasurer,
    layout: PageLayout = DEFAULT_LAYOUT,
) -> DocumentLayout:
    """Lay out ``cv`` and return the draw commands, without drawing anything."""
    locale = get_locale(locale)
    titles = SECTION_TITLES[locale]
    theme = Theme(divider=resolve_color(cv.divider_color), link=resolve_color(cv.link_color))
    flow = TextFlow(measurer, layout)

    render_personal_header(flow, cv.personal, theme, CONTACT_LABELS[locale])

    if cv.experience:
        render_section_header(flow, titles.experience, theme)
        for experience in cv.experience:
            render_entry(
                flow,
                experience.title,
                experience.start_date,
                experience.end_date,
                experience.location,
                experience.description,
                theme,
            )
        flow.skip(layout.section_spacing - layout.entry_spacing)

    if cv.education:
        render_section_header(flow, titles.education, theme)
        for education in cv.education:
            render_entry(
                flow,
                education.degree,
                education.start_date,
                education.end_date,
                education.location,
                education.description,
                theme,
            )
        flow.skip(layout.section_spacing - layout.entry_spacing)

    for title, text in (
        (titles.qualities, cv.qualities),
        (titles.skills, cv.skills),
        (titles.interests, cv.interests),
    ):
        if text.strip():
            render_section_header(flow, title, theme)
            render_text_block(flow, text, theme)

    name = cv.personal.name.strip()
    document = DocumentLayout(title=f"{name} | CV" if name else "CV", commands=flow.commands)
    logger.debug(f"Laid out {len(document.commands)} commands on {document.page_count} page(s)")
    return document


def _draw(
    cv: CVData, locale: Locale | str, surface: CVPDFSurface | None, settings: Settings
) -> CVPDFSurface:
    if surface is None:
        surface = CVPDFSurface(font_dir=settings.font_dir)
    document = compose_layout(cv, locale, surface, settings.page_layout)
    surface.set_document_info(document.title, cv.personal.name.strip())
    surface.replay(document.commands)
    return surface


def build_pdf_bytes(
    cv: CVData,
    locale: Locale | str = Locale.EN,
    surface: CVPDFSurface | None = None,
    settings: Settings | None = None,
) -> bytes:
    """Render ``cv`` and return the PDF content as bytes."""
    settings = settings or get_settings()
    return _draw(cv, locale, surface, settings).output_bytes()


def render_cv(
    cv: CVData,
    locale: Locale | str = Locale.EN,
    surface: CVPDFSurface | None = None,
    output_dir: Path | None = None,
    settings: Settings | None = None,
) -> Path:
    """Render ``cv`` and save it as ``CV_<Name>_<timestamp>.pdf``.

    Args:
        cv: The CV record to render; it is not modified.
        locale: Locale for section titles and contact labels.
        surface: Drawing surface to use. A fresh one is created when omitted;
            a surface must not be shared between renders.
        output_dir: Directory for the file (default: ``settings.output_dir``).
        settings: Settings to use (default: cached environment settings).

    Returns:
        Path to the saved PDF.
    """
    settings = settings or get_settings()
    who = cv.personal.name.strip() or "unnamed person"
    logger.info(f"Rendering CV for {who} ({get_locale(locale).value})")

    surface = _draw(cv, locale, surface, settings)
    target_dir = output_dir if output_dir is not None else settings.output_dir
    path = surface.save(target_dir / build_file_name(cv.personal.name))

    logger.info(f"Saved CV to {path}")
    return path
