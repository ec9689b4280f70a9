"""Section renderers.

Each function lays out one semantic block of the CV on the ``TextFlow`` it is
given and leaves the cursor just below that block.
"""

import logging
from dataclasses import dataclass

from cverse.models.cv import PersonalInfo
from cverse.pdf.colors import BORDER_GRAY, RGB
from cverse.pdf.flow import TextFlow
from cverse.pdf.locale import ContactLabels
from cverse.pdf.markdown import LinkSegment, ParsedLine, TextSegment
from cverse.pdf.photo import PhotoError, decode_photo

logger = logging.getLogger(__name__)

CONTACT_SEPARATOR = " | "


@dataclass(frozen=True)
class Theme:
    """Resolved theme colours."""

    divider: RGB
    link: RGB


def _clean(value: str) -> str:
    return value.strip()


def _as_url(value: str) -> str:
    """Add a scheme to bare web addresses so PDF viewers open them."""
    if "://" in value or value.startswith("mailto:"):
        return value
    return f"https://{value}"


def render_photo(flow: TextFlow, photo: str) -> bool:
    """Place the photo as a bordered square in the top-right corner.

    Undecodable photos are logged and skipped. Returns True when an image
    command was emitted.
    """
    layout = flow.layout
    try:
        decode_photo(photo)
    except PhotoError as e:
        logger.warning(f"Skipping photo: {e}")
        return False

    flow.image(
        photo,
        x=layout.photo_left,
        y=layout.photo_top,
        size=layout.photo_size,
        border_color=BORDER_GRAY,
        border_width=layout.photo_border_width,
    )
    return True


def _labelled_link(flow: TextFlow, label: str, value: str, right: float, theme: Theme) -> None:
    line = ParsedLine(
        segments=(TextSegment(f"{label}: "), LinkSegment(text=value, url=_as_url(value)))
    )
    flow.write_segments(line, flow.layout.left_margin, right, flow.layout.body_size, theme.link)


def render_personal_header(
    flow: TextFlow, personal: PersonalInfo, theme: Theme, labels: ContactLabels
) -> None:
    """Name, headline, divider, contact lines and web links.

    With a photo, the divider and the wrapped contact lines stop short of the
    photo column. Name and headline positions do not depend on the photo.
    """
    layout = flow.layout
    x = layout.left_margin
    has_photo = bool(_clean(personal.photo)) and render_photo(flow, personal.photo)
    right = layout.column_right(has_photo)

    name = _clean(personal.name)
    if name:
        flow.text(name, x, layout.name_size, "B")
    flow.skip(10)

    headline = _clean(personal.headline)
    if headline:
        flow.text(headline, x, layout.headline_size, "I")
        flow.skip(8)

    divider_y = flow.y - 4
    flow.line(x, right, divider_y, theme.divider, layout.divider_width)
    flow.skip(2)

    phone = _clean(personal.phone)
    contact = [
        _clean(personal.email),
        f"{labels.phone}: {phone}" if phone else "",
        _clean(personal.location),
    ]
    contact_line = CONTACT_SEPARATOR.join(part for part in contact if part)
    if contact_line:
        flow.write_wrapped(contact_line, x, right - x, layout.body_size)

    age = _clean(personal.age)
    nationality = _clean(personal.nationality)
    details = [
        f"{labels.age}: {age}" if age else "",
        f"{labels.nationality}: {nationality}" if nationality else "",
    ]
    details_line = CONTACT_SEPARATOR.join(part for part in details if part)
    if details_line:
        flow.write_wrapped(details_line, x, right - x, layout.body_size)

    website = _clean(personal.website)
    if website:
        _labelled_link(flow, labels.website, website, right, theme)
    linkedin = _clean(personal.linkedin)
    if linkedin:
        _labelled_link(flow, labels.linkedin, linkedin, right, theme)

    if has_photo:
        # Sections span the full width, so they start below the photo
        flow.y = max(flow.y, layout.photo_bottom + layout.photo_gap)
    flow.skip(layout.section_spacing)


def render_section_header(flow: TextFlow, title: str, theme: Theme) -> None:
    """Uppercased section title with a divider line under it."""
    layout = flow.layout
    flow.ensure_room(bottom=layout.section_bottom)
    flow.text(title.upper(), layout.left_margin, layout.section_header_size, "B")
    flow.line(
        layout.left_margin,
        layout.right_margin,
        flow.y + 2,
        theme.divider,
        layout.divider_width,
    )
    flow.skip(layout.heading_gap)


def render_entry(
    flow: TextFlow,
    heading: str,
    start_date: str,
    end_date: str,
    location: str,
    description: str,
    theme: Theme,
) -> None:
    """One experience or education entry.

    Layout: bold heading, italic "start - end" with " | location" on the same
    line, then the markdown description and a fixed trailing gap.
    """
    layout = flow.layout
    x = layout.left_margin
    size = layout.body_size

    flow.ensure_room(bottom=layout.entry_bottom)
    flow.text(_clean(heading), x, size, "B")
    flow.advance()

    period = " - ".join(part for part in (_clean(start_date), _clean(end_date)) if part)
    location = _clean(location)
    if period or location:
        if period:
            flow.text(period, x, size, "I")
        if location and period:
            offset = flow.measurer.measure_width(period, size, "I") + 2
            flow.text(f"{CONTACT_SEPARATOR}{location}", x + offset, size, "I")
        elif location:
            flow.text(location, x, size, "I")
        flow.advance()

    if description.strip():
        flow.write_markdown(description, x, layout.right_margin, size, theme.link)

    flow.skip(layout.entry_spacing)


def render_text_block(flow: TextFlow, text: str, theme: Theme) -> None:
    """Free-text section body (qualities, skills, interests)."""
    layout = flow.layout
    flow.write_markdown(
        text, layout.left_margin, layout.right_margin, layout.body_size, theme.link
    )
    flow.skip(layout.section_spacing)
