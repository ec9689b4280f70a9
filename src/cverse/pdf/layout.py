"""Page geometry and typography shared by the layout engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageLayout:
    """Fixed A4 geometry, in millimetres (font sizes in points)."""

    # Page
    top_margin: float = 20.0
    left_margin: float = 20.0
    right_margin: float = 190.0  # x of the right edge, not a width

    # Bottom thresholds. Kept apart: merging them changes where pages break.
    section_bottom: float = 240.0  # checked before a section heading
    entry_bottom: float = 260.0  # checked before an experience/education entry
    page_bottom: float = 280.0  # checked before every wrapped line

    # Vertical rhythm
    line_height: float = 7.0
    section_spacing: float = 10.0
    entry_spacing: float = 5.0
    heading_gap: float = 8.0

    # Indentation
    indent_step: float = 5.0
    continuation_indent: float = 3.0
    min_column_width: float = 40.0  # indentation never leaves less than this

    # Typography
    name_size: int = 18
    headline_size: int = 12
    section_header_size: int = 14
    body_size: int = 10

    # Photo
    photo_size: float = 40.0
    photo_top: float = 15.0
    photo_gap: float = 5.0
    photo_border_width: float = 0.2
    divider_width: float = 0.5

    @property
    def photo_left(self) -> float:
        return self.right_margin - self.photo_size

    @property
    def photo_bottom(self) -> float:
        return self.photo_top + self.photo_size

    def column_right(self, has_photo: bool) -> float:
        """Right edge of the header column, pulled in when a photo sits top-right."""
        if has_photo:
            return self.photo_left - self.photo_gap
        return self.right_margin


DEFAULT_LAYOUT = PageLayout()
