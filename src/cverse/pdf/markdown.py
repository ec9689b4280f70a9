"""Markdown-lite tokenizer for CV free-text fields.

Supported markup:
- ``-`` / ``*`` bullets (rewritten to ``•``)
- ``**bold**``, ``__bold__``, ``*italic*``, ``_italic_`` (markers stripped;
  emphasis is not rendered)
- inline links ``[text](url)``
- indentation, two leading whitespace characters per level

Anything else (headers, tables, code blocks...) is kept as plain text.
"""

import re
from dataclasses import dataclass

BULLET = "•"

# Safety bound on link matches scanned per line
MAX_LINKS_PER_LINE = 100

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")
BULLET_PATTERN = re.compile(r"^[*-]\s+")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
LINK_TARGET_PATTERN = re.compile(r"\]\(([^)]+)\)")
_TARGET_PLACEHOLDER_PATTERN = re.compile(r"\x00(\d+)\x00")

# Bold before italic so that "**x**" is not read as two italic markers
EMPHASIS_PATTERNS = (
    re.compile(r"\*\*([^*]+?)\*\*"),
    re.compile(r"__([^_]+?)__"),
    re.compile(r"\*([^*]+?)\*"),
    re.compile(r"_([^_]+?)_"),
)


@dataclass(frozen=True)
class TextSegment:
    """A run of plain text."""

    content: str

    @property
    def visible_text(self) -> str:
        return self.content


@dataclass(frozen=True)
class LinkSegment:
    """A hyperlink: display text plus target URL."""

    text: str
    url: str

    @property
    def visible_text(self) -> str:
        return self.text


Segment = TextSegment | LinkSegment


@dataclass(frozen=True)
class ParsedLine:
    """One logical line of markdown-lite text."""

    indent: int = 0
    segments: tuple[Segment, ...] = ()

    @property
    def is_blank(self) -> bool:
        return not self.segments

    @property
    def has_links(self) -> bool:
        return any(isinstance(segment, LinkSegment) for segment in self.segments)

    @property
    def visible_text(self) -> str:
        return "".join(segment.visible_text for segment in self.segments)


def strip_emphasis(text: str) -> str:
    """Remove bold/italic markers, keeping the inner text."""
    for pattern in EMPHASIS_PATTERNS:
        text = pattern.sub(r"\1", text)
    return text


def _strip_emphasis_keeping_link_targets(text: str) -> str:
    """Strip emphasis everywhere except inside ``(url)`` link targets.

    Targets are swapped for NUL-delimited placeholders while the emphasis
    patterns run, so "my_long_path" in a URL survives.
    """
    targets: list[str] = []

    def mask(match: re.Match[str]) -> str:
        targets.append(match.group(0))
        return f"\x00{len(targets) - 1}\x00"

    def unmask(match: re.Match[str]) -> str:
        index = int(match.group(1))
        return targets[index] if index < len(targets) else match.group(0)

    masked = strip_emphasis(LINK_TARGET_PATTERN.sub(mask, text))
    return _TARGET_PLACEHOLDER_PATTERN.sub(unmask, masked)


def split_links(text: str) -> tuple[Segment, ...]:
    """Split a line into text and link segments, left to right.

    At most ``MAX_LINKS_PER_LINE`` links are extracted; whatever follows the
    last extracted link is kept as plain text.
    """
    segments: list[Segment] = []
    position = 0

    for count, match in enumerate(LINK_PATTERN.finditer(text)):
        if count >= MAX_LINKS_PER_LINE:
            break
        if match.start() > position:
            segments.append(TextSegment(text[position : match.start()]))
        segments.append(LinkSegment(text=match.group(1), url=match.group(2)))
        position = match.end()

    if not segments:
        return (TextSegment(text),)
    if position < len(text):
        segments.append(TextSegment(text[position:]))
    return tuple(segments)


def parse_line(raw_line: str) -> ParsedLine:
    """Parse a single physical line."""
    if not raw_line.strip():
        return ParsedLine()

    stripped = raw_line.lstrip()
    indent = (len(raw_line) - len(stripped)) // 2
    text = stripped.rstrip()

    text = BULLET_PATTERN.sub(f"{BULLET} ", text, count=1)
    text = _strip_emphasis_keeping_link_targets(text)
    return ParsedLine(indent=indent, segments=split_links(text))


def parse_markdown(text: str | None) -> list[ParsedLine]:
    """Parse multi-line markdown-lite text into logical lines.

    Returns one ``ParsedLine`` per physical input line, in order. Blank input
    yields an empty list.
    """
    if not text:
        return []
    return [parse_line(line) for line in LINE_BREAK_PATTERN.split(text)]
