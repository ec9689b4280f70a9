"""Pytest configuration and fixtures."""

import base64
import io

import pytest
from PIL import Image

from cverse.models.cv import CVData, EducationBlock, ExperienceBlock, PersonalInfo
from cverse.pdf.commands import FontStyle

# 1x1 transparent PNG
TINY_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJ"
    "AAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


class FixedWidthMeasurer:
    """Deterministic text metrics: every character is ``size * 0.2`` mm wide.

    At body size (10pt) a character is 2mm, so the 170mm column holds 85.
    """

    def measure_width(self, text: str, size: float, style: FontStyle = "") -> float:
        return len(text) * size * 0.2

    def wrap_text(
        self, text: str, max_width: float, size: float, style: FontStyle = ""
    ) -> list[str]:
        if max_width <= 0:
            raise ValueError(f"Cannot wrap text to a non-positive width: {max_width}")
        if not text:
            return []
        max_chars = max(1, int(max_width // (size * 0.2)))
        lines: list[str] = []
        current = ""
        for word in text.split(" "):
            candidate = f"{current} {word}" if current else word
            if len(candidate) <= max_chars:
                current = candidate
                continue
            if current:
                lines.append(current)
            while len(word) > max_chars:
                lines.append(word[:max_chars])
                word = word[max_chars:]
            current = word
        lines.append(current)
        return lines


@pytest.fixture
def measurer() -> FixedWidthMeasurer:
    return FixedWidthMeasurer()


@pytest.fixture
def photo_data_url() -> str:
    return f"data:image/png;base64,{TINY_PNG_BASE64}"


def _encode_image(image: Image.Image, image_format: str) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def jpeg_data_url() -> str:
    """A small, valid JPEG photo."""
    data = _encode_image(Image.new("RGB", (8, 8), "red"), "JPEG")
    return f"data:image/jpeg;base64,{base64.b64encode(data).decode()}"


@pytest.fixture
def truncated_png_data_url() -> str:
    """A PNG whose header is intact but whose pixel data is cut in half."""
    data = _encode_image(Image.effect_noise((64, 64), 64), "PNG")
    return f"data:image/png;base64,{base64.b64encode(data[: len(data) // 2]).decode()}"


@pytest.fixture
def ada_cv() -> CVData:
    """Minimal CV with one experience entry and no other sections."""
    return CVData(
        personal=PersonalInfo(name="Ada Lovelace", email="ada@example.com"),
        experience=[
            ExperienceBlock(
                id="1",
                title="Engineer",
                start_date="2020",
                end_date="2023",
                description="- Built X\n- Shipped Y",
            )
        ],
        education=[],
        qualities="",
        skills="",
        interests="",
    )


@pytest.fixture
def full_cv(photo_data_url: str) -> CVData:
    """CV with every section and contact field filled in."""
    return CVData(
        personal=PersonalInfo(
            name="Grace Hopper",
            email="grace@example.com",
            headline="Rear Admiral & Compiler Pioneer",
            photo=photo_data_url,
            location="Arlington, VA",
            phone="+1 555 0100",
            website="gracehopper.dev",
            linkedin="https://linkedin.com/in/gracehopper",
            age="85",
            nationality="American",
        ),
        experience=[
            ExperienceBlock(
                id="exp-1",
                title="Senior Programmer",
                start_date="1949",
                end_date="1967",
                location="Philadelphia",
                description=(
                    "Worked on the **UNIVAC I**.\n"
                    "- Wrote the first [compiler](https://en.wikipedia.org/wiki/A-0_System)\n"
                    "  - Led the *FLOW-MATIC* team\n"
                    "\n"
                    "Later contributed to COBOL."
                ),
            ),
        ],
        education=[
            EducationBlock(
                id="edu-1",
                degree="PhD in Mathematics",
                start_date="1930",
                end_date="1934",
                location="Yale University",
                description="Thesis: _New Types of Irreducibility Criteria_",
            )
        ],
        qualities="Persistent, curious",
        skills="- Assembly\n- COBOL",
        interests="Teaching, [Nanoseconds](https://example.com/nanosecond)",
        divider_color="#1E3A5F",
        link_color="#0066CC",
    )
