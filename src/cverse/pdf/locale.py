"""Locale tables for section headings and contact labels."""

from enum import Enum
from typing import NamedTuple


class Locale(str, Enum):
    """Supported document locales."""

    EN = "en"
    FR = "fr"


class SectionTitles(NamedTuple):
    experience: str
    education: str
    qualities: str
    skills: str
    interests: str


class ContactLabels(NamedTuple):
    phone: str
    age: str
    nationality: str
    website: str
    linkedin: str


SECTION_TITLES: dict[Locale, SectionTitles] = {
    Locale.EN: SectionTitles(
        experience="Professional Experience",
        education="Education",
        qualities="Qualities",
        skills="Skills",
        interests="Interests",
    ),
    Locale.FR: SectionTitles(
        experience="Expérience Professionnelle",
        education="Formation",
        qualities="Qualités",
        skills="Compétences",
        interests="Centres d'intérêt",
    ),
}

CONTACT_LABELS: dict[Locale, ContactLabels] = {
    Locale.EN: ContactLabels(
        phone="Phone",
        age="Age",
        nationality="Nationality",
        website="Web",
        linkedin="LinkedIn",
    ),
    Locale.FR: ContactLabels(
        phone="Tél",
        age="Âge",
        nationality="Nationalité",
        website="Web",
        linkedin="LinkedIn",
    ),
}


def get_locale(value: "Locale | str") -> Locale:
    """Convert a locale code (``"en"``, ``"FR"``...) to a ``Locale``."""
    if isinstance(value, Locale):
        return value
    return Locale(value.lower())
