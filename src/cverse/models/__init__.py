"""Data models for cVerse."""

from cverse.models.cv import CVData, EducationBlock, ExperienceBlock, PersonalInfo

__all__ = [
    "CVData",
    "EducationBlock",
    "ExperienceBlock",
    "PersonalInfo",
]
