"""CV data models.

Field names are snake_case; the camelCase keys written by the editor's JSON
export (``startDate``, ``dividerColor``...) are accepted as aliases.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_to_text(v: Any) -> str:
    """Coerce loosely typed form values to a string (``None`` becomes empty)."""
    if v is None:
        return ""
    if isinstance(v, str):
        return v
    return str(v)


def _coerce_to_block_list(v: Any) -> list[Any]:
    """Treat a missing block list as empty."""
    if v is None:
        return []
    return v


class _CVModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class PersonalInfo(_CVModel):
    """Personal details shown in the document header."""

    name: str = ""
    email: str = ""
    headline: str = ""
    photo: str = ""  # data URL, e.g. "data:image/jpeg;base64,..."
    location: str = ""
    phone: str = ""
    website: str = ""
    linkedin: str = ""
    age: str = ""
    nationality: str = ""

    @field_validator(
        "name",
        "email",
        "headline",
        "photo",
        "location",
        "phone",
        "website",
        "linkedin",
        "age",
        "nationality",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _coerce_to_text(v)


class ExperienceBlock(_CVModel):
    """Work experience entry."""

    id: str = ""
    title: str = ""
    start_date: str = Field(default="", alias="startDate")
    end_date: str = Field(default="", alias="endDate")
    location: str = ""
    description: str = ""

    @field_validator(
        "id", "title", "start_date", "end_date", "location", "description", mode="before"
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _coerce_to_text(v)


class EducationBlock(_CVModel):
    """Education entry."""

    id: str = ""
    degree: str = ""
    start_date: str = Field(default="", alias="startDate")
    end_date: str = Field(default="", alias="endDate")
    location: str = ""
    description: str = ""

    @field_validator(
        "id", "degree", "start_date", "end_date", "location", "description", mode="before"
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _coerce_to_text(v)


class CVData(_CVModel):
    """Complete CV record, as exported by the editor."""

    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[ExperienceBlock] = Field(default_factory=list)
    education: list[EducationBlock] = Field(default_factory=list)
    qualities: str = ""
    skills: str = ""
    interests: str = ""
    divider_color: str = Field(default="#000000", alias="dividerColor")
    link_color: str = Field(default="#0000FF", alias="linkColor")

    @field_validator("qualities", "skills", "interests", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _coerce_to_text(v)

    @field_validator("divider_color", mode="before")
    @classmethod
    def default_divider_color(cls, v: Any) -> str:
        return _coerce_to_text(v) or "#000000"

    @field_validator("link_color", mode="before")
    @classmethod
    def default_link_color(cls, v: Any) -> str:
        return _coerce_to_text(v) or "#0000FF"

    @field_validator("experience", "education", mode="before")
    @classmethod
    def coerce_block_lists(cls, v: Any) -> list[Any]:
        return _coerce_to_block_list(v)
