"""Configuration management for cVerse."""

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from cverse.pdf.layout import PageLayout


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CVERSE_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rendering
    locale: Literal["en", "fr"] = "en"
    output_dir: Path = Path(".")
    font_dir: Path | None = Field(
        default=None,
        description="Directory holding a Unicode TTF family (Regular/Bold/Italic/BoldItalic)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Pagination thresholds (mm from the top of an A4 page)
    section_bottom_margin: float = Field(
        default=240.0,
        ge=100.0,
        le=290.0,
        description="Start a new page before a section heading below this line",
    )
    entry_bottom_margin: float = Field(
        default=260.0,
        ge=100.0,
        le=290.0,
        description="Start a new page before an experience/education entry below this line",
    )
    page_bottom_margin: float = Field(
        default=280.0,
        ge=100.0,
        le=290.0,
        description="Hard bottom margin checked before every wrapped line",
    )

    @model_validator(mode="after")
    def check_margin_order(self) -> "Settings":
        if self.page_bottom_margin < max(self.section_bottom_margin, self.entry_bottom_margin):
            raise ValueError("page_bottom_margin must not be above the section/entry thresholds")
        return self

    @property
    def page_layout(self) -> "PageLayout":
        """Get the page layout with the configured thresholds."""
        from cverse.pdf.layout import PageLayout

        return PageLayout(
            section_bottom=self.section_bottom_margin,
            entry_bottom=self.entry_bottom_margin,
            page_bottom=self.page_bottom_margin,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
