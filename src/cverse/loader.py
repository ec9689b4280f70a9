"""Loading CV records exported by the editor."""

import json
from pathlib import Path

from pydantic import ValidationError

from cverse.models.cv import CVData


class CVDataError(ValueError):
    """Raised when a CV file cannot be read as a CV record."""


def parse_cv_data(raw: str) -> CVData:
    """Parse the editor's JSON export into a ``CVData``.

    Raises:
        CVDataError: If the text is not JSON or does not describe a CV.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CVDataError(f"Invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise CVDataError("Expected a JSON object at the top level")

    try:
        return CVData.model_validate(payload)
    except ValidationError as e:
        raise CVDataError(f"Invalid CV data: {e}") from e


def load_cv_data(path: str | Path) -> CVData:
    """Read and parse a CV JSON file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CVDataError(f"Cannot read {path}: {e}") from e
    return parse_cv_data(raw)
