"""Tests for loading CV JSON exports."""

import json
from pathlib import Path

import pytest

from cverse.loader import CVDataError, load_cv_data, parse_cv_data


class TestParseCVData:
    """Tests for parse_cv_data."""

    def test_valid_export(self) -> None:
        """Test parsing a valid editor export."""
        raw = json.dumps(
            {
                "personal": {"name": "Ada Lovelace"},
                "experience": [{"title": "Engineer", "startDate": "2020", "endDate": "2023"}],
            }
        )
        cv = parse_cv_data(raw)
        assert cv.personal.name == "Ada Lovelace"
        assert cv.experience[0].end_date == "2023"

    def test_invalid_json(self) -> None:
        """Test that malformed JSON raises CVDataError."""
        with pytest.raises(CVDataError, match="Invalid JSON"):
            parse_cv_data("{not json")

    def test_top_level_must_be_object(self) -> None:
        """Test that a top-level array is rejected."""
        with pytest.raises(CVDataError, match="JSON object"):
            parse_cv_data("[1, 2, 3]")

    def test_wrong_shape(self) -> None:
        """Test that schema violations raise CVDataError."""
        with pytest.raises(CVDataError, match="Invalid CV data"):
            parse_cv_data(json.dumps({"experience": "not a list"}))

    def test_error_is_value_error(self) -> None:
        """Test that CVDataError can be handled as a ValueError."""
        with pytest.raises(ValueError):
            parse_cv_data("")


class TestLoadCVData:
    """Tests for load_cv_data."""

    def test_reads_utf8_file(self, tmp_path: Path) -> None:
        """Test reading a UTF-8 file."""
        path = tmp_path / "cv.json"
        path.write_text(json.dumps({"personal": {"name": "Zoë"}}), encoding="utf-8")
        assert load_cv_data(path).personal.name == "Zoë"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises CVDataError."""
        with pytest.raises(CVDataError, match="Cannot read"):
            load_cv_data(tmp_path / "missing.json")
