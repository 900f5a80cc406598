"""Tests for Pydantic input models.

This test suite validates the input validation logic for MCP tools,
ensuring that:
- Valid inputs are accepted and normalized correctly
- Invalid inputs raise ValidationError with descriptive messages
- Schema generation produces the JSON schemas advertised to MCP clients
"""

import pytest
from pydantic import ValidationError

from obsidian_rest.models import (
    CalendarInput,
    GetFileByNameInput,
    GetFileContentsInput,
    ListFilesInDirInput,
    PeriodicNoteByDateInput,
    PeriodicNoteInput,
    RecentPeriodicNotesInput,
    SimpleSearchInput,
    format_validation_error,
)


class TestListFilesInDirInput:

    def test_valid_dirpath(self):
        model = ListFilesInDirInput(dirpath="Daily Notes")
        assert model.dirpath == "Daily Notes"

    def test_whitespace_is_stripped(self):
        model = ListFilesInDirInput(dirpath="  Projects/2025  ")
        assert model.dirpath == "Projects/2025"

    def test_leading_slash_is_left_for_the_client(self):
        """Path normalization is the client's job, the model only checks presence."""
        model = ListFilesInDirInput(dirpath="/Projects")
        assert model.dirpath == "/Projects"

    def test_missing_dirpath_raises_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ListFilesInDirInput()

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("dirpath",)
        assert errors[0]["type"] == "missing"

    def test_empty_dirpath_raises_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ListFilesInDirInput(dirpath="   ")

        assert "dirpath is required" in str(exc_info.value)


class TestGetFileContentsInput:

    def test_valid_filepath(self):
        assert GetFileContentsInput(filepath="a/b.md").filepath == "a/b.md"

    def test_empty_filepath_raises_error(self):
        with pytest.raises(ValidationError):
            GetFileContentsInput(filepath="")


class TestGetFileByNameInput:
    """Filename normalization for wiki-link resolution."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("note", "note"),
            ("note.md", "note"),
            ("Folder/Sub/note.md", "note"),
            ("Folder\\note.md", "note"),
            ("[[Meeting Notes]]", "Meeting Notes"),
            ("[[Projects/Roadmap|the roadmap]]", "Roadmap"),
            ("[[Roadmap#Milestones]]", "Roadmap"),
            ("v1.4 Release Changelog", "v1.4 Release Changelog"),
            ("v1.4 Release Changelog.md", "v1.4 Release Changelog"),
            ("  spaced.md  ", "spaced"),
        ],
    )
    def test_filename_is_reduced_to_note_name(self, raw, expected):
        assert GetFileByNameInput(filename=raw).filename == expected

    def test_include_content_defaults_to_false(self):
        assert GetFileByNameInput(filename="note").include_content is False

    def test_include_content_accepts_true(self):
        assert GetFileByNameInput(filename="note", include_content=True).include_content is True

    @pytest.mark.parametrize("raw", ["", "   ", "[[]]", "[[|alias]]"])
    def test_empty_names_raise_error(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            GetFileByNameInput(filename=raw)

        assert "filename is required" in str(exc_info.value)


class TestSimpleSearchInput:

    def test_defaults(self):
        model = SimpleSearchInput(query="hello")
        assert model.query == "hello"
        assert model.content_length == 100

    def test_numeric_content_length_from_json_float(self):
        assert SimpleSearchInput(query="hello", content_length=250.0).content_length == 250

    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_content_length_raises_error(self, value):
        with pytest.raises(ValidationError) as exc_info:
            SimpleSearchInput(query="hello", content_length=value)

        assert "content_length must be greater than 0" in str(exc_info.value)

    def test_non_numeric_content_length_raises_error(self):
        with pytest.raises(ValidationError):
            SimpleSearchInput(query="hello", content_length="lots")


class TestPeriodInputs:

    @pytest.mark.parametrize("period", ["daily", "weekly", "monthly", "quarterly", "yearly"])
    def test_supported_periods(self, period):
        assert PeriodicNoteInput(period=period).period == period

    def test_period_is_normalized(self):
        assert PeriodicNoteInput(period=" Weekly ").period == "weekly"

    @pytest.mark.parametrize("period", ["hourly", "day", ""])
    def test_unsupported_period_raises_error(self, period):
        with pytest.raises(ValidationError):
            PeriodicNoteInput(period=period)

    def test_period_enum_is_advertised(self):
        schema = PeriodicNoteInput.model_json_schema()
        assert schema["properties"]["period"]["enum"] == [
            "daily", "weekly", "monthly", "quarterly", "yearly"
        ]

    def test_valid_date(self):
        model = PeriodicNoteByDateInput(period="daily", date="2024-03-07")
        assert model.date == "2024-03-07"

    @pytest.mark.parametrize("value", ["2024-3-7", "07-03-2024", "2024-02-30", "yesterday"])
    def test_invalid_date_raises_error(self, value):
        with pytest.raises(ValidationError):
            PeriodicNoteByDateInput(period="daily", date=value)

    def test_recent_defaults(self):
        model = RecentPeriodicNotesInput(period="monthly")
        assert model.limit == 5
        assert model.include_content is False

    def test_recent_limit_must_be_positive(self):
        with pytest.raises(ValidationError) as exc_info:
            RecentPeriodicNotesInput(period="monthly", limit=0)

        assert "limit must be greater than 0" in str(exc_info.value)


class TestFormatValidationError:

    def test_one_line_per_field_without_pydantic_prefix(self):
        with pytest.raises(ValidationError) as exc_info:
            RecentPeriodicNotesInput(period="hourly", limit=-1)

        message = format_validation_error(exc_info.value)

        assert message == (
            "period: invalid period: hourly, must be one of daily, weekly, monthly, quarterly, yearly; "
            "limit: limit must be greater than 0"
        )

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            SimpleSearchInput()

        assert format_validation_error(exc_info.value) == "query: Field required"

    def test_calendar_accepts_no_arguments(self):
        assert CalendarInput().ignore is None
