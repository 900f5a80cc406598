"""Pydantic input models for periodic note and calendar operations."""

from __future__ import annotations

import re
import datetime

from pydantic import Field, field_validator

from obsidian_rest.constants import DEFAULT_RECENT_LIMIT
from obsidian_rest.models.base import BasePeriodInput, IgnoredInput, require_text

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class CalendarInput(IgnoredInput):
    """Input model for calendar tool.

    Examples:
        >>> CalendarInput()
    """


class PeriodicNoteInput(BasePeriodInput):
    """Input model for obsidian_get_periodic_note tool.

    Examples:
        >>> PeriodicNoteInput(period="daily")
    """


class PeriodicNoteByDateInput(BasePeriodInput):
    """Input model for obsidian_get_periodic_date tool.

    Examples:
        >>> PeriodicNoteByDateInput(period="daily", date="2024-03-07")
    """

    date: str = Field(
        description="The date for which to get the periodic note (format: YYYY-MM-DD)",
        examples=["2024-03-07"],
    )

    @field_validator('date')
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Validate the date is a real calendar date in YYYY-MM-DD form.

        Raises:
            ValueError: If the date is empty, malformed, or does not exist
        """
        cleaned = require_text(v, "date")
        if not _ISO_DATE.match(cleaned):
            raise ValueError(f"date must use the format YYYY-MM-DD, got '{cleaned}'")
        try:
            datetime.date.fromisoformat(cleaned)
        except ValueError as exc:
            raise ValueError(f"date '{cleaned}' is not a valid calendar date") from exc
        return cleaned


class RecentPeriodicNotesInput(BasePeriodInput):
    """Input model for obsidian_get_recent_periodic_note tool.

    Examples:
        >>> RecentPeriodicNotesInput(period="weekly", limit=3, include_content=True)
    """

    limit: int = Field(
        DEFAULT_RECENT_LIMIT,
        description=f"Maximum number of results to return (default: {DEFAULT_RECENT_LIMIT})",
    )

    include_content: bool = Field(
        False,
        description="Whether to include the content of the periodic note (default: false)",
    )

    @field_validator('limit')
    @classmethod
    def validate_limit(cls, v: int) -> int:
        """Validate limit is positive."""
        if v <= 0:
            raise ValueError("limit must be greater than 0")
        return v
