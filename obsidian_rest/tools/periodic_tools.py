"""Calendar and periodic note tools."""
from __future__ import annotations

from datetime import datetime

from obsidian_rest.core.client import ObsidianClient
from obsidian_rest.models import (
    CalendarInput,
    FileContents,
    PeriodicNoteByDateInput,
    PeriodicNoteInput,
    RecentPeriodicNotesInput,
)
from obsidian_rest.tools.base import tool


@tool("calendar", CalendarInput)
async def calendar(
    client: ObsidianClient,
    input: CalendarInput,
) -> str:
    """Returns the current date and time in the format YYYY-MM-DD HH:MM:SS.

    Use this to find out the current date and time.
    """
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


@tool("obsidian_get_periodic_note", PeriodicNoteInput)
async def get_periodic_note(
    client: ObsidianClient,
    input: PeriodicNoteInput,
) -> FileContents:
    """Get current periodic note for the specified period.

    Use this to e.g. find out the tasks or calendar for today.
    """
    return await client.get_periodic_note(input.period)


@tool("obsidian_get_periodic_date", PeriodicNoteByDateInput)
async def get_periodic_note_by_date(
    client: ObsidianClient,
    input: PeriodicNoteByDateInput,
) -> FileContents:
    """Get the periodic note for the specified period on the given date."""
    return await client.get_periodic_note_by_date(input.period, input.date)


@tool("obsidian_get_recent_periodic_note", RecentPeriodicNotesInput)
async def get_recent_periodic_notes(
    client: ObsidianClient,
    input: RecentPeriodicNotesInput,
) -> list[FileContents]:
    """Get the most recent periodic notes for the specified period."""
    return await client.get_periodic_note_recent(
        input.period,
        input.limit,
        input.include_content,
    )
