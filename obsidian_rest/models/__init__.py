"""Pydantic models for tool inputs and Local REST API responses.

Input models are the parameter schemas advertised to MCP clients: each tool's
``inputSchema`` is its model's JSON schema, and validating the caller's
arguments against the model is the first step of every invocation.

Response models decode the JSON bodies returned by the Local REST API.

Architecture:
- base: shared validators and parameterless/period base models
- file_models: vault listing and file retrieval inputs
- search_models: simple, JsonLogic, and Dataview search inputs
- periodic_models: periodic note and calendar inputs
- response_models: FileContents, SearchResult, ComplexResult and friends
"""

from .base import BasePeriodInput, IgnoredInput, format_validation_error
from .file_models import (
    ListFilesInVaultInput,
    ListFilesInDirInput,
    GetFileContentsInput,
    GetFileByNameInput,
)
from .search_models import (
    SimpleSearchInput,
    JsonLogicSearchInput,
    DataviewSearchInput,
)
from .periodic_models import (
    CalendarInput,
    PeriodicNoteInput,
    PeriodicNoteByDateInput,
    RecentPeriodicNotesInput,
)
from .response_models import (
    ApiErrorBody,
    ComplexResult,
    FileContents,
    FileListing,
    FileStat,
    MatchSpan,
    SearchMatch,
    SearchResult,
)

__all__ = [
    # Base models
    "BasePeriodInput",
    "IgnoredInput",
    "format_validation_error",
    # File models
    "ListFilesInVaultInput",
    "ListFilesInDirInput",
    "GetFileContentsInput",
    "GetFileByNameInput",
    # Search models
    "SimpleSearchInput",
    "JsonLogicSearchInput",
    "DataviewSearchInput",
    # Periodic models
    "CalendarInput",
    "PeriodicNoteInput",
    "PeriodicNoteByDateInput",
    "RecentPeriodicNotesInput",
    # Response models
    "ApiErrorBody",
    "ComplexResult",
    "FileContents",
    "FileListing",
    "FileStat",
    "MatchSpan",
    "SearchMatch",
    "SearchResult",
]
