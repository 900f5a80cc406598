"""Pydantic models for Local REST API response bodies.

Every client operation decodes its JSON body into one of these shapes. The
models are built fresh for each request and never mutated afterwards, except
for :class:`FileContents` content being cleared when a caller asked for
metadata only.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_serializer


class FileStat(BaseModel):
    """Filesystem timestamps (milliseconds since epoch) and size in bytes."""

    ctime: int = 0
    mtime: int = 0
    size: int = 0


class FileContents(BaseModel):
    """A note as returned by ``application/vnd.olrapi.note+json``.

    ``frontmatter`` and ``tags`` decode to empty values when the server sends
    them as ``null`` or leaves them out. ``path`` is only serialized when set.
    """

    content: str = ""
    frontmatter: dict[str, Any] = Field(default_factory=dict)
    path: Optional[str] = None
    stat: FileStat = Field(default_factory=FileStat)
    tags: list[str] = Field(default_factory=list)

    @field_validator("frontmatter", mode="before")
    @classmethod
    def null_frontmatter_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_are_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @model_serializer(mode="wrap")
    def _omit_unset_path(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if data.get("path") is None:
            data.pop("path", None)
        return data

    def summary(self) -> str:
        """Render the note for logging with the body replaced by its byte count."""
        redacted = self.model_copy(
            update={"content": f"({len(self.content.encode('utf-8'))} bytes)"}
        )
        return redacted.model_dump_json()


class FileListing(BaseModel):
    """Body of ``GET /vault/`` and ``GET /vault/<dir>/``."""

    files: list[str] = Field(default_factory=list)


class MatchSpan(BaseModel):
    """Character offsets of a match within the file."""

    start: int
    end: int


class SearchMatch(BaseModel):
    """One highlighted occurrence inside a simple-search hit."""

    span: MatchSpan = Field(alias="match")
    context: str = ""

    class Config:
        """Pydantic model configuration."""
        populate_by_name = True


class SearchResult(BaseModel):
    """A file matched by simple search, in server relevance order."""

    filename: str
    score: float = 0.0
    matches: list[SearchMatch] = Field(default_factory=list)


class ComplexResult(BaseModel):
    """A file matched by a JsonLogic or Dataview query.

    ``result`` is whatever the query engine produced for the file and is passed
    through untouched, ``null`` included.
    """

    filename: str
    result: Any = None


class ApiErrorBody(BaseModel):
    """Error payload the Local REST API sends with 4xx/5xx responses."""

    errorCode: Optional[int] = None
    message: Optional[str] = None
