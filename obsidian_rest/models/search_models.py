"""Pydantic input models for search operations.

This module defines input models for search tools:
- Simple text search with context snippets
- JsonLogic structured search
- Dataview DQL structured search
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from obsidian_rest.constants import DEFAULT_CONTEXT_LENGTH
from obsidian_rest.models.base import require_text


class SimpleSearchInput(BaseModel):
    """Input model for obsidian_simple_search tool.

    Examples:
        >>> SimpleSearchInput(query="machine learning")
        >>> SimpleSearchInput(query="standup", content_length=250)
    """

    query: str = Field(
        description="The text to search for in your vault.",
        examples=["machine learning", "standup"],
    )

    content_length: int = Field(
        DEFAULT_CONTEXT_LENGTH,
        description=(
            "How much context to return around the matching string "
            f"(default: {DEFAULT_CONTEXT_LENGTH})"
        ),
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate search query is not empty."""
        return require_text(v, "query")

    @field_validator('content_length')
    @classmethod
    def validate_content_length(cls, v: int) -> int:
        """Validate context length is positive."""
        if v <= 0:
            raise ValueError("content_length must be greater than 0")
        return v


class JsonLogicSearchInput(BaseModel):
    """Input model for obsidian_jsonlogic_search tool.

    The query is sent to the server verbatim; syntax errors surface as a
    server error.

    Examples:
        >>> JsonLogicSearchInput(query='{"glob": ["*.md", {"var": "path"}]}')
    """

    query: str = Field(
        description=(
            "JsonLogic query object. Example: "
            '{"glob": ["*.md", {"var": "path"}]} matches all markdown files'
        ),
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate query is not empty."""
        return require_text(v, "query")


class DataviewSearchInput(BaseModel):
    """Input model for obsidian_dataview_search tool.

    Examples:
        >>> DataviewSearchInput(query="TABLE file.mtime FROM #project")
    """

    query: str = Field(
        description="Dataview query string. Example: 'table name, path from #tag'",
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate query is not empty."""
        return require_text(v, "query")
