"""Search tools for Obsidian vault operations.

This module contains the search tools:
- obsidian_simple_search: Text search with context around each match
- obsidian_jsonlogic_search: JsonLogic query over note metadata
- obsidian_dataview_search: Dataview DQL query
"""
from __future__ import annotations

from obsidian_rest.core.client import ObsidianClient
from obsidian_rest.models import (
    ComplexResult,
    DataviewSearchInput,
    JsonLogicSearchInput,
    SearchResult,
    SimpleSearchInput,
)
from obsidian_rest.tools.base import tool


@tool("obsidian_simple_search", SimpleSearchInput)
async def simple_search(
    client: ObsidianClient,
    input: SimpleSearchInput,
) -> list[SearchResult]:
    """Simple search for documents matching a specified text query across all files in the vault.

    Use this tool when you want to do a simple text search. Results are ranked
    by the server; each match carries its character span and the surrounding
    context.
    """
    return await client.simple_search(input.query, input.content_length)


@tool("obsidian_jsonlogic_search", JsonLogicSearchInput)
async def jsonlogic_search(
    client: ObsidianClient,
    input: JsonLogicSearchInput,
) -> list[ComplexResult]:
    """Complex search for documents using a JsonLogic query.

    Supports standard JsonLogic operators plus 'glob' and 'regexp' for pattern
    matching. Results must be non-falsy. Use this tool when you want to do a
    complex search, e.g. for all documents with certain tags etc.
    """
    return await client.complex_search(input.query, "jsonlogic")


@tool("obsidian_dataview_search", DataviewSearchInput)
async def dataview_search(
    client: ObsidianClient,
    input: DataviewSearchInput,
) -> list[ComplexResult]:
    """Complex search for documents using a Dataview DQL query.

    Use this tool when you want to do a complex search, e.g. for all documents
    with certain tags etc.
    """
    return await client.complex_search(input.query, "dataview-dql")
