"""Vault file tools.

This module provides the tools for browsing and reading vault files:
- obsidian_list_files_in_vault: List the vault root
- obsidian_list_files_in_dir: List one directory
- obsidian_get_file_contents: Read a file by path
- obsidian_get_file_by_name: Resolve a bare note name (wiki links)

All tools delegate to :class:`obsidian_rest.core.client.ObsidianClient`.
"""
from __future__ import annotations

from obsidian_rest.core.client import ObsidianClient
from obsidian_rest.models import (
    FileContents,
    GetFileByNameInput,
    GetFileContentsInput,
    ListFilesInDirInput,
    ListFilesInVaultInput,
)
from obsidian_rest.tools.base import tool


@tool("obsidian_list_files_in_vault", ListFilesInVaultInput)
async def list_files_in_vault(
    client: ObsidianClient,
    input: ListFilesInVaultInput,
) -> list[str]:
    """Lists all files and directories in the root directory of your Obsidian vault."""
    return await client.list_files_in_vault()


@tool("obsidian_list_files_in_dir", ListFilesInDirInput)
async def list_files_in_dir(
    client: ObsidianClient,
    input: ListFilesInDirInput,
) -> list[str]:
    """Lists all files and directories in a specific directory of your Obsidian vault."""
    return await client.list_files_in_dir(input.dirpath)


@tool("obsidian_get_file_contents", GetFileContentsInput)
async def get_file_contents(
    client: ObsidianClient,
    input: GetFileContentsInput,
) -> FileContents:
    """Retrieves the contents of a file in your Obsidian vault.

    Returns the markdown content together with the parsed frontmatter, tags,
    and file stat (ctime, mtime, size).
    """
    return await client.get_file_contents(input.filepath)


@tool("obsidian_get_file_by_name", GetFileByNameInput)
async def get_file_by_name(
    client: ObsidianClient,
    input: GetFileByNameInput,
) -> list[FileContents]:
    """Retrieves the contents of a file in your Obsidian vault by its name.

    Use this to e.g. resolve `[[filename]]` or `[[filename|alias]]` links in
    files. Any folder and extension in the name are ignored. Returns every note
    with that name; an empty list when there is none. Content is omitted unless
    include_content is true.
    """
    return await client.get_file_by_name(input.filename, input.include_content)
