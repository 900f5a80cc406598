"""Pydantic input models for vault file operations.

This module defines input models for file listing and retrieval tools:
- List files in the vault root
- List files in a directory
- Get the contents of a file by path
- Get files by bare name (wiki-link resolution)
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from pydantic import BaseModel, Field, field_validator

from obsidian_rest.models.base import IgnoredInput, require_text

_EXTENSION = re.compile(r"\.[A-Za-z0-9]{1,8}$")


class ListFilesInVaultInput(IgnoredInput):
    """Input model for obsidian_list_files_in_vault tool.

    Examples:
        >>> ListFilesInVaultInput()
    """


class ListFilesInDirInput(BaseModel):
    """Input model for obsidian_list_files_in_dir tool.

    Examples:
        >>> ListFilesInDirInput(dirpath="Daily Notes")
        >>> ListFilesInDirInput(dirpath="/Projects/2025")
    """

    dirpath: str = Field(
        description=(
            "Path to list files from (relative to your vault root). "
            "Note that empty directories will not be returned."
        ),
        examples=["Daily Notes", "Projects/2025"],
    )

    @field_validator('dirpath')
    @classmethod
    def validate_dirpath(cls, v: str) -> str:
        """Validate directory path is not empty."""
        return require_text(v, "dirpath")


class GetFileContentsInput(BaseModel):
    """Input model for obsidian_get_file_contents tool.

    Examples:
        >>> GetFileContentsInput(filepath="Daily Notes/2025-10-27.md")
    """

    filepath: str = Field(
        description="Path to the file (relative to your vault root).",
        examples=["Daily Notes/2025-10-27.md", "README.md"],
    )

    @field_validator('filepath')
    @classmethod
    def validate_filepath(cls, v: str) -> str:
        """Validate file path is not empty."""
        return require_text(v, "filepath")


class GetFileByNameInput(BaseModel):
    """Input model for obsidian_get_file_by_name tool.

    The filename is reduced to the bare note name the vault indexes on: wiki
    link brackets, aliases and heading anchors are dropped, then the folder
    part and the extension.

    Examples:
        >>> GetFileByNameInput(filename="Meeting Notes").filename
        'Meeting Notes'
        >>> GetFileByNameInput(filename="[[Projects/Roadmap.md|the roadmap]]").filename
        'Roadmap'
    """

    filename: str = Field(
        description="Name of the file to retrieve (without path).",
        examples=["Meeting Notes", "Roadmap"],
    )

    include_content: bool = Field(
        False,
        description="Whether to include the content of the file (default: false)",
    )

    @field_validator('filename')
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Normalize a file reference to its bare note name.

        Args:
            v: Filename, path, or ``[[wiki link]]`` supplied by the caller

        Returns:
            The last path component without its extension

        Raises:
            ValueError: If nothing remains after normalization
        """
        cleaned = require_text(v, "filename")

        if cleaned.startswith("[[") and cleaned.endswith("]]"):
            cleaned = cleaned[2:-2]
        # [[name|alias]] and [[name#heading]]
        cleaned = cleaned.split("|", 1)[0].split("#", 1)[0].strip()

        name = PurePosixPath(cleaned.replace("\\", "/")).name
        # only a short alphanumeric suffix counts as an extension ("v1.4 Release" keeps its dot)
        name = _EXTENSION.sub("", name) or name
        return require_text(name, "filename")
