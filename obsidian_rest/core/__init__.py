"""Backend access for the Obsidian Local REST API."""

from obsidian_rest.core.client import ObsidianClient
from obsidian_rest.core.paths import date_path, encode_vault_path

__all__ = [
    "ObsidianClient",
    "date_path",
    "encode_vault_path",
]
