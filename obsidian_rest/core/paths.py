"""URL path construction for Local REST API endpoints."""

from urllib.parse import quote


def encode_vault_path(path: str) -> str:
    """Turn a vault-relative path into an encoded URL path fragment.

    The leading ``/`` is stripped so the fragment can be appended to
    ``/vault/``. Every path segment is percent-encoded (spaces become ``%20``,
    ``#`` and ``?`` no longer cut the URL short) while ``/`` separators are
    kept.

    Examples:
        >>> encode_vault_path("/Daily Notes/2025-10-27.md")
        'Daily%20Notes/2025-10-27.md'
        >>> encode_vault_path("Projects/C# notes.md")
        'Projects/C%23%20notes.md'
    """
    return quote(path.lstrip("/"), safe="/")


def date_path(iso_date: str) -> str:
    """Convert ``YYYY-MM-DD`` into the ``YYYY/MM/DD`` segments the API expects.

    Examples:
        >>> date_path("2024-03-07")
        '2024/03/07'
    """
    return iso_date.replace("-", "/")
