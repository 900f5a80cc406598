"""Exception types raised by the Obsidian REST client."""

from __future__ import annotations

from typing import Optional


class BackendError(Exception):
    """A request to the Local REST API failed.

    Raised for transport failures, non-2xx responses, and bodies that cannot
    be decoded into the expected result shape.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.status_code = status_code

