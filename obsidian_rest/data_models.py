"""Data models for server configuration, transport settings and tool results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class ApiConfiguration:
    """Connection settings for the Obsidian Local REST API."""

    api_key: str
    api_host: str
    verify_ssl: bool = True
    ca_cert: Optional[Path] = None
    timeout: float = 30.0

    @property
    def verify(self) -> bool | str:
        """Value for the HTTP client's ``verify`` option."""
        if not self.verify_ssl:
            return False
        if self.ca_cert is not None:
            return str(self.ca_cert)
        return True

    def as_payload(self) -> dict[str, Any]:
        """Return a loggable representation with the API key masked."""
        return {
            "api_key": "***" if self.api_key else "",
            "api_host": self.api_host,
            "verify_ssl": self.verify_ssl,
            "ca_cert": str(self.ca_cert) if self.ca_cert else None,
            "timeout": self.timeout,
        }


@dataclass(frozen=True)
class TransportConfiguration:
    """How the MCP server is exposed to clients.

    ``host`` and ``port`` only apply to the HTTP transports (``sse`` and
    ``streamable-http``); ``stdio`` ignores them.
    """

    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8989

    @property
    def is_http(self) -> bool:
        """Whether the server listens on a socket."""
        return self.transport != "stdio"


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool invocation.

    ``content`` holds JSON text (or plain text) on success and a plain error
    message when ``is_error`` is set.
    """

    is_error: bool
    content: str

    @classmethod
    def text(cls, content: str) -> "ToolResult":
        """Build a successful result carrying ``content``."""
        return cls(is_error=False, content=content)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        """Build an error result carrying a human-readable ``message``."""
        return cls(is_error=True, content=message)
