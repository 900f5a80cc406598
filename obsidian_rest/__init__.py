"""Obsidian REST MCP Server

Obsidian vault access for agents via Model Context Protocol, backed by the
Local REST API plugin.
"""

from obsidian_rest.config import load_api_configuration, load_transport_configuration
from obsidian_rest.core.client import ObsidianClient
from obsidian_rest.data_models import ApiConfiguration, ToolResult
from obsidian_rest.errors import BackendError
from obsidian_rest.tools import TOOLS, ToolRegistry
from obsidian_rest.server import create_server, run_server

__version__ = "1.0.0"
__all__ = [
    "ApiConfiguration",
    "BackendError",
    "ObsidianClient",
    "TOOLS",
    "ToolRegistry",
    "ToolResult",
    "create_server",
    "load_api_configuration",
    "load_transport_configuration",
    "run_server",
]
