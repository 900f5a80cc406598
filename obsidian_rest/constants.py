"""Module-level constants for the Obsidian REST MCP server."""

from pathlib import Path

# Configuration
DEFAULT_API_HOST = "https://127.0.0.1:27124"
DEFAULT_TIMEOUT = 30.0
ENV_FILE = Path(".env")
CONFIG_DIR_NAME = "mcp_obsidian"
CONFIG_FILE_NAME = "config.yaml"

# Local REST API media types
NOTE_JSON_MEDIA_TYPE = "application/vnd.olrapi.note+json"
JSONLOGIC_MEDIA_TYPE = "application/vnd.olrapi.jsonlogic+json"
DATAVIEW_DQL_MEDIA_TYPE = "application/vnd.olrapi.dataview.dql+txt"

QUERY_CONTENT_TYPES = {
    "jsonlogic": JSONLOGIC_MEDIA_TYPE,
    "dataview-dql": DATAVIEW_DQL_MEDIA_TYPE,
    "dataview": DATAVIEW_DQL_MEDIA_TYPE,
}

# Periodic notes
PERIODS = ("daily", "weekly", "monthly", "quarterly", "yearly")

# Tool defaults
DEFAULT_CONTEXT_LENGTH = 100
DEFAULT_RECENT_LIMIT = 5

# Logging
LOG_LEVEL = "INFO"
LOG_FILE = Path("mcpserver.log")
LOG_RESOURCE_URI = "file:///mcpserver.log"

# MCP transports
TRANSPORTS = ("stdio", "sse", "streamable-http")
DEFAULT_TRANSPORT = "stdio"
DEFAULT_MCP_HOST = "127.0.0.1"
DEFAULT_MCP_PORT = 8989
MCP_HTTP_PATH = "/mcp"
