"""FastMCP server initialization and tool dispatch."""

import asyncio
import logging
import os
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import TextContent, Tool

from obsidian_rest.config import load_api_configuration, load_transport_configuration
from obsidian_rest.constants import LOG_FILE, LOG_LEVEL, LOG_RESOURCE_URI, MCP_HTTP_PATH
from obsidian_rest.core.client import ObsidianClient
from obsidian_rest.data_models import ApiConfiguration, TransportConfiguration
from obsidian_rest.instructions import build_instructions
from obsidian_rest.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-obsidian"
INSTRUCTIONS_PROMPT = "instructions"


def configure_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> Path:
    """Log to stderr and to the server log file.

    stdout is left alone because it carries the stdio protocol stream.

    Returns:
        The log file path, which is also exposed as an MCP resource.
    """
    level = level or os.environ.get("OBSIDIAN_LOG_LEVEL", LOG_LEVEL)
    log_file = Path(log_file or os.environ.get("OBSIDIAN_LOG_FILE", LOG_FILE))

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )
    return log_file


def read_log_file(log_file: Path) -> str:
    """Return the server log, flushing pending records first."""
    for handler in logging.getLogger().handlers:
        handler.flush()
    if not log_file.exists():
        return ""
    return log_file.read_text(encoding="utf-8", errors="replace")


class ObsidianMCP(FastMCP):
    """FastMCP server whose tools are served from a :class:`ToolRegistry`.

    Tools are listed in registry order and every call goes through
    :meth:`ToolRegistry.call`, so the pydantic input models are both the
    advertised schemas and the only argument validation. Prompts and resources
    use the regular FastMCP decorators.
    """

    def __init__(self, registry: ToolRegistry, instructions: str, **settings: Any) -> None:
        self.registry = registry
        super().__init__(SERVER_NAME, instructions=instructions, **settings)

    async def list_tools(self) -> list[Tool]:
        """List the registry's tools in advertised order."""
        return self.registry.list_tools()

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Run a tool; error results are raised as :class:`ToolError`.

        The MCP server turns a raised ``ToolError`` into a result with
        ``isError`` set and the message as its text.
        """
        result = await self.registry.call(name, arguments)
        if result.is_error:
            raise ToolError(result.content)
        return [TextContent(type="text", text=result.content)]


def create_server(
    registry: ToolRegistry,
    instructions: str,
    log_file: Path,
    **settings: Any,
) -> ObsidianMCP:
    """Build the MCP server around ``registry``.

    Args:
        registry: Tools to advertise and dispatch to.
        instructions: Guidance for the agent, sent at initialization and as
            the ``instructions`` prompt.
        log_file: Log file exposed as the ``server log`` resource.
        **settings: FastMCP settings, e.g. ``host`` and ``port`` for the HTTP
            transports.
    """
    mcp = ObsidianMCP(
        registry,
        instructions,
        sse_path=MCP_HTTP_PATH,
        streamable_http_path=MCP_HTTP_PATH,
        **settings,
    )

    @mcp.prompt(name=INSTRUCTIONS_PROMPT, description="How to use the Obsidian vault tools")
    def instructions_prompt() -> str:
        return instructions

    @mcp.resource(LOG_RESOURCE_URI, name="server log", mime_type="text/plain")
    def server_log() -> str:
        """Contents of the MCP server log file."""
        return read_log_file(log_file)

    return mcp


async def serve(config: ApiConfiguration, transport: TransportConfiguration, log_file: Path) -> None:
    """Run the server on the configured transport until it shuts down."""
    async with ObsidianClient.from_config(config) as client:
        registry = ToolRegistry(client)
        mcp = create_server(
            registry,
            build_instructions(date.today()),
            log_file,
            host=transport.host,
            port=transport.port,
        )

        if transport.is_http:
            logger.info(
                "Serving %d tools over %s at http://%s:%d%s",
                len(registry),
                transport.transport,
                transport.host,
                transport.port,
                MCP_HTTP_PATH,
            )
        else:
            logger.info("Serving %d tools over stdio", len(registry))

        if transport.transport == "sse":
            await mcp.run_sse_async()
        elif transport.transport == "streamable-http":
            await mcp.run_streamable_http_async()
        else:
            await mcp.run_stdio_async()


def run_server() -> None:
    """Start the MCP server on the configured transport (stdio by default)."""
    log_file = configure_logging()
    config = load_api_configuration()
    transport = load_transport_configuration()
    logger.info("Starting Obsidian REST MCP Server config=%s transport=%s", config.as_payload(), transport)
    asyncio.run(serve(config, transport, log_file))


if __name__ == "__main__":
    run_server()
