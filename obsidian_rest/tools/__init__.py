"""MCP tool definitions for Obsidian vault operations.

Each tool module defines its handlers with the ``@tool`` decorator; the
registry module collects them in advertised order.
"""

from obsidian_rest.tools.base import ToolDescriptor, tool
from obsidian_rest.tools.registry import TOOLS, ToolRegistry, render_result

__all__ = [
    "TOOLS",
    "ToolDescriptor",
    "ToolRegistry",
    "render_result",
    "tool",
]
