"""Tool descriptors: a name, an input model, and an async handler."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from mcp.types import Tool
from pydantic import BaseModel

if TYPE_CHECKING:
    from obsidian_rest.core.client import ObsidianClient

Handler = Callable[["ObsidianClient", Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDescriptor:
    """One tool as advertised to MCP clients.

    ``input_model`` is both the advertised parameter schema and the validator
    applied to the caller's arguments before ``handler`` runs. The handler
    receives the validated model and returns a value the registry serializes.
    """

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool parameters, derived from ``input_model``."""
        return self.input_model.model_json_schema()

    def as_mcp_tool(self) -> Tool:
        """Return the MCP tool definition advertised by ``tools/list``."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )


def tool(name: str, input_model: type[BaseModel]) -> Callable[[Handler], ToolDescriptor]:
    """Wrap a handler into a :class:`ToolDescriptor`.

    The handler's docstring becomes the tool description shown to the agent.
    """

    def decorator(handler: Handler) -> ToolDescriptor:
        return ToolDescriptor(
            name=name,
            description=inspect.cleandoc(handler.__doc__ or ""),
            input_model=input_model,
            handler=handler,
        )

    return decorator
