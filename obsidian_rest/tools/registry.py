"""Ordered tool registry and invocation.

``TOOLS`` is the fixed set of tools this server offers, in the order they are
advertised to the agent. A :class:`ToolRegistry` binds that set to one
:class:`ObsidianClient` and turns every invocation into a :class:`ToolResult`:
validation errors and backend errors come back as error results, never as
exceptions.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Optional, Sequence

from mcp.types import Tool
from pydantic import TypeAdapter, ValidationError

from obsidian_rest.core.client import ObsidianClient
from obsidian_rest.data_models import ToolResult
from obsidian_rest.errors import BackendError
from obsidian_rest.models import format_validation_error
from obsidian_rest.tools.base import ToolDescriptor
from obsidian_rest.tools.periodic_tools import (
    calendar,
    get_periodic_note,
    get_periodic_note_by_date,
    get_recent_periodic_notes,
)
from obsidian_rest.tools.search_tools import (
    dataview_search,
    jsonlogic_search,
    simple_search,
)
from obsidian_rest.tools.vault_tools import (
    get_file_by_name,
    get_file_contents,
    list_files_in_dir,
    list_files_in_vault,
)

logger = logging.getLogger(__name__)

TOOLS: tuple[ToolDescriptor, ...] = (
    calendar,
    list_files_in_vault,
    list_files_in_dir,
    get_file_contents,
    get_file_by_name,
    simple_search,
    jsonlogic_search,
    dataview_search,
    get_periodic_note,
    get_periodic_note_by_date,
    get_recent_periodic_notes,
)

_JSON = TypeAdapter(Any)


def render_result(value: Any) -> str:
    """Serialize a handler's return value into tool output text.

    Strings are returned as-is; everything else is encoded as JSON using the
    API's field names. ``null`` values are kept; only a note's unset ``path``
    is left out.
    """
    if isinstance(value, str):
        return value
    return _JSON.dump_json(value, by_alias=True).decode("utf-8")


class ToolRegistry:
    """The tools exposed to the host dispatcher, bound to one backend client.

    The registry is built once at startup and holds no per-call state.
    """

    def __init__(
        self,
        client: ObsidianClient,
        descriptors: Sequence[ToolDescriptor] = TOOLS,
    ) -> None:
        by_name: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in by_name:
                raise ValueError(f"Duplicate tool name '{descriptor.name}'")
            by_name[descriptor.name] = descriptor

        self._client = client
        self._descriptors = tuple(descriptors)
        self._by_name = by_name

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def names(self) -> list[str]:
        return [descriptor.name for descriptor in self._descriptors]

    def get(self, name: str) -> Optional[ToolDescriptor]:
        return self._by_name.get(name)

    def list_tools(self) -> list[Tool]:
        """Return the MCP tool definitions in registration order."""
        return [descriptor.as_mcp_tool() for descriptor in self._descriptors]

    async def call(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        """Validate ``arguments`` and run the named tool.

        Args:
            name: Tool name as advertised by :meth:`list_tools`.
            arguments: The caller's parameter bag (may be ``None``).

        Returns:
            A :class:`ToolResult`; ``is_error`` is set for unknown tools,
            invalid parameters, and backend failures.
        """
        descriptor = self.get(name)
        if descriptor is None:
            logger.error("Unknown tool '%s'", name)
            return ToolResult.error(f"unknown tool: {name}")

        try:
            params = descriptor.input_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            message = format_validation_error(exc)
            logger.warning("Invalid arguments for tool '%s': %s", name, message)
            return ToolResult.error(message)

        try:
            value = await descriptor.handler(self._client, params)
        except BackendError as exc:
            logger.error("Error in tool '%s' arguments=%s error=%s", name, arguments, exc)
            return ToolResult.error(str(exc))

        logger.info("Success in tool '%s' arguments=%s", name, arguments)
        return ToolResult.text(render_result(value))
