"""
Tool dispatch — routes tool names to handler functions.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData

from ..helpers import ToolResult
from ..tools import ToolName
from .event import (
  create_event,
  delete_event,
  list_events,
  update_event,
)

log = logging.getLogger("skill.google_calendar.handlers")

Handler = Callable[[dict[str, Any]], Awaitable[ToolResult]]

HANDLERS: dict[ToolName, Handler] = {
  ToolName.LIST_EVENTS: list_events,
  ToolName.CREATE_EVENT: create_event,
  ToolName.UPDATE_EVENT: update_event,
  ToolName.DELETE_EVENT: delete_event,
}

_missing = set(ToolName) - set(HANDLERS)
if _missing:
  raise RuntimeError(f"No handler registered for: {sorted(t.value for t in _missing)}")


def unknown_tool(name: str) -> McpError:
  return McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))


async def dispatch_tool(tool_name: str, args: dict[str, Any] | None) -> ToolResult:
  """Dispatch a tool call to the appropriate handler.

  Raises McpError(METHOD_NOT_FOUND) for names outside the catalog. Handler
  results are returned as-is; handlers do not raise.
  """
  try:
    tool = ToolName(tool_name)
  except ValueError:
    log.warning("Unknown tool: %s", tool_name)
    raise unknown_tool(tool_name) from None

  return await HANDLERS[tool](args or {})
