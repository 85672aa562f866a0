"""
Calendar tool definitions.

Each tool has a name, description, and inputSchema. Definitions are built
once at import time and never mutated.
"""

from __future__ import annotations

from mcp.types import Tool

from .event import event_tools
from .names import ToolName

ALL_TOOLS: list[Tool] = [
  *event_tools,
]


def list_tools() -> list[Tool]:
  """Return the tool catalog in registration order."""
  return list(ALL_TOOLS)


__all__ = ["ALL_TOOLS", "ToolName", "list_tools"]
