"""
The closed set of tool names this server exposes.
"""

from __future__ import annotations

from enum import Enum


class ToolName(str, Enum):
  LIST_EVENTS = "list_events"
  CREATE_EVENT = "create_event"
  UPDATE_EVENT = "update_event"
  DELETE_EVENT = "delete_event"
