"""
Event management tools (4 tools).
"""

from __future__ import annotations

from mcp.types import Tool

from .names import ToolName

event_tools: list[Tool] = [
  Tool(
    name=ToolName.LIST_EVENTS.value,
    description="List upcoming calendar events",
    inputSchema={
      "type": "object",
      "properties": {
        "maxResults": {
          "type": "number",
          "description": "Maximum number of events to return (default: 10)",
          "default": 10,
        },
        "timeMin": {
          "type": "string",
          "description": "Start time in ISO format (default: now)",
        },
        "timeMax": {
          "type": "string",
          "description": "End time in ISO format",
        },
      },
    },
  ),
  Tool(
    name=ToolName.CREATE_EVENT.value,
    description="Create a new calendar event",
    inputSchema={
      "type": "object",
      "properties": {
        "summary": {
          "type": "string",
          "description": "Event title",
        },
        "location": {
          "type": "string",
          "description": "Event location",
        },
        "description": {
          "type": "string",
          "description": "Event description",
        },
        "start": {
          "type": "string",
          "description": "Start time in ISO format",
        },
        "end": {
          "type": "string",
          "description": "End time in ISO format",
        },
        "attendees": {
          "type": "array",
          "items": {"type": "string"},
          "description": "List of attendee email addresses",
        },
      },
      "required": ["summary", "start", "end"],
    },
  ),
  Tool(
    name=ToolName.UPDATE_EVENT.value,
    description="Update an existing calendar event",
    inputSchema={
      "type": "object",
      "properties": {
        "eventId": {
          "type": "string",
          "description": "Event ID to update",
        },
        "summary": {
          "type": "string",
          "description": "New event title",
        },
        "location": {
          "type": "string",
          "description": "New event location",
        },
        "description": {
          "type": "string",
          "description": "New event description",
        },
        "start": {
          "type": "string",
          "description": "New start time in ISO format",
        },
        "end": {
          "type": "string",
          "description": "New end time in ISO format",
        },
        "attendees": {
          "type": "array",
          "items": {"type": "string"},
          "description": "New list of attendee email addresses (replaces the existing list)",
        },
      },
      "required": ["eventId"],
    },
  ),
  Tool(
    name=ToolName.DELETE_EVENT.value,
    description="Delete a calendar event",
    inputSchema={
      "type": "object",
      "properties": {
        "eventId": {
          "type": "string",
          "description": "Event ID to delete",
        },
      },
      "required": ["eventId"],
    },
  ),
]
