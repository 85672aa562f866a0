"""
Event management tool handlers.

Every handler returns a ToolResult; provider and validation failures are
caught here and never reach the dispatcher.
"""

from __future__ import annotations

from typing import Any

from ..api import event_api
from ..helpers import (
  ErrorCategory,
  ToolResult,
  attendee_list,
  event_time,
  format_event_list,
  log_and_format_error,
  utc_now_iso,
)
from ..validation import (
  ValidationError,
  opt_number,
  opt_string,
  opt_string_list,
  require_present,
)

DEFAULT_MAX_RESULTS = 10


async def list_events(args: dict[str, Any]) -> ToolResult:
  try:
    max_results = opt_number(args, "maxResults", DEFAULT_MAX_RESULTS) or DEFAULT_MAX_RESULTS
    if max_results < 1:
      raise ValidationError("maxResults must be a positive integer")
    time_min = opt_string(args, "timeMin") or utc_now_iso()
    time_max = opt_string(args, "timeMax")

    events = await event_api.list_events(
      time_min=time_min,
      time_max=time_max,
      max_results=max_results,
    )

    return ToolResult(content=format_event_list(events[:max_results]))
  except Exception as e:
    return log_and_format_error(
      "list_events", "Error fetching calendar events", e, ErrorCategory.EVENT
    )


async def create_event(args: dict[str, Any]) -> ToolResult:
  try:
    summary = require_present(args, "summary")
    start = require_present(args, "start")
    end = require_present(args, "end")
    attendees = opt_string_list(args, "attendees") or []

    event: dict[str, Any] = {"summary": summary}
    for key in ("location", "description"):
      if args.get(key) is not None:
        event[key] = args[key]
    event["start"] = event_time(start)
    event["end"] = event_time(end)
    event["attendees"] = attendee_list(attendees)

    created = await event_api.create_event(event)
    return ToolResult(content=f"Event created successfully. Event ID: {created.get('id')}")
  except Exception as e:
    return log_and_format_error("create_event", "Error creating event", e, ErrorCategory.EVENT)


def build_patch(args: dict[str, Any]) -> dict[str, Any]:
  """Build the sparse patch for update_event.

  Text fields and times are included only when truthy, so an empty string
  cannot be used to clear a field. Attendees replace the existing list
  whenever a list is supplied, an empty one included.
  """
  patch: dict[str, Any] = {}
  for key in ("summary", "location", "description"):
    if args.get(key):
      patch[key] = args[key]
  if args.get("start"):
    patch["start"] = event_time(args["start"])
  if args.get("end"):
    patch["end"] = event_time(args["end"])
  attendees = opt_string_list(args, "attendees")
  if attendees is not None:
    patch["attendees"] = attendee_list(attendees)
  return patch


async def update_event(args: dict[str, Any]) -> ToolResult:
  try:
    event_id = require_present(args, "eventId")
    patch = build_patch(args)

    updated = await event_api.update_event(event_id, patch)
    return ToolResult(content=f"Event updated successfully. Event ID: {updated.get('id')}")
  except Exception as e:
    return log_and_format_error("update_event", "Error updating event", e, ErrorCategory.EVENT)


async def delete_event(args: dict[str, Any]) -> ToolResult:
  try:
    event_id = require_present(args, "eventId")

    await event_api.delete_event(event_id)
    return ToolResult(content=f"Event deleted successfully. Event ID: {event_id}")
  except Exception as e:
    return log_and_format_error("delete_event", "Error deleting event", e, ErrorCategory.EVENT)
