"""
Shared event-shaping and error handling helpers.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from googleapiclient.errors import HttpError
from tzlocal import get_localzone_name

from .validation import ValidationError

log = logging.getLogger("skill.google_calendar.helpers")

# Fields kept when listing events; everything else the provider returns is dropped.
LISTED_EVENT_FIELDS = ("id", "summary", "start", "end", "location")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ToolResult:
  content: str
  is_error: bool = False


# ---------------------------------------------------------------------------
# Event shaping
# ---------------------------------------------------------------------------


def local_timezone() -> str:
  """IANA name of the zone applied to event start/end times."""
  return os.environ.get("CALENDAR_TIMEZONE") or get_localzone_name()


def utc_now_iso() -> str:
  """Current instant as an RFC 3339 UTC timestamp."""
  return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def event_time(value: str) -> dict[str, str]:
  """Wrap an ISO 8601 timestamp the way the events resource expects it."""
  return {"dateTime": value, "timeZone": local_timezone()}


def attendee_list(emails: list[str]) -> list[dict[str, str]]:
  return [{"email": email} for email in emails]


def project_event(event: dict[str, Any]) -> dict[str, Any]:
  """Reduce a provider event record to the listed fields."""
  return {key: event[key] for key in LISTED_EVENT_FIELDS if key in event}


def format_event_list(events: list[dict[str, Any]]) -> str:
  return json.dumps([project_event(event) for event in events], indent=2)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  EVENT = "EVENT"
  VALIDATION = "VALIDATION"
  API = "API"


def error_message(error: Exception) -> str:
  """Human-readable reason for a failure, preferring the provider's own message."""
  if isinstance(error, HttpError) and error.reason:
    return str(error.reason)
  return str(error) or error.__class__.__name__


def log_and_format_error(
  function_name: str,
  prefix: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  """Log a handler failure and turn it into an error ToolResult.

  ``prefix`` is the caller-facing lead-in, e.g. "Error deleting event".
  """
  if isinstance(error, ValidationError):
    category = ErrorCategory.VALIDATION
  elif isinstance(error, HttpError) and category is None:
    category = ErrorCategory.API
  code_prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  error_code = f"{code_prefix}-ERR-{hash_val:03d}"

  log.error("[MCP] Error in %s - Code: %s - %s", function_name, error_code, error)

  return ToolResult(content=f"{prefix}: {error_message(error)}", is_error=True)
