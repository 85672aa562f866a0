"""
Calendar state types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CalendarState:
  """In-memory state for the calendar server."""

  client: Any = None  # GoogleCalendarClient, read-only once set


def initial_state() -> CalendarState:
  return CalendarState()
