"""
In-process holder for the Calendar Client handle.

The client is installed once when the server is built and only read
afterwards, so concurrent tool calls share it without locking.
"""

from __future__ import annotations

from typing import Any

from .types import CalendarState, initial_state

_state: CalendarState = initial_state()


def get_client() -> Any:
  """Get calendar client."""
  return _state.client


def set_client(client: Any) -> None:
  """Set calendar client."""
  _state.client = client


def reset_state() -> None:
  """Reset state to initial."""
  global _state
  _state = initial_state()
