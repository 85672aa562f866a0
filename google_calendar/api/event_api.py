"""
Event API layer.
"""

from __future__ import annotations

from typing import Any

from ..client.google_client import GoogleCalendarClient
from ..state.store import get_client


def _client() -> GoogleCalendarClient:
  client = get_client()
  if not isinstance(client, GoogleCalendarClient) or not client.is_ready():
    raise RuntimeError("Calendar client not initialized")
  return client


async def list_events(
  time_min: str,
  time_max: str | None = None,
  max_results: int = 10,
) -> list[dict[str, Any]]:
  """List single-occurrence events ordered by start time."""
  return await _client().list_events(
    time_min=time_min,
    time_max=time_max,
    max_results=max_results,
    single_events=True,
    order_by="startTime",
  )


async def create_event(event: dict[str, Any]) -> dict[str, Any]:
  return await _client().insert_event(event)


async def update_event(event_id: str, patch: dict[str, Any]) -> dict[str, Any]:
  return await _client().patch_event(event_id, patch)


async def delete_event(event_id: str) -> None:
  await _client().delete_event(event_id)
