"""
Google Calendar API client.

The discovery client is synchronous, so every request is wrapped with
asyncio.to_thread to keep the handlers' async contract intact. httplib2 is
not thread-safe, so each request executes on its own AuthorizedHttp.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable, TypeVar

import httplib2
from google.oauth2.credentials import Credentials as OAuthCredentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..config import Credentials

log = logging.getLogger("skill.google_calendar.client.google")

T = TypeVar("T")

SCOPES = ["https://www.googleapis.com/auth/calendar"]
TOKEN_URI = "https://oauth2.googleapis.com/token"
PRIMARY_CALENDAR = "primary"


async def _run_sync(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
  """Run a blocking discovery-client call in a thread."""
  return await asyncio.to_thread(functools.partial(fn, *args, **kwargs))


def oauth_credentials(credentials: Credentials) -> OAuthCredentials:
  """Refresh-token credential; no token is fetched until the first request."""
  return OAuthCredentials(
    token=None,
    refresh_token=credentials.refresh_token,
    token_uri=TOKEN_URI,
    client_id=credentials.client_id,
    client_secret=credentials.client_secret,
    scopes=SCOPES,
  )


def build_service(oauth: OAuthCredentials) -> Any:
  """Build the calendar v3 discovery resource.

  Nothing is sent over the network here, so bad credentials only surface as
  a failed tool call.
  """
  return build("calendar", "v3", credentials=oauth, cache_discovery=False)


class GoogleCalendarClient:
  """Client for the events collection of a single calendar."""

  def __init__(
    self,
    credentials: Credentials | None = None,
    service: Any = None,
    calendar_id: str = PRIMARY_CALENDAR,
  ):
    self.calendar_id = calendar_id
    self._oauth: OAuthCredentials | None = (
      oauth_credentials(credentials) if credentials is not None else None
    )
    self.service: Any = service
    if self.service is None and self._oauth is not None:
      self.service = build_service(self._oauth)
      log.info("Google Calendar client initialized for calendar '%s'", calendar_id)

  def is_ready(self) -> bool:
    return self.service is not None

  def _require_service(self) -> Any:
    if not self.service:
      raise RuntimeError("Not authenticated")
    return self.service

  def _new_http(self) -> AuthorizedHttp | None:
    if self._oauth is None:
      return None
    return AuthorizedHttp(self._oauth, http=httplib2.Http())

  async def _execute(self, request: Any) -> Any:
    """Execute a built request in a worker thread on a transport of its own."""
    http = self._new_http()
    if http is None:
      return await _run_sync(request.execute)
    return await _run_sync(request.execute, http=http)

  async def list_events(
    self,
    time_min: str | None = None,
    time_max: str | None = None,
    max_results: int = 10,
    single_events: bool = True,
    order_by: str = "startTime",
  ) -> list[dict[str, Any]]:
    """List events, expanding recurring series into single instances."""
    service = self._require_service()

    params: dict[str, Any] = {
      "calendarId": self.calendar_id,
      "timeMin": time_min,
      "maxResults": max_results,
      "singleEvents": single_events,
      "orderBy": order_by,
    }
    if time_max:
      params["timeMax"] = time_max

    try:
      result = await self._execute(service.events().list(**params))
      return result.get("items", []) or []
    except HttpError as e:
      log.error("Failed to list events: %s", e)
      raise

  async def insert_event(self, body: dict[str, Any]) -> dict[str, Any]:
    """Create a new event from a full event body."""
    service = self._require_service()

    try:
      return await self._execute(service.events().insert(calendarId=self.calendar_id, body=body))
    except HttpError as e:
      log.error("Failed to create event: %s", e)
      raise

  async def patch_event(self, event_id: str, body: dict[str, Any]) -> dict[str, Any]:
    """Apply a sparse patch; fields missing from the body are left unchanged."""
    service = self._require_service()

    try:
      return await self._execute(
        service.events().patch(calendarId=self.calendar_id, eventId=event_id, body=body)
      )
    except HttpError as e:
      if e.resp.status == 404:
        raise ValueError(f"Event {event_id} not found") from e
      log.error("Failed to update event: %s", e)
      raise

  async def delete_event(self, event_id: str) -> None:
    """Delete an event. The provider returns an empty body on success."""
    service = self._require_service()

    try:
      await self._execute(service.events().delete(calendarId=self.calendar_id, eventId=event_id))
    except HttpError as e:
      if e.resp.status == 404:
        raise ValueError(f"Event {event_id} not found") from e
      log.error("Failed to delete event: %s", e)
      raise
