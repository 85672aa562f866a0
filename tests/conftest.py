"""Shared test fixtures for the Google Calendar server tests.

The Calendar Client runs against a MagicMock discovery service, so no
credentials or network access are needed:

  def test_something(client, service):
    service.events.return_value.list.return_value.execute.return_value = {...}
"""

from collections.abc import Callable, Generator
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from google_calendar.client.google_client import GoogleCalendarClient
from google_calendar.state.store import reset_state, set_client

TEST_TIMEZONE = "Europe/Berlin"


@pytest.fixture(autouse=True)
def fixed_timezone(monkeypatch: pytest.MonkeyPatch) -> str:
  """Pin the zone applied to event start/end times."""
  monkeypatch.setenv("CALENDAR_TIMEZONE", TEST_TIMEZONE)
  return TEST_TIMEZONE


@pytest.fixture
def service() -> MagicMock:
  """A stand-in for the calendar v3 discovery resource."""
  return MagicMock(name="calendar_service")


@pytest.fixture
def events(service: MagicMock) -> MagicMock:
  """Shortcut to the events() collection of the mock service."""
  return service.events.return_value


@pytest.fixture
def client(service: MagicMock) -> Generator[GoogleCalendarClient, None, None]:
  """Install a GoogleCalendarClient backed by the mock service."""
  calendar_client = GoogleCalendarClient(service=service)
  set_client(calendar_client)
  yield calendar_client
  reset_state()


@pytest.fixture
def http_error() -> Callable[[int, str], HttpError]:
  """Build a real HttpError the way the discovery client raises it."""

  def _make(status: int, message: str) -> HttpError:
    body = f'{{"error": {{"code": {status}, "message": "{message}"}}}}'.encode()
    return HttpError(httplib2.Response({"status": status}), body)

  return _make
