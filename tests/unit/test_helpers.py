"""
Unit tests for shared helpers and argument validation.
"""

import re

import pytest

from google_calendar import helpers
from google_calendar.helpers import (
  ErrorCategory,
  error_message,
  event_time,
  log_and_format_error,
  project_event,
  utc_now_iso,
)
from google_calendar.validation import (
  ValidationError,
  opt_number,
  opt_string,
  opt_string_list,
  require_present,
)


class TestEventShaping:
  """Tests for event body and projection helpers."""

  def test_event_time_uses_configured_zone(self):
    assert event_time("2024-01-01T10:00:00") == {
      "dateTime": "2024-01-01T10:00:00",
      "timeZone": "Europe/Berlin",
    }

  def test_event_time_falls_back_to_local_zone(self, monkeypatch):
    monkeypatch.delenv("CALENDAR_TIMEZONE")
    monkeypatch.setattr(helpers, "get_localzone_name", lambda: "America/New_York")

    assert event_time("2024-01-01T10:00:00")["timeZone"] == "America/New_York"

  def test_project_event(self):
    event = {"id": "1", "summary": "s", "status": "confirmed", "htmlLink": "http://x"}
    assert project_event(event) == {"id": "1", "summary": "s"}

  def test_utc_now_iso(self):
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", utc_now_iso())


class TestErrors:
  """Tests for error formatting."""

  def test_http_error_uses_reason(self, http_error):
    assert error_message(http_error(400, "Bad Request")) == "Bad Request"

  def test_plain_exception(self):
    assert error_message(RuntimeError("boom")) == "boom"

  def test_empty_exception_uses_type_name(self):
    assert error_message(TimeoutError()) == "TimeoutError"

  def test_format_and_log(self, caplog):
    result = log_and_format_error(
      "delete_event", "Error deleting event", RuntimeError("boom"), ErrorCategory.EVENT
    )

    assert result.is_error
    assert result.content == "Error deleting event: boom"
    assert "EVENT-ERR-" in caplog.text

  def test_validation_errors_are_categorised(self, caplog):
    log_and_format_error(
      "create_event", "Error creating event", ValidationError("bad"), ErrorCategory.EVENT
    )
    assert "VALIDATION-ERR-" in caplog.text


class TestValidation:
  """Tests for argument extraction."""

  def test_opt_string_strips_and_defaults(self):
    assert opt_string({"a": "  x "}, "a") == "x"
    assert opt_string({"a": "   "}, "a", "d") == "d"
    assert opt_string({}, "a") is None

  def test_opt_number(self):
    assert opt_number({"n": 5.0}, "n") == 5
    assert opt_number({"n": "7"}, "n") == 7
    assert opt_number({"n": "many"}, "n", 10) == 10
    assert opt_number({"n": True}, "n", 10) == 10

  def test_opt_string_list(self):
    assert opt_string_list({}, "a") is None
    assert opt_string_list({"a": []}, "a") == []
    assert opt_string_list({"a": ["x"]}, "a") == ["x"]
    with pytest.raises(ValidationError):
      opt_string_list({"a": "x@example.com"}, "a")
    with pytest.raises(ValidationError):
      opt_string_list({"a": ["x", 1]}, "a")

  def test_require_present_keeps_value_unchanged(self):
    assert require_present({"id": " abc "}, "id") == " abc "

  @pytest.mark.parametrize("args", [{}, {"id": None}, {"id": ""}, {"id": 42}])
  def test_require_present_rejects(self, args):
    with pytest.raises(ValidationError, match="Missing required parameter: id"):
      require_present(args, "id")
