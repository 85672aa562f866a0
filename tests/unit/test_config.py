"""
Unit tests for configuration resolution.
"""

import json

import pytest

from google_calendar.config import (
  DEFAULT_PORT,
  ConfigError,
  Credentials,
  load_config_file,
  resolve_credentials,
  resolve_port,
)

ENV = {"CLIENT_ID": "env-id", "CLIENT_SECRET": "env-secret", "REFRESH_TOKEN": "env-token"}


class TestResolveCredentials:
  """Tests for resolve_credentials()."""

  def test_environment_only(self):
    creds = resolve_credentials(None, ENV)

    assert creds == Credentials(
      client_id="env-id", client_secret="env-secret", refresh_token="env-token"
    )
    assert creds.is_complete

  def test_explicit_wins_per_key(self):
    creds = resolve_credentials({"CLIENT_ID": "cfg-id"}, ENV)

    assert creds.client_id == "cfg-id"
    assert creds.client_secret == "env-secret"
    assert creds.refresh_token == "env-token"

  def test_empty_explicit_value_falls_through(self):
    creds = resolve_credentials({"CLIENT_SECRET": ""}, ENV)
    assert creds.client_secret == "env-secret"

  def test_missing_values_not_rejected(self):
    creds = resolve_credentials({}, {})

    assert creds == Credentials()
    assert not creds.is_complete

  def test_credentials_are_immutable(self):
    creds = resolve_credentials(None, ENV)
    with pytest.raises(Exception):
      creds.client_id = "other"


class TestResolvePort:
  """Tests for resolve_port()."""

  def test_default(self):
    assert resolve_port(None, {}) == DEFAULT_PORT == 8081

  def test_environment(self):
    assert resolve_port(None, {"PORT": "9000"}) == 9000

  def test_explicit_wins(self):
    assert resolve_port("7000", {"PORT": "9000"}) == 7000

  @pytest.mark.parametrize("value", ["abc", "0", "70000"])
  def test_invalid(self, value):
    with pytest.raises(ConfigError):
      resolve_port(value, {})


class TestLoadConfigFile:
  """Tests for load_config_file()."""

  def test_no_path(self):
    assert load_config_file(None) == {}

  def test_missing_file(self, tmp_path):
    assert load_config_file(tmp_path / "config.json") == {}

  def test_reads_object(self, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"CLIENT_ID": "file-id"}))

    assert load_config_file(path) == {"CLIENT_ID": "file-id"}

  def test_rejects_non_object(self, tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")

    with pytest.raises(ConfigError):
      load_config_file(path)

  def test_rejects_bad_json(self, tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError):
      load_config_file(path)
