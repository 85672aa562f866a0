"""
Credential and server configuration resolution.

Resolution is a pure function of an explicit mapping (CLI / config file) and
the process environment; nothing here reads global state on its own.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

log = logging.getLogger("skill.google_calendar.config")

CREDENTIAL_KEYS = ("CLIENT_ID", "CLIENT_SECRET", "REFRESH_TOKEN")
DEFAULT_PORT = 8081


class ConfigError(Exception):
  """Raised when configuration cannot be used."""

  pass


class Credentials(BaseModel):
  """OAuth2 client identity plus a refresh token.

  Every field may be missing; the provider rejects the first call if so.
  """

  model_config = ConfigDict(frozen=True)

  client_id: str | None = None
  client_secret: str | None = None
  refresh_token: str | None = None

  @property
  def is_complete(self) -> bool:
    return bool(self.client_id and self.client_secret and self.refresh_token)


def _pick(key: str, explicit: Mapping[str, Any], environ: Mapping[str, str]) -> str | None:
  value = explicit.get(key)
  if value:
    return str(value)
  return environ.get(key) or None


def resolve_credentials(
  explicit: Mapping[str, Any] | None,
  environ: Mapping[str, str],
) -> Credentials:
  """Explicit values win over the environment, key by key."""
  explicit = explicit or {}
  client_id, client_secret, refresh_token = (
    _pick(key, explicit, environ) for key in CREDENTIAL_KEYS
  )
  return Credentials(
    client_id=client_id,
    client_secret=client_secret,
    refresh_token=refresh_token,
  )


def resolve_port(explicit: int | str | None, environ: Mapping[str, str]) -> int:
  raw = explicit if explicit not in (None, "") else environ.get("PORT")
  if raw in (None, ""):
    return DEFAULT_PORT
  try:
    port = int(raw)
  except (TypeError, ValueError) as e:
    raise ConfigError(f"Invalid port: {raw!r}") from e
  if not 0 < port < 65536:
    raise ConfigError(f"Port out of range: {port}")
  return port


def load_config_file(path: str | Path | None) -> dict[str, Any]:
  """Read a JSON config object; a missing file means no explicit config."""
  if not path:
    return {}
  config_path = Path(path)
  if not config_path.exists():
    log.warning("Config file %s not found, using environment only", config_path)
    return {}
  try:
    data = json.loads(config_path.read_text())
  except json.JSONDecodeError as e:
    raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
  if not isinstance(data, dict):
    raise ConfigError(f"Config file {config_path} must contain a JSON object")
  return data
