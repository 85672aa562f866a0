"""
Input validation helpers.
"""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
  """Raised when input validation fails."""

  pass


def opt_string(args: dict, key: str, default: str | None = None) -> str | None:
  """Extract optional string from args."""
  val = args.get(key)
  if val is None:
    return default
  if isinstance(val, str):
    return val.strip() if val.strip() else default
  return str(val).strip() if str(val).strip() else default


def opt_number(args: dict, key: str, default: int | None = None) -> int | None:
  """Extract optional number from args."""
  val = args.get(key)
  if val is None:
    return default
  if isinstance(val, bool):
    return default
  if isinstance(val, (int, float)):
    return int(val)
  try:
    return int(float(str(val)))
  except (ValueError, TypeError):
    return default


def opt_string_list(args: dict, key: str) -> list[str] | None:
  """Extract an optional list of strings from args.

  Returns None when the key is absent. Anything other than a list of
  strings is rejected rather than silently filtered.
  """
  val: Any = args.get(key)
  if val is None:
    return None
  if not isinstance(val, list) or not all(isinstance(item, str) for item in val):
    raise ValidationError(f"Parameter {key} must be a list of strings")
  return list(val)


def require_present(args: dict, key: str) -> str:
  """Extract a required string exactly as the caller sent it.

  Only None, non-strings and "" are rejected; the value is not stripped.
  """
  val = args.get(key)
  if not isinstance(val, str) or val == "":
    raise ValidationError(f"Missing required parameter: {key}")
  return val
