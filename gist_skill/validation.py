"""
Input validation helpers for gist tool arguments.
"""

from __future__ import annotations

from typing import Any

from .errors import ValidationError


def req_string(args: dict[str, Any], key: str) -> str:
  """Read a required string from args."""
  v = args.get(key)
  if not isinstance(v, str) or not v.strip():
    raise ValidationError(f"Missing required parameter: {key}")
  return v.strip()


def opt_number(args: dict[str, Any], key: str, fallback: int) -> int:
  """Read an optional number from args with a fallback.

  An absent key yields the fallback; a present value that is not a number
  is rejected instead of silently ignored.
  """
  v = args.get(key)
  if v is None:
    return fallback
  if isinstance(v, bool) or not isinstance(v, (int, float)):
    raise ValidationError(f"Invalid {key}: must be a number")
  if isinstance(v, float) and not v.is_integer():
    raise ValidationError(f"Invalid {key}: must be a whole number")
  return int(v)
