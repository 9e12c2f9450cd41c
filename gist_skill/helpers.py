"""
Shared result type and error handling helpers for the gist skill.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import RemoteAPIError, ValidationError

log = logging.getLogger("skill.gists.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


class ResultKind(str, Enum):
  SUCCESS = "success"
  ERROR = "error"
  FATAL = "fatal"


@dataclass(frozen=True)
class ToolResult:
  """Outcome of a single tool invocation.

  SUCCESS carries the serialized payload, ERROR a user-facing message the
  host relays as-is, FATAL the exception that aborted the invocation.
  """

  content: str
  kind: ResultKind = ResultKind.SUCCESS
  cause: BaseException | None = None

  @classmethod
  def text(cls, content: str) -> ToolResult:
    return cls(content=content)

  @classmethod
  def error(cls, message: str) -> ToolResult:
    return cls(content=message, kind=ResultKind.ERROR)

  @classmethod
  def fatal(cls, cause: BaseException) -> ToolResult:
    return cls(content=str(cause), kind=ResultKind.FATAL, cause=cause)

  @property
  def is_error(self) -> bool:
    return self.kind is not ResultKind.SUCCESS

  @property
  def is_fatal(self) -> bool:
    return self.kind is ResultKind.FATAL

  def raise_for_fault(self) -> None:
    """Re-raise the cause of a fatal result; no-op otherwise."""
    if self.is_fatal and self.cause is not None:
      raise self.cause


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  GIST = "GIST"
  AUTH = "AUTH"
  VALIDATION = "VALIDATION"
  API = "API"


def error_code(function_name: str, category: str | ErrorCategory | None = None) -> str:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  return f"{prefix}-ERR-{hash_val:03d}"


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  code = error_code(function_name, category)

  if isinstance(error, (ValidationError, RemoteAPIError)):
    log.warning("[GIST] %s rejected - Code: %s - %s", function_name, code, error)
    return ToolResult.error(str(error))

  log.error(
    "[GIST] Error in %s - Code: %s - %s", function_name, code, error, exc_info=error
  )
  return ToolResult.fatal(error)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_payload(data: Any) -> str:
  """Serialize a remote object graph to compact JSON, keys in received order."""
  return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
