"""
Error taxonomy for the gist tools.

ValidationError and RemoteAPIError are reported back to the caller as
structured tool errors. TransportError and EncodingError abort the
invocation and reach the host's own failure path.
"""

from __future__ import annotations


class GistSkillError(Exception):
  pass


class ValidationError(GistSkillError):
  """A required parameter is missing or has the wrong type."""


class RemoteAPIError(GistSkillError):
  """GitHub answered with a non-200 status."""

  def __init__(self, prefix: str, status: int, body: str) -> None:
    super().__init__(f"{prefix}: {body}")
    self.status = status
    self.body = body


class TransportError(GistSkillError):
  """Client construction or the HTTP call itself failed."""


class EncodingError(GistSkillError):
  """A successful payload could not be serialized."""


class ToolFault(GistSkillError):
  """Raised to the host when a tool invocation ends with a fatal result."""
