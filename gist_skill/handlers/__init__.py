"""Handler dispatch table: maps tool names to handler functions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ..client.gh_client import CallContext, ClientFactory
from ..helpers import ToolResult
from .gist import GistHandlers

Handler = Callable[[CallContext, dict[str, Any]], Awaitable[ToolResult]]


def build_dispatch(get_client: ClientFactory) -> dict[str, Handler]:
  """Bind every gist handler to ``get_client`` and key it by tool name."""
  handlers = GistHandlers(get_client)
  return {
    "get_gist": handlers.get_gist,
    "list_gists": handlers.list_gists,
    "list_starred_gists": handlers.list_starred_gists,
  }


__all__ = ["GistHandlers", "Handler", "build_dispatch"]
