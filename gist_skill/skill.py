"""
Gist toolset. Wires tool descriptors and handlers around an injected
client factory.

Usage:
    from gist_skill.skill import GistToolset

    toolset = GistToolset(token_client_factory(config), translations)
    result = await toolset.call("get_gist", {"gist_id": "42"})
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .client.gh_client import CallContext, ClientFactory
from .handlers import build_dispatch
from .helpers import ToolResult
from .tools import build_all_tools
from .translations import TranslationHelper, null_translation_helper

if TYPE_CHECKING:
  from mcp.types import Tool


class GistToolset:
  """The set of gist tools exposed to a tool-invoking host."""

  def __init__(
    self,
    get_client: ClientFactory,
    t: TranslationHelper = null_translation_helper,
    timeout: float | None = None,
  ) -> None:
    self._tools = build_all_tools(t)
    self._dispatch = build_dispatch(get_client)
    self._timeout = timeout

  @property
  def tools(self) -> list[Tool]:
    return list(self._tools)

  @property
  def names(self) -> list[str]:
    return [tool.name for tool in self._tools]

  def context(self, request_id: str | None = None) -> CallContext:
    return CallContext(timeout=self._timeout, request_id=request_id)

  async def call(
    self,
    name: str,
    arguments: dict[str, Any] | None = None,
    ctx: CallContext | None = None,
  ) -> ToolResult:
    """Look up and execute a tool handler by name."""
    handler = self._dispatch.get(name)
    if handler is None:
      return ToolResult.error(f"Unknown tool: {name}")
    ctx = ctx or self.context()
    return await handler(ctx, arguments or {})
