"""
MCP server + start-up wiring.

Handles tools/list and tools/call over stdio.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from .client.gh_client import ClientFactory, GhClient, token_client_factory
from .config import GistSkillConfig
from .errors import ToolFault
from .helpers import ToolResult
from .skill import GistToolset
from .translations import Translations, load_translations

log = logging.getLogger("skill.gists.server")


def to_call_tool_result(result: ToolResult) -> CallToolResult:
  """Convert a handler result for the MCP wire.

  Structured errors are returned with ``isError`` set so the model sees the
  message; fatal results raise ``ToolFault`` for the host's error path.
  """
  if result.is_fatal:
    raise ToolFault(result.content) from result.cause
  return CallToolResult(
    content=[TextContent(type="text", text=result.content)],
    isError=result.is_error,
  )


def create_mcp_server(toolset: GistToolset, name: str = "gist-skill") -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server: Server = Server(name)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return toolset.tools

  @server.call_tool()
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    request_id: str | None = None
    try:
      request_id = str(server.request_context.request_id)
    except LookupError:
      pass
    result = await toolset.call(name, arguments or {}, toolset.context(request_id))
    return to_call_tool_result(result)

  return server


def build_toolset(
  config: GistSkillConfig,
  get_client: ClientFactory | None = None,
) -> tuple[GistToolset, Translations]:
  translations = Translations(load_translations(config.translations_file))
  toolset = GistToolset(
    get_client or token_client_factory(config),
    translations,
    timeout=config.timeout,
  )
  return toolset, translations


async def check_token(config: GistSkillConfig) -> bool:
  """Log who the configured token authenticates as; False when it does not."""
  if not config.token:
    log.error("No GitHub token available, gist tools will fail until one is set")
    return False
  client = GhClient.from_token(config.token, config.base_url, config.timeout)
  try:
    authed = await client.check_auth()
  finally:
    await client.close()
  if authed:
    log.info("Gist skill loaded, authenticated as %s", client.username)
  else:
    log.error("GitHub authentication failed")
  return authed


async def run_server(config: GistSkillConfig) -> None:
  """Run the MCP server on stdio."""
  await check_token(config)
  toolset, _ = build_toolset(config)
  server = create_mcp_server(toolset)
  log.info("Serving %d tools: %s", len(toolset.names), ", ".join(toolset.names))
  async with stdio_server() as (read_stream, write_stream):
    await server.run(read_stream, write_stream, server.create_initialization_options())
