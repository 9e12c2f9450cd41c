"""
Gist tools (3 tools).
"""

from __future__ import annotations

from mcp.types import Tool, ToolAnnotations

from ..pagination import with_pagination
from ..translations import TranslationHelper


def build_gist_tools(t: TranslationHelper) -> list[Tool]:
  return [
    Tool(
      name="get_gist",
      description=t("TOOL_GET_GIST_DESCRIPTION", "Get details of a specific gist in GitHub."),
      annotations=ToolAnnotations(
        title=t("TOOL_GET_GIST_USER_TITLE", "Get gist details"),
        readOnlyHint=True,
      ),
      inputSchema={
        "type": "object",
        "properties": {
          "gist_id": {"type": "string", "description": "The id of the gist to retrieve"},
        },
        "required": ["gist_id"],
      },
    ),
    Tool(
      name="list_gists",
      description=t("TOOL_LIST_GISTS_DESCRIPTION", "List the gists of the authenticated user."),
      annotations=ToolAnnotations(
        title=t("TOOL_LIST_GISTS_USER_TITLE", "List gists"),
        readOnlyHint=True,
      ),
      inputSchema={
        "type": "object",
        "properties": with_pagination(),
      },
    ),
    Tool(
      name="list_starred_gists",
      description=t(
        "TOOL_LIST_STARRED_GISTS_DESCRIPTION",
        "List the starred gists of the authenticated user.",
      ),
      annotations=ToolAnnotations(
        title=t("TOOL_LIST_STARRED_GISTS_USER_TITLE", "List starred gists"),
        readOnlyHint=True,
      ),
      inputSchema={
        "type": "object",
        "properties": with_pagination(),
      },
    ),
  ]
