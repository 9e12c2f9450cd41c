"""
GitHub gist tools for MCP hosts.
"""

from __future__ import annotations

from .client.gh_client import CallContext, GistScope, token_client_factory
from .config import GistSkillConfig, load_config
from .helpers import ResultKind, ToolResult
from .skill import GistToolset

__version__ = "1.0.0"

__all__ = [
  "CallContext",
  "GistScope",
  "GistSkillConfig",
  "GistToolset",
  "ResultKind",
  "ToolResult",
  "load_config",
  "token_client_factory",
]
