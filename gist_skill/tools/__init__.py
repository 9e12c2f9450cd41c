"""
Gist tool definitions.

Descriptors are built once at start-up from a translation helper.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..translations import TranslationHelper, null_translation_helper
from .gist import build_gist_tools

if TYPE_CHECKING:
  from mcp.types import Tool


def build_all_tools(t: TranslationHelper = null_translation_helper) -> list[Tool]:
  return [*build_gist_tools(t)]


__all__ = ["build_all_tools", "build_gist_tools"]
