"""
Pagination parameters shared by the list tools.

Values are forwarded to GitHub untouched; range checks are left to the API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .validation import opt_number

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 30


@dataclass(frozen=True)
class PaginationParams:
  page: int = DEFAULT_PAGE
  per_page: int = DEFAULT_PER_PAGE

  def as_query(self) -> dict[str, int]:
    return {"page": self.page, "per_page": self.per_page}


def with_pagination() -> dict[str, Any]:
  """JSON Schema properties for page/perPage."""
  return {
    "page": {
      "type": "number",
      "description": "Page number for pagination (min 1)",
      "minimum": 1,
    },
    "perPage": {
      "type": "number",
      "description": "Results per page for pagination (min 1, max 100)",
      "minimum": 1,
      "maximum": 100,
    },
  }


def optional_pagination_params(args: dict[str, Any]) -> PaginationParams:
  return PaginationParams(
    page=opt_number(args, "page", DEFAULT_PAGE),
    per_page=opt_number(args, "perPage", DEFAULT_PER_PAGE),
  )
