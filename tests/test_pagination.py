from __future__ import annotations

import pytest

from gist_skill.errors import ValidationError
from gist_skill.pagination import PaginationParams, optional_pagination_params, with_pagination


def test_schema_properties():
  props = with_pagination()

  assert props["page"]["minimum"] == 1
  assert props["perPage"]["maximum"] == 100


def test_defaults_and_forwarding():
  assert optional_pagination_params({}) == PaginationParams(page=1, per_page=30)
  assert optional_pagination_params({"page": 4, "perPage": 100.0}) == PaginationParams(4, 100)


def test_values_are_not_clamped():
  params = optional_pagination_params({"page": 0, "perPage": 500})

  assert params.as_query() == {"page": 0, "per_page": 500}


@pytest.mark.parametrize("value", ["1", True, 2.5, [1]])
def test_non_numeric_rejected(value):
  with pytest.raises(ValidationError, match="page"):
    optional_pagination_params({"page": value})
