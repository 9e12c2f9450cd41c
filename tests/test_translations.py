from __future__ import annotations

import json

import pytest

from gist_skill.translations import Translations, load_translations, null_translation_helper


def test_null_helper_returns_default():
  assert null_translation_helper("ANY_KEY", "fallback") == "fallback"


def test_lookup_order():
  t = Translations(
    {"tool_a": "from file", "TOOL_B": "from file"},
    environ={"GITHUB_MCP_TOOL_A": "from env"},
  )

  assert t("tool_a", "default") == "from env"
  assert t("TOOL_B", "default") == "from file"
  assert t("TOOL_C", "default") == "default"


def test_dump_writes_resolved_keys(tmp_path):
  t = Translations(environ={})
  t("TOOL_GET_GIST_DESCRIPTION", "Get details of a specific gist in GitHub.")
  out = tmp_path / "translations.json"
  t.dump(out)

  assert json.loads(out.read_text()) == {
    "TOOL_GET_GIST_DESCRIPTION": "Get details of a specific gist in GitHub."
  }


def test_load_translations(tmp_path):
  path = tmp_path / "t.json"
  path.write_text('{"TOOL_X": "x"}')

  assert load_translations(path) == {"TOOL_X": "x"}
  assert load_translations(tmp_path / "missing.json") == {}
  assert load_translations(None) == {}


def test_load_translations_rejects_non_object(tmp_path):
  path = tmp_path / "t.json"
  path.write_text("[1, 2]")

  with pytest.raises(ValueError):
    load_translations(path)
