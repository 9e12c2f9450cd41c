from __future__ import annotations

from gist_skill.helpers import ResultKind
from gist_skill.skill import GistToolset
from gist_skill.translations import Translations

from .conftest import FakeClient, FakeFactory, FakeResponse, run


def test_tools_are_read_only_with_titles():
  toolset = GistToolset(FakeFactory())
  tools = {tool.name: tool for tool in toolset.tools}

  assert list(tools) == ["get_gist", "list_gists", "list_starred_gists"]
  for tool in tools.values():
    assert tool.annotations.readOnlyHint is True
    assert tool.annotations.title
    assert tool.description


def test_get_gist_schema_requires_id():
  toolset = GistToolset(FakeFactory())
  schema = toolset.tools[0].inputSchema

  assert schema["required"] == ["gist_id"]
  assert schema["properties"]["gist_id"]["type"] == "string"


def test_list_schemas_declare_pagination():
  toolset = GistToolset(FakeFactory())
  for tool in toolset.tools[1:]:
    assert set(tool.inputSchema["properties"]) == {"page", "perPage"}
    assert "required" not in tool.inputSchema


def test_descriptions_come_from_translations():
  t = Translations({"TOOL_GET_GIST_DESCRIPTION": "Eine Gist abrufen."}, environ={})
  toolset = GistToolset(FakeFactory(), t)

  assert toolset.tools[0].description == "Eine Gist abrufen."


def test_unknown_tool_is_structured_error():
  factory = FakeFactory()
  result = run(GistToolset(factory).call("delete_gist", {"gist_id": "1"}))

  assert result.kind is ResultKind.ERROR
  assert result.content == "Unknown tool: delete_gist"
  assert factory.contexts == []


def test_call_dispatches_with_default_context():
  factory = FakeFactory(FakeClient(FakeResponse(200, '{"id":"9"}')))
  toolset = GistToolset(factory, timeout=3)
  result = run(toolset.call("get_gist", {"gist_id": "9"}))

  assert result.content == '{"id":"9"}'
  assert factory.contexts[0].timeout == 3


def test_call_treats_missing_arguments_as_empty():
  factory = FakeFactory()
  result = run(GistToolset(factory).call("get_gist", None))

  assert result.kind is ResultKind.ERROR
  assert factory.client.calls == []
