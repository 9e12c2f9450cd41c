from __future__ import annotations

import asyncio
from typing import Any

from gist_skill.client.gh_client import CallContext, GistResponse, GistScope
from gist_skill.pagination import PaginationParams


class FakeResponse(GistResponse):
  """GistResponse that counts closes and can fail on read."""

  def __init__(self, status: int, body: str, read_error: Exception | None = None) -> None:
    super().__init__(status, {}, body)
    self.close_calls = 0
    self._read_error = read_error

  def read(self) -> str:
    if self._read_error is not None:
      raise self._read_error
    return super().read()

  def close(self) -> None:
    self.close_calls += 1
    super().close()


class FakeClient:
  def __init__(
    self,
    response: FakeResponse | None = None,
    error: Exception | None = None,
    delay: float = 0,
  ) -> None:
    self.response = response or FakeResponse(200, "{}")
    self.error = error
    self.delay = delay
    self.calls: list[tuple[str, Any]] = []

  async def _respond(self) -> FakeResponse:
    if self.delay:
      await asyncio.sleep(self.delay)
    if self.error is not None:
      raise self.error
    return self.response

  async def get_gist(self, gist_id: str) -> FakeResponse:
    self.calls.append(("get_gist", gist_id))
    return await self._respond()

  async def list_gists(self, scope: GistScope, pagination: PaginationParams) -> FakeResponse:
    self.calls.append(("list_gists", (scope, pagination)))
    return await self._respond()


class FakeFactory:
  def __init__(self, client: FakeClient | None = None, error: Exception | None = None) -> None:
    self.client = client or FakeClient()
    self.error = error
    self.contexts: list[CallContext] = []

  async def __call__(self, ctx: CallContext) -> FakeClient:
    self.contexts.append(ctx)
    if self.error is not None:
      raise self.error
    return self.client


def run(coro):
  return asyncio.run(coro)
