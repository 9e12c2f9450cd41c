"""Gist domain tool handlers."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Awaitable, Callable
from http import HTTPStatus
from typing import Any

from ..client.gh_client import CallContext, ClientFactory, GistClient, GistResponse, GistScope
from ..errors import EncodingError, RemoteAPIError, TransportError, ValidationError
from ..helpers import ErrorCategory, ToolResult, encode_payload, log_and_format_error
from ..pagination import optional_pagination_params
from ..validation import req_string

RemoteCall = Callable[[GistClient], Awaitable[GistResponse]]

# (function name, action used in error messages, noun used for marshal errors)
_LIST_LABELS: dict[GistScope, tuple[str, str, str]] = {
  GistScope.ALL: ("list_gists", "list gists", "gists"),
  GistScope.STARRED: ("list_starred_gists", "list starred gists", "starred gists"),
}


class GistHandlers:
  """Handlers for the gist tools, bound to a client factory."""

  def __init__(self, get_client: ClientFactory) -> None:
    self._get_client = get_client

  async def get_gist(self, ctx: CallContext, args: dict[str, Any]) -> ToolResult:
    try:
      gist_id = req_string(args, "gist_id")
    except ValidationError as e:
      return log_and_format_error("get_gist", e, ErrorCategory.VALIDATION)

    return await self._run(
      ctx, "get_gist", "get gist", "gist", lambda client: client.get_gist(gist_id)
    )

  async def list_gists(self, ctx: CallContext, args: dict[str, Any]) -> ToolResult:
    return await self._list(ctx, args, GistScope.ALL)

  async def list_starred_gists(self, ctx: CallContext, args: dict[str, Any]) -> ToolResult:
    return await self._list(ctx, args, GistScope.STARRED)

  async def _list(self, ctx: CallContext, args: dict[str, Any], scope: GistScope) -> ToolResult:
    function_name, action, noun = _LIST_LABELS[scope]
    try:
      pagination = optional_pagination_params(args)
    except ValidationError as e:
      return log_and_format_error(function_name, e, ErrorCategory.VALIDATION)

    return await self._run(
      ctx, function_name, action, noun, lambda client: client.list_gists(scope, pagination)
    )

  async def _run(
    self,
    ctx: CallContext,
    function_name: str,
    action: str,
    noun: str,
    call: RemoteCall,
  ) -> ToolResult:
    try:
      return ToolResult.text(await self._fetch(ctx, action, noun, call))
    except RemoteAPIError as e:
      return log_and_format_error(function_name, e, ErrorCategory.API)
    except (TransportError, EncodingError) as e:
      return log_and_format_error(function_name, e, ErrorCategory.GIST)

  async def _fetch(self, ctx: CallContext, action: str, noun: str, call: RemoteCall) -> str:
    try:
      client = await self._get_client(ctx)
    except Exception as e:
      raise TransportError(f"failed to get GitHub client: {e}") from e

    try:
      resp = await _with_timeout(call(client), ctx.timeout)
    except asyncio.TimeoutError as e:
      raise TransportError(f"failed to {action}: timed out after {ctx.timeout}s") from e
    except Exception as e:
      raise TransportError(f"failed to {action}: {e}") from e

    with contextlib.closing(resp):
      if resp.status != HTTPStatus.OK:
        try:
          body = resp.read()
        except Exception as e:
          raise TransportError(f"failed to read response body: {e}") from e
        raise RemoteAPIError(f"failed to {action}", resp.status, body)

      try:
        return encode_payload(resp.json())
      except (TypeError, ValueError) as e:
        raise EncodingError(f"failed to marshal {noun}: {e}") from e


async def _with_timeout(aw: Awaitable[GistResponse], timeout: float | None) -> GistResponse:
  """Await ``aw`` for at most ``timeout`` seconds.

  Expiry cancels the await only. A PyGithub call already running in a
  worker thread keeps going until the client's own request timeout.
  """
  if timeout is None:
    return await aw
  return await asyncio.wait_for(aw, timeout)
