"""
GitHub client wrapper using PyGithub.

PyGithub is synchronous, so all calls are wrapped with asyncio.to_thread
to keep the skill's async contract intact. Gist calls go through the
requester directly so the handler sees the raw status and body instead
of PyGithub's exception mapping.
"""

from __future__ import annotations

import asyncio
import contextlib
import functools
import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, TypeVar
from urllib.parse import quote

import requests
from github import Auth, Github, GithubException

from ..pagination import PaginationParams

if TYPE_CHECKING:
  from ..config import GistSkillConfig

log = logging.getLogger("skill.gists.client")

T = TypeVar("T")

ACCEPT_HEADER = {"Accept": "application/vnd.github+json"}


async def _run_sync(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
  """Run a synchronous PyGithub call in a thread."""
  return await asyncio.to_thread(functools.partial(fn, *args, **kwargs))


# ---------------------------------------------------------------------------
# Call context and scopes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CallContext:
  """Per-invocation context handed to the client factory."""

  timeout: float | None = None
  request_id: str | None = None


class GistScope(str, Enum):
  ALL = "all"
  STARRED = "starred"

  @property
  def path(self) -> str:
    return "/gists/starred" if self is GistScope.STARRED else "/gists"


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class GistResponse:
  """Buffered HTTP response. Must be closed once the caller is done with it."""

  def __init__(self, status: int, headers: dict[str, Any] | None, body: str | None) -> None:
    self.status = status
    self.headers = headers or {}
    self._body = body or ""
    self._closed = False

  @property
  def closed(self) -> bool:
    return self._closed

  def read(self) -> str:
    if self._closed:
      raise ValueError("read from closed response")
    return self._body

  def json(self) -> Any:
    return json.loads(self.read())

  def close(self) -> None:
    self._body = ""
    self._closed = True

  def __enter__(self) -> GistResponse:
    return self

  def __exit__(self, *exc: object) -> None:
    self.close()


class GistClient(Protocol):
  """What the handlers need from a remote client."""

  async def get_gist(self, gist_id: str) -> GistResponse: ...

  async def list_gists(self, scope: GistScope, pagination: PaginationParams) -> GistResponse: ...


ClientFactory = Callable[[CallContext], Awaitable[GistClient]]


# ---------------------------------------------------------------------------
# PyGithub-backed client
# ---------------------------------------------------------------------------


class GhClient:
  """Async-compatible wrapper around PyGithub."""

  def __init__(self, gh: Github) -> None:
    self._gh: Github | None = gh
    self._is_authed: bool = False
    self._username: str = ""

  @classmethod
  def from_token(cls, token: str, base_url: str, timeout: float | None = None) -> GhClient:
    """Build a client authenticated with a Personal Access Token.

    ``timeout`` (seconds, fractions allowed) is PyGithub's own request timeout.
    It is what finally stops a request whose worker thread outlived an
    ``asyncio.wait_for`` deadline in the handler.
    """
    kwargs: dict[str, Any] = {"auth": Auth.Token(token), "base_url": base_url}
    if timeout:
      kwargs["timeout"] = timeout
    client = cls(Github(**kwargs))
    log.info("PyGithub client initialized for %s", base_url)
    return client

  @property
  def gh(self) -> Github:
    if not self._gh:
      raise RuntimeError("GhClient is closed")
    return self._gh

  @property
  def is_authed(self) -> bool:
    return self._is_authed

  @property
  def username(self) -> str:
    return self._username

  async def check_auth(self) -> bool:
    """Verify authentication by fetching the authenticated user."""
    try:
      self._username = await _run_sync(lambda: self.gh.get_user().login)
      self._is_authed = True
      log.info("Authenticated as %s", self._username)
      return True
    except (GithubException, requests.RequestException) as exc:
      log.error("Auth check failed: %s", exc, exc_info=exc)
      self._is_authed = False
      return False

  async def get_gist(self, gist_id: str) -> GistResponse:
    return await self._request("GET", f"/gists/{quote(gist_id, safe='')}")

  async def list_gists(self, scope: GistScope, pagination: PaginationParams) -> GistResponse:
    return await self._request("GET", scope.path, parameters=pagination.as_query())

  async def _request(
    self, verb: str, url: str, parameters: dict[str, Any] | None = None
  ) -> GistResponse:
    requester = self.gh._Github__requester
    status, headers, body = await _run_sync(
      requester.requestJson, verb, url, parameters=parameters, headers=dict(ACCEPT_HEADER)
    )
    log.debug("%s %s -> %s", verb, url, status)
    return GistResponse(status, headers, body)

  async def close(self) -> None:
    """Close the underlying connection."""
    if self._gh:
      with contextlib.suppress(Exception):
        await _run_sync(self._gh.close)
      self._gh = None
      self._is_authed = False


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def token_client_factory(config: GistSkillConfig) -> ClientFactory:
  """Return a factory that hands out one shared token-authenticated client.

  The client is built on first use so a missing token only fails the
  invocations that need GitHub, not server start-up.
  """
  client: GhClient | None = None

  async def get_client(ctx: CallContext) -> GistClient:
    nonlocal client
    if not config.token:
      raise RuntimeError("no GitHub token configured (set GITHUB_TOKEN)")
    if client is None:
      client = GhClient.from_token(config.token, config.base_url, config.timeout)
    return client

  return get_client
