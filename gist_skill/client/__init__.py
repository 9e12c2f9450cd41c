from .gh_client import (
  CallContext,
  ClientFactory,
  GhClient,
  GistClient,
  GistResponse,
  GistScope,
  token_client_factory,
)

__all__ = [
  "CallContext",
  "ClientFactory",
  "GhClient",
  "GistClient",
  "GistResponse",
  "GistScope",
  "token_client_factory",
]
