"""
Localizable tool descriptions and titles.

A translation helper maps (key, default) to display text. Lookup order:
``GITHUB_MCP_<KEY>`` environment variable, then the translations file,
then the built-in default.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

log = logging.getLogger("skill.gists.translations")

TranslationHelper = Callable[[str, str], str]

ENV_PREFIX = "GITHUB_MCP_"


def null_translation_helper(key: str, default: str) -> str:
  return default


class Translations:
  """Translation helper that remembers every key it resolved."""

  def __init__(
    self,
    overrides: Mapping[str, str] | None = None,
    environ: Mapping[str, str] | None = None,
  ) -> None:
    self._overrides = {k.upper(): v for k, v in (overrides or {}).items()}
    self._environ = os.environ if environ is None else environ
    self._resolved: dict[str, str] = {}

  def __call__(self, key: str, default: str) -> str:
    key = key.upper()
    value = self._environ.get(ENV_PREFIX + key) or self._overrides.get(key) or default
    self._resolved[key] = value
    return value

  @property
  def resolved(self) -> dict[str, str]:
    return dict(self._resolved)

  def dump(self, path: str | Path) -> None:
    """Write the effective key map as JSON, e.g. as a starting point for a translations file."""
    Path(path).write_text(json.dumps(self._resolved, indent=2, sort_keys=True) + "\n")
    log.info("Wrote %d translation keys to %s", len(self._resolved), path)


def load_translations(path: str | Path | None) -> dict[str, str]:
  """Read a flat JSON object of key -> text. A missing file yields no overrides."""
  if not path:
    return {}
  p = Path(path)
  if not p.exists():
    log.debug("Translations file %s not found, using defaults", p)
    return {}
  data = json.loads(p.read_text())
  if not isinstance(data, dict):
    raise ValueError(f"Translations file {p} must contain a JSON object")
  return {str(k): str(v) for k, v in data.items()}
