"""
Skill configuration.

Values come from an optional JSON file and are overridden by environment
variables, mirroring how the skill reads ``config.json`` and
``GITHUB_TOKEN`` at load time.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger("skill.gists.config")

DEFAULT_BASE_URL = "https://api.github.com"

_ENV_FIELDS = {
  "GITHUB_TOKEN": "token",
  "GITHUB_API_URL": "base_url",
  "GITHUB_TIMEOUT": "timeout",
  "GITHUB_MCP_TRANSLATIONS": "translations_file",
  "LOG_LEVEL": "log_level",
}


class GistSkillConfig(BaseModel):
  """Settings for the gist tools server."""

  model_config = ConfigDict(frozen=True, extra="ignore")

  token: str = Field(default="", description="GitHub Personal Access Token")
  base_url: str = Field(default=DEFAULT_BASE_URL, description="GitHub REST API root")
  timeout: float | None = Field(
    default=30.0, gt=0, description="Per-call timeout in seconds; null disables it"
  )
  translations_file: str | None = Field(
    default=None, description="JSON file with description/title overrides"
  )
  log_level: str = Field(default="INFO")


def load_config(
  path: str | Path | None = None,
  environ: Mapping[str, str] | None = None,
) -> GistSkillConfig:
  """Build a config from ``path`` (if given) with environment overrides."""
  env = os.environ if environ is None else environ
  data: dict[str, Any] = {}

  if path:
    p = Path(path)
    if p.exists():
      raw = json.loads(p.read_text())
      if isinstance(raw, dict):
        data.update(raw)
      else:
        log.warning("Ignoring %s: expected a JSON object", p)
    else:
      log.warning("Config file %s not found", p)

  for var, field_name in _ENV_FIELDS.items():
    value = env.get(var, "").strip()
    if value:
      data[field_name] = value

  return GistSkillConfig.model_validate(data)
