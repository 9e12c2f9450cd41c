"""
Entry point for the gist skill server.

Run with: python -m gist_skill [--config config.json] [--export-translations out.json]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .config import load_config


def main(argv: list[str] | None = None) -> None:
  parser = argparse.ArgumentParser(prog="gist-skill", description="GitHub gist tools over MCP")
  parser.add_argument("--config", help="Path to a JSON config file")
  parser.add_argument(
    "--export-translations",
    metavar="PATH",
    help="Write the translation key map to PATH and exit",
  )
  args = parser.parse_args(argv)

  config = load_config(args.config)
  logging.basicConfig(
    level=config.log_level.upper(),
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
  )

  from .server import build_toolset, run_server

  if args.export_translations:
    _, translations = build_toolset(config)
    translations.dump(args.export_translations)
    return

  asyncio.run(run_server(config))


if __name__ == "__main__":
  main()
