"""
Entry point for the Google Calendar MCP server.

Run with: python -m google_calendar                      (MCP stdio mode)
          python -m google_calendar --transport http     (Streamable HTTP, port 8081)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from .config import ConfigError, load_config_file, resolve_port


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
  parser = argparse.ArgumentParser(
    prog="google-calendar-skill",
    description="Google Calendar tools over the Model Context Protocol",
  )
  parser.add_argument("--transport", choices=("stdio", "http"), default="stdio")
  parser.add_argument("--host", default="0.0.0.0", help="HTTP bind address")
  parser.add_argument("--port", default=None, help="HTTP port (default: $PORT or 8081)")
  parser.add_argument(
    "--config",
    default=None,
    help="JSON file with CLIENT_ID, CLIENT_SECRET and REFRESH_TOKEN",
  )
  parser.add_argument("--log-level", default="INFO")
  return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
  args = parse_args(argv)

  # stdout carries the stdio transport, so logs go to stderr.
  logging.basicConfig(
    level=args.log_level.upper(),
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
  )
  log = logging.getLogger("skill.google_calendar")

  load_dotenv(os.path.join(os.getcwd(), ".env"))

  from .server import create_mcp_server, load_client, run_http, run_stdio

  try:
    explicit = load_config_file(args.config)
    port = resolve_port(args.port, os.environ)
  except ConfigError as e:
    log.error("%s", e)
    sys.exit(2)

  client = load_client(explicit, os.environ)
  server = create_mcp_server(client)

  if args.transport == "http":
    run_http(server, args.host, port, log_level=args.log_level.lower())
  else:
    asyncio.run(run_stdio(server))


if __name__ == "__main__":
  main()
