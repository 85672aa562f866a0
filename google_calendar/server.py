"""
MCP server + client bootstrap.

Uses the official `mcp` Python SDK. Handles tools/list and tools/call over
either stdio or stateless Streamable HTTP.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

import uvicorn
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import CallToolRequest, CallToolResult, ServerResult, TextContent, Tool
from starlette.applications import Starlette
from starlette.routing import Mount
from starlette.types import Receive, Scope, Send

from .client.google_client import GoogleCalendarClient
from .config import resolve_credentials
from .handlers import dispatch_tool
from .state.store import set_client
from .tools import list_tools as tool_catalog

log = logging.getLogger("skill.google_calendar.server")

SERVER_NAME = "google-calendar-server"
SERVER_VERSION = "0.1.0"


def load_client(
  explicit: Mapping[str, Any] | None,
  environ: Mapping[str, str],
) -> GoogleCalendarClient:
  """Build the Calendar Client from resolved credentials and install it."""
  credentials = resolve_credentials(explicit, environ)
  if not credentials.is_complete:
    log.warning("Incomplete OAuth credentials; calendar calls will fail until configured")

  client = GoogleCalendarClient(credentials=credentials)
  set_client(client)
  return client


def create_mcp_server(client: GoogleCalendarClient | None = None) -> Server:
  """Create and configure the MCP server with all tool handlers."""
  if client is not None:
    set_client(client)

  server = Server(SERVER_NAME, version=SERVER_VERSION)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return tool_catalog()

  # Registered directly rather than through @server.call_tool() so an unknown
  # tool propagates as a JSON-RPC error instead of an isError result.
  async def call_tool(request: CallToolRequest) -> ServerResult:
    result = await dispatch_tool(request.params.name, request.params.arguments)
    return ServerResult(
      CallToolResult(
        content=[TextContent(type="text", text=result.content)],
        isError=result.is_error,
      )
    )

  server.request_handlers[CallToolRequest] = call_tool
  return server


async def run_stdio(server: Server) -> None:
  """Run the MCP server on stdio."""
  log.info("MCP server running on stdio")
  try:
    async with stdio_server() as (read_stream, write_stream):
      await server.run(read_stream, write_stream, server.create_initialization_options())
  except Exception:
    log.exception("[MCP Error] stdio transport failed")
    raise


def create_http_app(server: Server) -> Starlette:
  """Wrap the server in a stateless Streamable HTTP app mounted at /mcp."""
  session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

  async def handle_mcp(scope: Scope, receive: Receive, send: Send) -> None:
    try:
      await session_manager.handle_request(scope, receive, send)
    except Exception:
      log.exception("[MCP Error] HTTP request failed")
      raise

  @contextlib.asynccontextmanager
  async def lifespan(app: Starlette) -> AsyncIterator[None]:
    async with session_manager.run():
      yield

  return Starlette(routes=[Mount("/mcp", app=handle_mcp)], lifespan=lifespan)


def run_http(server: Server, host: str, port: int, log_level: str = "info") -> None:
  log.info("MCP server running on port %d", port)
  uvicorn.run(create_http_app(server), host=host, port=port, log_level=log_level)
