"""
MCP server and HTTP gateway for the Baseline API tools.

Registers one FastMCP tool per registry descriptor and serves them over two
transports:

    /sse, /sse/message   Server-Sent Events (stream + out-of-band POSTs)
    /mcp, /message       Streamable HTTP

Every other path answers 404.

Run with: uvicorn baseline_mcp.server:build_app --factory --port 8000
"""

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.http import create_sse_app
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import PrivateAttr
from starlette.applications import Starlette
from starlette.routing import Route

from baseline_mcp.client import BaselineClient
from baseline_mcp.config import BaselineConfig
from baseline_mcp.dispatcher import ToolDispatcher
from baseline_mcp.models import ToolDescriptor
from baseline_mcp.registry import TOOL_DESCRIPTORS

logger = logging.getLogger(__name__)

SERVER_NAME = "baseline-mcp"
SERVER_INSTRUCTIONS = (
    "Tools for the Baseline loan-servicing platform: loans, tasks, borrowers, "
    "vendors and investors."
)

SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/message/"
STREAMABLE_PATH = "/mcp"
STREAMABLE_ALIAS = "/message"


class BaselineTool(Tool):
    """FastMCP tool backed by the ToolDispatcher.

    The input schema is the static one from the registry; FastMCP does not
    derive it from a function signature.
    """

    _dispatcher: ToolDispatcher = PrivateAttr()

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, dispatcher: ToolDispatcher) -> "BaselineTool":
        tool = cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema,
            annotations=ToolAnnotations.model_validate(descriptor.annotations()),
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: Dict[str, Any]) -> MCPToolResult:
        result = await self._dispatcher.dispatch(self.name, arguments)
        if result.is_error:
            # fastmcp logs the ToolError and returns it as a result with isError=true
            raise ToolError(result.text)
        return MCPToolResult(content=[TextContent(type="text", text=result.text)])


def create_mcp_server(config: BaselineConfig, client: Optional[BaselineClient] = None) -> FastMCP:
    """Build the FastMCP server with every registered tool.

    Args:
        config: Upstream settings; must carry a credential
        client: Optional pre-built upstream client; when omitted the server
            builds one and closes it when its lifespan ends

    Returns:
        A FastMCP server ready to be served

    Raises:
        ConfigurationError: no credential is configured
    """
    config.require_api_key()
    owns_client = client is None
    if owns_client:
        client = BaselineClient(config)
    dispatcher = ToolDispatcher(client, config)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            # a caller-supplied client is closed by its owner
            if owns_client:
                await client.aclose()

    mcp = FastMCP(name=SERVER_NAME, instructions=SERVER_INSTRUCTIONS, lifespan=lifespan)
    for descriptor in TOOL_DESCRIPTORS:
        mcp.add_tool(BaselineTool.from_descriptor(descriptor, dispatcher))

    logger.info("Registered %d Baseline tools against %s", len(TOOL_DESCRIPTORS), config.api_url)
    return mcp


class _Forward:
    """ASGI shim that hands a request to a sub-app, optionally under another path."""

    def __init__(self, app, path: Optional[str] = None):
        self.app = app
        self.path = path

    async def __call__(self, scope, receive, send):
        if self.path is not None:
            scope = dict(scope, path=self.path, raw_path=self.path.encode())
        await self.app(scope, receive, send)


def create_app(mcp: FastMCP, client: Optional[BaselineClient] = None) -> Starlette:
    """Compose the four-path HTTP gateway around an MCP server.

    Args:
        mcp: Server whose tools are exposed
        client: Upstream client to close on shutdown

    Returns:
        Starlette ASGI application
    """
    sse_app = create_sse_app(server=mcp, message_path=SSE_MESSAGE_PATH, sse_path=SSE_PATH)
    http_app = mcp.http_app(path=STREAMABLE_PATH)

    @asynccontextmanager
    async def lifespan(app):
        async with AsyncExitStack() as stack:
            for sub_app in (sse_app, http_app):
                await stack.enter_async_context(sub_app.router.lifespan_context(sub_app))
            try:
                yield
            finally:
                if client is not None:
                    await client.aclose()

    routes = [
        Route(SSE_PATH, endpoint=_Forward(sse_app)),
        Route(SSE_MESSAGE_PATH.rstrip("/"), endpoint=_Forward(sse_app, SSE_MESSAGE_PATH)),
        Route(SSE_MESSAGE_PATH, endpoint=_Forward(sse_app)),
        Route(STREAMABLE_PATH, endpoint=_Forward(http_app)),
        Route(STREAMABLE_ALIAS, endpoint=_Forward(http_app, STREAMABLE_PATH)),
    ]
    return Starlette(routes=routes, lifespan=lifespan)


def build_app(config: Optional[BaselineConfig] = None) -> Starlette:
    """Build the gateway from environment configuration."""
    config = config or BaselineConfig.from_env()
    config.require_api_key()
    client = BaselineClient(config)
    return create_app(create_mcp_server(config, client), client)
