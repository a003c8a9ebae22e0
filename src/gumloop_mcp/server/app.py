"""MCP server wiring over a stdio transport."""

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .. import __version__
from ..config import GumloopConfig
from ..gateway import GumloopClient
from ..logger import get_logger
from ..tools import build_default_registry
from .dispatcher import ToolDispatcher

logger = get_logger(__name__)

SERVER_NAME = "gumloop-mcp-server"


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Create an MCP server answering list/call tool requests from ``dispatcher``.

    Handlers are registered on the request table directly so the dispatcher's
    own validation is the only one applied to tool arguments.
    """
    server: Server = Server(SERVER_NAME, version=__version__)

    async def handle_list_tools(request: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=dispatcher.list_tools()))

    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(result)

    server.request_handlers[types.ListToolsRequest] = handle_list_tools
    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


async def serve(config: GumloopConfig) -> None:
    """Run the server on stdin/stdout until the client disconnects."""
    registry = build_default_registry()
    async with GumloopClient(config) as client:
        server = create_server(ToolDispatcher(registry, client))
        logger.info("Starting %s %s with %d tools.", SERVER_NAME, __version__, len(registry.tools))
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("Server stopped.")
