"""Routes MCP tool calls through validation, the gateway and result mapping."""

from typing import Any, List, Optional

import httpx
from mcp import types

from ..exceptions import GumloopMCPError, UnknownToolError, ValidationError
from ..gateway import GumloopClient
from ..logger import get_logger
from ..tools import ToolCallRequest, ToolRegistry, error_result

logger = get_logger(__name__)


class ToolDispatcher:
    """
    Handles "list tools" and "call tool" requests.

    ``call_tool`` never raises: every failure becomes a result with
    ``isError`` set, so one bad call cannot stop the server loop.
    """

    def __init__(self, registry: ToolRegistry, client: GumloopClient):
        self.registry = registry
        self.client = client

    def list_tools(self) -> List[types.Tool]:
        return self.registry.list_tools()

    async def call_tool(self, name: str, arguments: Optional[Any] = None) -> types.CallToolResult:
        """Validate, forward and map a single tool call.

        Args:
            name: Tool name as sent by the client.
            arguments: Raw argument mapping.

        Returns:
            The tool result, error-flagged on any failure.
        """
        logger.info("Tool call: '%s'", name)
        try:
            call = self.registry.validate(ToolCallRequest(name=name, arguments=arguments))
            response = await self.client.call(call.tool, call.arguments)
            return call.tool.result_mapper(response, call.arguments)
        except UnknownToolError as e:
            logger.warning(str(e))
            return error_result(str(e))
        except ValidationError as e:
            logger.warning("Rejected call to '%s': %s", name, e)
            return error_result(f"Invalid arguments: {e}")
        except (GumloopMCPError, httpx.HTTPError) as e:
            logger.error("Tool '%s' failed: %s", name, e)
            return error_result(f"API error: {e}")
        except Exception as e:
            logger.error("Unexpected error in tool '%s': %s", name, e, exc_info=True)
            return error_result(f"API error: {str(e) or type(e).__name__}")
