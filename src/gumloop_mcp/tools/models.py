from typing import Any, Callable, Dict, Mapping, Tuple, Type

from mcp import types
from pydantic import BaseModel, ConfigDict

from ..gateway.models import HttpMethod, RemoteResponse
from .schema import OneOf

ResultMapper = Callable[[RemoteResponse, Mapping[str, Any]], types.CallToolResult]


class ToolDefinition(BaseModel):
    """
    Represents one Gumloop endpoint exposed as an MCP tool.

    A definition bundles everything needed to dispatch a call: the argument
    model and constraints that validate it, the (method, path) pair that
    builds the request, and the mapper that turns the response into a result.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        input_schema: JSON schema advertised to MCP clients, generated from ``args_model``.
        args_model: Pydantic model checking required fields and structural types.
        constraints: Cross-field rules such as ``OneOf("user_id", "project_id")``.
        method: HTTP method of the bound endpoint.
        path: Endpoint path relative to the API base URL.
        result_mapper: Converts the remote response into a ``CallToolResult``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    input_schema: Dict[str, Any]
    args_model: Type[BaseModel]
    constraints: Tuple[OneOf, ...] = ()
    method: HttpMethod
    path: str
    result_mapper: ResultMapper

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=self.input_schema)
