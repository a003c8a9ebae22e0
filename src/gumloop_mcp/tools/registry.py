"""Tool registry: definitions, advertised schemas and structural validation."""

from typing import Any, Dict, List, Sequence, Type

import jsonref  # type: ignore
from mcp import types
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..exceptions import ToolRegistrationError, UnknownToolError, ValidationError
from ..gateway.models import HttpMethod
from ..logger import get_logger
from .call_protocol import ToolCallRequest, ValidatedCall
from .models import ResultMapper, ToolDefinition
from .schema import OneOf, SchemaValidator, check_constraints

logger = get_logger(__name__)

_QUERY_SAFE_TYPES = {"string", "integer", "number", "boolean"}


class ToolRegistry:
    """
    A central registry of the tools this server exposes.

    Maps tool names to their definitions. Validation of incoming calls runs
    here so no request leaves the process with malformed arguments.
    """

    def __init__(self) -> None:
        """Initialize an empty ToolRegistry."""
        self.tools: Dict[str, ToolDefinition] = {}

    def register(self, tool: ToolDefinition) -> None:
        """Register a tool definition.

        Args:
            tool: The definition to add.

        Raises:
            ToolRegistrationError: If a tool with the same name already exists, or a
                GET endpoint declares fields that cannot travel in a query string.
        """
        if tool.name in self.tools:
            msg = f"Tool '{tool.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        if tool.method == "GET":
            self._assert_query_safe(tool)

        self.tools[tool.name] = tool
        logger.debug(f"Registered tool: '{tool.name}' -> {tool.method} {tool.path}")

    def register_endpoint(
        self,
        name: str,
        description: str,
        args_model: Type[BaseModel],
        method: HttpMethod,
        path: str,
        result_mapper: ResultMapper,
        constraints: Sequence[OneOf] = (),
    ) -> ToolDefinition:
        """Build a definition for a remote endpoint and register it.

        The advertised input schema is generated from ``args_model``.

        Returns:
            The registered definition.
        """
        tool = ToolDefinition(
            name=name,
            description=description,
            input_schema=self.build_input_schema(args_model),
            args_model=args_model,
            constraints=tuple(constraints),
            method=method,
            path=path,
            result_mapper=result_mapper,
        )
        self.register(tool)
        return tool

    def get(self, tool_name: str) -> ToolDefinition:
        """Look up a definition by name.

        Raises:
            UnknownToolError: If the name is not registered.
        """
        try:
            return self.tools[tool_name]
        except KeyError:
            raise UnknownToolError(tool_name) from None

    def list_tools(self) -> List[types.Tool]:
        """Returns every definition in the shape advertised to MCP clients."""
        return [tool.to_mcp_tool() for tool in self.tools.values()]

    def validate(self, request: ToolCallRequest) -> ValidatedCall:
        """Check a call's arguments structurally.

        Required fields and their JSON types are checked by the tool's argument
        model; either/or rules by its constraints. Field values are not checked
        against the remote platform.

        Args:
            request: Tool name and raw arguments.

        Returns:
            The validated call. Only fields the caller supplied are present.

        Raises:
            UnknownToolError: If the tool is not registered.
            ValidationError: Naming the violated constraint.
        """
        tool = self.get(request.name)

        raw = request.arguments if request.arguments is not None else {}
        if not isinstance(raw, dict):
            raise ValidationError(f"{tool.name}: arguments must be an object", tool_name=tool.name)

        # null is a wrong type for every field; omit the key to leave a field out
        nulls = [key for key, value in raw.items() if value is None and key in tool.args_model.model_fields]
        if nulls:
            problems = "; ".join(f"field '{key}' must not be null" for key in nulls)
            raise ValidationError(f"{tool.name}: {problems}", tool_name=tool.name)

        try:
            parsed = tool.args_model.model_validate(raw)
        except PydanticValidationError as e:
            raise ValidationError(f"{tool.name}: {self._describe_errors(e)}", tool_name=tool.name) from e

        arguments = parsed.model_dump(exclude_none=True)
        check_constraints(tool.name, arguments, tool.constraints)
        return ValidatedCall(tool=tool, arguments=arguments)

    @staticmethod
    def build_input_schema(args_model: Type[BaseModel]) -> Dict[str, Any]:
        """Generate the JSON schema advertised for an argument model.

        Raises:
            ToolRegistrationError: If the model is self-referencing.
        """
        raw_schema = args_model.model_json_schema()
        SchemaValidator.assert_no_recursive_refs(raw_schema)

        # proxies=False ensures we get a plain dict back, not JsonRef objects
        resolved = jsonref.replace_refs(raw_schema, proxies=False)
        schema: Dict[str, Any] = SchemaValidator.sanitize_schema(resolved)
        schema.setdefault("properties", {})
        return schema

    @staticmethod
    def _assert_query_safe(tool: ToolDefinition) -> None:
        for field_name, prop in tool.input_schema.get("properties", {}).items():
            if prop.get("type") not in _QUERY_SAFE_TYPES:
                msg = f"Tool '{tool.name}' uses GET but field '{field_name}' is not a scalar."
                logger.error(msg)
                raise ToolRegistrationError(msg)

    @staticmethod
    def _describe_errors(error: PydanticValidationError) -> str:
        problems = []
        for detail in error.errors():
            location = ".".join(str(part) for part in detail["loc"])
            if detail["type"] == "missing":
                problems.append(f"missing required field '{location}'")
            else:
                problems.append(f"field '{location}': {detail['msg']}")
        return "; ".join(problems)
