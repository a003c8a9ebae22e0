from typing import Any, Dict, Set

from ...exceptions import ToolRegistrationError
from ...logger import get_logger

logger = get_logger(__name__)

_DROPPED_KEYS = ("$defs", "$schema", "title")


class SchemaValidator:
    """
    Checks and cleans the schemas pydantic generates for tool argument models.
    """

    @staticmethod
    def assert_no_recursive_refs(schema: Dict[str, Any]) -> None:
        """
        Fails if a ``$defs`` entry reaches itself through ``$ref`` links.

        Args:
            schema: Output of ``model_json_schema()``.

        Raises:
            ToolRegistrationError: If a model refers back to itself.
        """
        defs = schema.get("$defs", {})

        def walk(node: Any, seen: Set[str]) -> None:
            if isinstance(node, list):
                for item in node:
                    walk(item, seen)
                return
            if not isinstance(node, dict):
                return

            ref = node.get("$ref")
            if ref is None:
                for value in node.values():
                    walk(value, seen)
                return

            name = ref.rsplit("/", 1)[-1]
            if name in seen:
                msg = f"Recursive structure detected: {ref}. Tool input schemas must be trees."
                logger.error(msg)
                raise ToolRegistrationError(msg)
            walk(defs.get(name), seen | {name})

        walk(schema, set())

    @staticmethod
    def sanitize_schema(schema: Any) -> Any:
        """
        Returns a copy of ``schema`` fit for advertising to MCP clients.

        Titles and ``$defs`` are removed. ``Optional[X]`` fields, which pydantic
        renders as ``anyOf: [X, null]`` with a null default, become plain ``X``
        keeping the field description.

        Args:
            schema: A schema whose ``$ref``s have already been resolved.

        Returns:
            The cleaned schema.
        """
        if not isinstance(schema, dict):
            return schema

        variants = [v for v in schema.get("anyOf", []) if v.get("type") != "null"]
        if "anyOf" in schema and len(variants) == 1:
            collapsed = dict(variants[0])
            if "description" in schema:
                collapsed["description"] = schema["description"]
            return SchemaValidator.sanitize_schema(collapsed)

        cleaned: Dict[str, Any] = {}
        for key, value in schema.items():
            if key in _DROPPED_KEYS:
                continue
            if key == "properties":
                cleaned[key] = {name: SchemaValidator.sanitize_schema(prop) for name, prop in value.items()}
            elif isinstance(value, list):
                cleaned[key] = [SchemaValidator.sanitize_schema(item) for item in value]
            else:
                cleaned[key] = SchemaValidator.sanitize_schema(value)
        return cleaned
