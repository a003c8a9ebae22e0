from .models import ToolDefinition, ResultMapper
from .call_protocol import ToolCallRequest, ValidatedCall
from .registry import ToolRegistry
from .catalog import build_default_registry
from .schema import SchemaValidator, OneOf, check_constraints
from .results import json_result, file_download_result, text_result, error_result

__all__ = [
    "ToolDefinition",
    "ResultMapper",
    "ToolCallRequest",
    "ValidatedCall",
    "ToolRegistry",
    "build_default_registry",
    "SchemaValidator",
    "OneOf",
    "check_constraints",
    "json_result",
    "file_download_result",
    "text_result",
    "error_result",
]
