"""Mappers turning a Gumloop API response into an MCP tool result."""

import base64
import json
from typing import Any, Callable, List, Mapping, Union
from urllib.parse import quote

from mcp import types

from ..gateway.models import RemoteResponse
from .models import ResultMapper

Content = Union[types.TextContent, types.EmbeddedResource]


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)], isError=is_error)


def error_result(message: str) -> types.CallToolResult:
    return text_result(message, is_error=True)


def _blob(uri: str, response: RemoteResponse) -> types.EmbeddedResource:
    return types.EmbeddedResource(
        type="resource",
        resource=types.BlobResourceContents(
            uri=uri,  # type: ignore[arg-type]
            mimeType=response.media_type,
            blob=base64.b64encode(response.body).decode("ascii"),
        ),
    )


def json_result(response: RemoteResponse, arguments: Mapping[str, Any]) -> types.CallToolResult:
    """Render a JSON document as indented text.

    Binary payloads from endpoints that normally answer with JSON are attached
    as an embedded blob instead of being dropped.
    """
    if response.is_json:
        return text_result(json.dumps(response.body, indent=2, ensure_ascii=False))

    content: List[Content] = [
        types.TextContent(type="text", text=f"Received {len(response.body)} bytes of {response.media_type}."),
        _blob("gumloop://responses/binary", response),
    ]
    return types.CallToolResult(content=content)


def file_download_result(
    uri_for: Callable[[Mapping[str, Any]], str], describe: Callable[[Mapping[str, Any]], str]
) -> ResultMapper:
    """Build a mapper for download endpoints.

    The downloaded bytes are returned as an ``EmbeddedResource`` holding a
    base64 blob, preceded by a short text confirmation.

    Args:
        uri_for: Builds the resource URI from the validated arguments.
        describe: Builds the human readable subject, e.g. "File 'a.txt'".

    Returns:
        A result mapper usable in a ``ToolDefinition``.
    """

    def mapper(response: RemoteResponse, arguments: Mapping[str, Any]) -> types.CallToolResult:
        if response.is_json:
            return json_result(response, arguments)

        summary = (
            f"{describe(arguments)} downloaded successfully ({len(response.body)} bytes, {response.media_type}). "
            "The content is attached as an embedded base64 resource."
        )
        content: List[Content] = [types.TextContent(type="text", text=summary), _blob(uri_for(arguments), response)]
        return types.CallToolResult(content=content)

    return mapper


def run_file_uri(arguments: Mapping[str, Any]) -> str:
    return f"gumloop://runs/{quote(arguments['run_id'], safe='')}/files/{quote(arguments['file_name'], safe='')}"


def run_archive_uri(arguments: Mapping[str, Any]) -> str:
    return f"gumloop://runs/{quote(arguments['run_id'], safe='')}/files.zip"
