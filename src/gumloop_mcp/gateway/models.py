"""Data models describing a single exchange with the Gumloop API."""

from typing import Any, Literal

from pydantic import BaseModel

HttpMethod = Literal["GET", "POST"]


class RemoteResponse(BaseModel):
    """
    A successful response from the Gumloop API.

    Attributes:
        kind: "json" when the declared content type is JSON, otherwise "binary".
        content_type: The raw Content-Type header, empty if the server sent none.
        body: The decoded JSON document, or the untouched bytes for binary payloads.
    """

    kind: Literal["json", "binary"]
    content_type: str = ""
    body: Any = None

    @property
    def is_json(self) -> bool:
        return self.kind == "json"

    @property
    def media_type(self) -> str:
        """Content type without parameters, defaulting to a generic byte stream."""
        return self.content_type.split(";", 1)[0].strip() or "application/octet-stream"
