"""HTTP gateway to the Gumloop REST API."""

from .client import GumloopClient
from .models import HttpMethod, RemoteResponse

__all__ = ["GumloopClient", "HttpMethod", "RemoteResponse"]
