"""Export the exception hierarchy used across configuration, validation and remote calls."""

from .exceptions import (
    GumloopMCPError,
    ConfigurationError,
    ToolRegistrationError,
    UnknownToolError,
    ValidationError,
    RemoteError,
)

__all__ = [
    "GumloopMCPError",
    "ConfigurationError",
    "ToolRegistrationError",
    "UnknownToolError",
    "ValidationError",
    "RemoteError",
]
