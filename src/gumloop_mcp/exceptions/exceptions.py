"""
Custom exception classes for the Gumloop MCP server.

This module defines the hierarchy of exceptions raised while loading
configuration, building the tool registry, validating tool arguments and
talking to the Gumloop API.
"""

from typing import Optional


class GumloopMCPError(Exception):
    """Base exception for all server errors."""

    pass


class ConfigurationError(GumloopMCPError):
    """Raised when required configuration is missing or malformed."""

    pass


class ToolRegistrationError(GumloopMCPError):
    """Raised when a tool definition cannot be registered."""

    pass


class UnknownToolError(GumloopMCPError):
    """Raised when a requested tool is not found in the registry."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ValidationError(GumloopMCPError):
    """Raised when tool arguments fail structural validation."""

    def __init__(self, message: str, tool_name: Optional[str] = None):
        super().__init__(message)
        self.tool_name = tool_name


class RemoteError(GumloopMCPError):
    """Raised when the Gumloop API answers with a failing HTTP status."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"Gumloop API request failed: {status_code} - {reason}")
        self.status_code = status_code
        self.reason = reason
