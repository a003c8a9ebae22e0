"""Gumloop MCP Server - exposes the Gumloop automation API as Model Context Protocol tools."""

__version__ = "1.0.0"

from .config import GumloopConfig, load_config
from .exceptions import (
    GumloopMCPError,
    ConfigurationError,
    ToolRegistrationError,
    UnknownToolError,
    ValidationError,
    RemoteError,
)
from .gateway import GumloopClient, RemoteResponse
from .logger import get_logger, setup_logging
from .tools import ToolDefinition, ToolRegistry, build_default_registry
from .server import ToolDispatcher, create_server, serve

__all__ = [
    "__version__",
    "GumloopConfig",
    "load_config",
    "GumloopMCPError",
    "ConfigurationError",
    "ToolRegistrationError",
    "UnknownToolError",
    "ValidationError",
    "RemoteError",
    "GumloopClient",
    "RemoteResponse",
    "get_logger",
    "setup_logging",
    "ToolDefinition",
    "ToolRegistry",
    "build_default_registry",
    "ToolDispatcher",
    "create_server",
    "serve",
]
