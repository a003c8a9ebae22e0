"""Data models for a tool call before and after validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .models import ToolDefinition


@dataclass(frozen=True)
class ToolCallRequest:
    """A tool name and the raw arguments supplied by the MCP client."""

    name: str
    arguments: Any = None


@dataclass(frozen=True)
class ValidatedCall:
    """Arguments that passed structural validation, bound to their tool.

    Only ``ToolRegistry.validate`` builds these. Absent optional fields are not
    present in ``arguments``.
    """

    tool: ToolDefinition
    arguments: Dict[str, Any] = field(default_factory=dict)
