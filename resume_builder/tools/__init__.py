"""Resume Builder Tools - File-facing wrappers around the scoring domain."""

from typing import Dict

from .ats_scorer import ATSScorerTool
from .base import BaseTool, ToolResult
from .quality_tool import ContentQualityTool


def create_tools(workspace_dir: str = ".") -> Dict[str, BaseTool]:
    """Create all available tools keyed by tool name."""
    tools = [ATSScorerTool(workspace_dir), ContentQualityTool()]
    return {tool.name: tool for tool in tools}


__all__ = [
    "BaseTool",
    "ToolResult",
    "ATSScorerTool",
    "ContentQualityTool",
    "create_tools",
]
