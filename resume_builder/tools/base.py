"""Base tool class for resume scoring tools."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ToolResult:
    """Result from a tool execution."""
    success: bool
    output: str
    error: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def failure(cls, error: str) -> "ToolResult":
        return cls(success=False, output="", error=error)

    def to_message(self) -> str:
        if self.success:
            return self.output
        return f"Error: {self.error}\n{self.output}" if self.output else f"Error: {self.error}"


class BaseTool(ABC):
    """Base class for all tools.

    ``parameters`` describes each keyword accepted by :meth:`execute`;
    entries flagged ``"required": True`` must be supplied and non-empty.
    """

    name: str
    description: str
    parameters: Dict[str, Any]

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """Execute the tool with given parameters."""
        pass

    def missing_parameters(self, **kwargs) -> List[str]:
        """Names of required parameters absent or empty in *kwargs*."""
        return [
            name
            for name, schema in self.parameters.items()
            if schema.get("required", False) and not kwargs.get(name)
        ]
