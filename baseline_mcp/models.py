"""
Pydantic models for tool descriptors and tool results.
"""

import json
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

DOCUMENTATION_ANNOTATION = "baselinesoftware.com/apiDocumentation"


class TextContent(BaseModel):
    """A single text item of a tool result."""
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Uniform envelope returned by every tool: one text item, success or error."""
    content: List[TextContent]
    is_error: bool = Field(default=False, serialization_alias="isError")

    @classmethod
    def success(cls, data: Any) -> "ToolResult":
        return cls(content=[TextContent(text=json.dumps(data, indent=2, ensure_ascii=False))])

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=message)], is_error=True)

    @property
    def text(self) -> str:
        return self.content[0].text


class ToolHints(BaseModel):
    """Side-effect class of a tool, advertised to calling agents."""
    read_only: bool = False
    destructive: bool = False
    idempotent: bool = False
    open_world: bool = False
    documentation_link: Optional[str] = None


class ToolDescriptor(BaseModel):
    """Static description of one tool: name, docs, input schema and hints."""
    name: str
    title: str
    description: str
    input_schema: Dict[str, Any]
    hints: ToolHints

    def annotations(self) -> Dict[str, Any]:
        """Render hints as MCP tool annotations."""
        annotations: Dict[str, Any] = {
            "title": self.title,
            "readOnlyHint": self.hints.read_only,
            "destructiveHint": self.hints.destructive,
            "idempotentHint": self.hints.idempotent,
            "openWorldHint": self.hints.open_world,
        }
        if self.hints.documentation_link:
            annotations[DOCUMENTATION_ANNOTATION] = {"value": self.hints.documentation_link}
        return annotations

    @property
    def required_fields(self) -> List[str]:
        return list(self.input_schema.get("required", []))
