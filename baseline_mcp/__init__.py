# Baseline MCP package
# Exposes the Baseline loan-servicing API as MCP tools

from baseline_mcp.client import BaselineClient
from baseline_mcp.config import BaselineConfig
from baseline_mcp.dispatcher import ToolDispatcher
from baseline_mcp.models import ToolDescriptor, ToolResult
from baseline_mcp.registry import TOOL_DESCRIPTORS

__all__ = [
    "BaselineClient",
    "BaselineConfig",
    "ToolDispatcher",
    "ToolDescriptor",
    "ToolResult",
    "TOOL_DESCRIPTORS",
]
