"""
MCP server exposing the Baseline loan-servicing API as tools.

Run with: fastmcp run mcp_server.py --transport sse --port 8000
"""

from baseline_mcp.config import BaselineConfig
from baseline_mcp.server import create_mcp_server

# Refuses to start without BASELINE_API_KEY
mcp = create_mcp_server(BaselineConfig.from_env())

if __name__ == "__main__":
    mcp.run()
