"""
Server runner script.

Starts the HTTP gateway serving the Baseline MCP tools over SSE (/sse)
and Streamable HTTP (/mcp).

Usage:
    python run_server.py

Or with uvicorn:
    uvicorn baseline_mcp.server:build_app --factory --port 8000
"""

import logging
import os

import uvicorn
from dotenv import load_dotenv

from baseline_mcp.server import build_app

load_dotenv()

if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    app = build_app()
    print(f"Starting Baseline MCP Server on http://{host}:{port}")
    print("Press Ctrl+C to stop")
    uvicorn.run(app, host=host, port=port)
