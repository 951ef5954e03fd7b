"""devmatrix MCP server: device/probe compatibility and build target reports."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from devmatrix.tools import report as report_tools

mcp = FastMCP("devmatrix")

report_tools.register_tools(mcp)
