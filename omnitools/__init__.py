"""Omnitools registered with the MCP server."""
