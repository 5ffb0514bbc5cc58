"""MCP server exposing the overtime calculator."""
