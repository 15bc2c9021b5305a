"""MCP server exposing Pokemon TCG card search and price lookup tools."""
