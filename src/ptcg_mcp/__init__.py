"""Pokemon TCG card search over MCP."""

__version__ = "1.0.0"
