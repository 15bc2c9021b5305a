"""Card lookups shared by the MCP tools."""

from .card import lookup_price, search_cards, summarize_prices

__all__ = ["lookup_price", "search_cards", "summarize_prices"]
