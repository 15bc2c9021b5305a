"""Card search query compilation."""

from .compiler import compile_query

__all__ = ["compile_query"]
