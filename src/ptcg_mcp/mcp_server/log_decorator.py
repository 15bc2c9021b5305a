"""Decorator for automatically logging MCP tool calls."""

import inspect
import json
import time
from functools import wraps
from typing import Any, Callable, Optional

from fastmcp import Context

from .logging_config import mcp_logger


def _truncate(result: Any) -> Any:
    if not isinstance(result, (dict, list)):
        return result

    result_json = json.dumps(result, default=str)
    if len(result_json) <= 10000:  # Limit to 10KB
        return result
    if isinstance(result, dict):
        return {"_truncated": True, "_size": len(result_json), **{k: v for k, v in list(result.items())[:5] if k != "cards"}}
    return {"_truncated": True, "_size": len(result_json), "_length": len(result)}


def log_tool_calls(func: Optional[Callable] = None, *, name: Optional[str] = None) -> Callable:
    """
    Decorator that automatically logs async MCP tool calls with input/output.

    Use bare or as @log_tool_calls(name="...") to log under the registered tool
    name instead of the function name. Apply it below @mcp.tool so the
    registered tool is the logged one. The decorated function should accept a
    Context parameter for session tracking.
    """
    if func is None:
        return lambda f: log_tool_calls(f, name=name)

    tool_name = name or func.__name__

    sig = inspect.signature(func)
    param_names = list(sig.parameters.keys())

    @wraps(func)
    async def wrapper(*args, **kwargs):
        ctx = next((arg for arg in args if isinstance(arg, Context)), None)
        if ctx is None:
            ctx = kwargs.get("ctx")

        start_time = time.time()

        # Map positional args to parameter names, leaving the context out
        input_params = {}
        for i, arg in enumerate(args):
            if i < len(param_names) and not isinstance(arg, Context):
                input_params[param_names[i]] = arg
        for key, value in kwargs.items():
            if key != "ctx" and not isinstance(value, Context):
                input_params[key] = value

        session = {
            "session_id": ctx.session_id if ctx else None,
            "request_id": ctx.request_id if ctx else None,
        }

        mcp_logger.info(
            f"Tool {tool_name} started",
            extra={**session, "tool_name": tool_name, "input_params": input_params},
        )

        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            mcp_logger.error(
                f"Tool {tool_name} failed with error: {str(e)}",
                extra={
                    **session,
                    "tool_name": tool_name,
                    "input_params": input_params,
                    "execution_time_ms": int((time.time() - start_time) * 1000),
                    "success": False,
                    "error": str(e),
                },
            )
            raise

        mcp_logger.info(
            f"Tool {tool_name} completed successfully",
            extra={
                **session,
                "tool_name": tool_name,
                "input_params": input_params,
                "output_data": _truncate(result),
                "execution_time_ms": int((time.time() - start_time) * 1000),
                "success": True,
            },
        )
        return result

    return wrapper
