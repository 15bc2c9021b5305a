"""Logging configuration for MCP server with daily rotating JSON logs."""

import logging
import logging.handlers
import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..config import Settings


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON logs."""

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "session_id": getattr(record, "session_id", None),
            "request_id": getattr(record, "request_id", None),
            "tool_name": getattr(record, "tool_name", None),
            "input_params": getattr(record, "input_params", None),
            "output_data": getattr(record, "output_data", None),
            "execution_time_ms": getattr(record, "execution_time_ms", None),
            "success": getattr(record, "success", None),
            "error": getattr(record, "error", None),
            "message": record.getMessage(),
        }

        # Remove None values to keep logs clean
        log_data = {k: v for k, v in log_data.items() if v is not None}

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_mcp_logging(log_dir: Optional[Path] = None):
    """Set up daily rotating JSON logging for MCP tools."""

    log_dir = Path(log_dir) if log_dir else Settings.from_env().log_dir
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger("mcp_tools")
    logger.setLevel(logging.INFO)

    # Re-running setup must not stack handlers on the shared logger
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(log_dir / "mcp_tools.log"),
        when="midnight",
        interval=1,
        backupCount=30,  # Keep 30 days of logs
        encoding="utf-8",
        utc=True,
    )

    # Set filename suffix for rotated files (YYYY-MM-DD)
    handler.suffix = "%Y-%m-%d"
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

    # Prevent duplicate logs from propagating to root logger
    logger.propagate = False

    return logger


# Global logger instance
mcp_logger = setup_mcp_logging()
