from fastmcp.exceptions import ToolError

from ..client import PtcgClient, UpstreamUnavailable
from ..config import Settings


# Shared card API client for all tools
client = PtcgClient.from_settings(Settings.from_env())


def upstream_tool_error(e: UpstreamUnavailable) -> ToolError:
    """Turn a card API failure into an error result for the calling model."""
    detail = f" (HTTP {e.status_code})" if e.status_code else ""
    return ToolError(f"Pokemon TCG API unavailable{detail}: {e}")
