from typing import Annotated, Any, Dict, Optional, Union

from fastmcp import Context
from pydantic import Field

from ..analysis.card import lookup_price
from ..client import UpstreamUnavailable
from ..models import SetFilter
from . import descriptions
from .log_decorator import log_tool_calls
from .mcp import mcp
from .utils import client, upstream_tool_error


TOOL_NAME = "pokemon-card-price"


@mcp.tool(name=TOOL_NAME, description=descriptions.PRICE_LOOKUP)
@log_tool_calls(name=TOOL_NAME)
async def card_price(
    name: Annotated[str, Field(description=descriptions.NAME)],
    set: Annotated[Optional[Union[SetFilter, str]], Field(description=descriptions.SET)] = None,
    ctx: Context = None,
) -> Dict[str, Any]:
    """
    Look up the current market price for a Pokemon card.

    Uses the first card matching the name (and set). Returns name, set and the
    tcgplayer/cardmarket price blocks (null when the card has none), or
    {"error": ...} when nothing matches.
    """
    try:
        return await lookup_price(client, name, set)
    except UpstreamUnavailable as e:
        raise upstream_tool_error(e) from e
