from typing import Any, Dict, Optional, Union

from ..client import PtcgClient
from ..models.cards import Card, PriceSummary
from ..models.filters import SearchFilter, SetValue
from ..query import compile_query


NO_MATCH_ERROR = "No cards found matching the criteria"


async def search_cards(client: PtcgClient, search: SearchFilter) -> Dict[str, Any]:
    """
    Compile the filter, run it against the card API and return the matches.

    Returns dict with keys:
      total (totalCount reported by the API), cards (the raw card records)
    """
    query = compile_query(search)
    result = await client.search(query)
    return {"total": result.get("totalCount"), "cards": result["data"]}


def _price_block(block: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not block:
        return None
    return {
        "url": block.get("url"),
        "updatedAt": block.get("updatedAt"),
        "prices": block.get("prices"),
    }


def summarize_prices(card: Card) -> PriceSummary:
    """Reduce a card record to its name, set name and marketplace price blocks."""
    return {
        "name": card.get("name"),
        "set": (card.get("set") or {}).get("name"),
        "tcgplayer": _price_block(card.get("tcgplayer")),
        "cardmarket": _price_block(card.get("cardmarket")),
    }


async def lookup_price(
    client: PtcgClient, name: str, set: Optional[Union[SetValue, str]] = None
) -> Dict[str, Any]:
    """
    Price summary for the first card matching name (and set, if given).

    A query with no matches is an answer, not a failure: it returns
    {"error": NO_MATCH_ERROR} instead of raising.
    """
    query = compile_query(SearchFilter(name=name, set=set))
    result = await client.search(query)

    if not result["data"]:
        return {"error": NO_MATCH_ERROR}

    return summarize_prices(result["data"][0])
