import asyncio

import pytest

from ptcg_mcp.analysis import lookup_price, search_cards, summarize_prices
from ptcg_mcp.client import UpstreamUnavailable
from ptcg_mcp.models import RawClause, SearchFilter, SetFilter


class FakeClient:
    """Records queries and answers with a canned response."""

    def __init__(self, data=None, total=None, error=None):
        self.data = data or []
        self.total = len(self.data) if total is None else total
        self.error = error
        self.queries = []

    async def search(self, query):
        self.queries.append(query)
        if self.error:
            raise self.error
        return {
            "data": self.data,
            "page": 1,
            "pageSize": 250,
            "count": len(self.data),
            "totalCount": self.total,
        }


TCGPLAYER = {
    "url": "https://prices.pokemontcg.io/tcgplayer/sv2-61",
    "updatedAt": "2024/05/01",
    "prices": {"holofoil": {"low": 1.0, "mid": 2.0, "high": 5.0, "market": 1.8, "directLow": 1.5}},
}

CARDMARKET = {
    "url": "https://prices.pokemontcg.io/cardmarket/sv2-61",
    "updatedAt": "2024/05/01",
    "prices": {"averageSellPrice": 1.9, "lowPrice": 0.5, "trendPrice": 2.1},
}


def card(**extra):
    base = {"id": "sv2-61", "name": "Chien-Pao ex", "set": {"id": "sv2", "name": "Paldea Evolved"}}
    base.update(extra)
    return base


# --- search -------------------------------------------------------------------
def test_search_cards_returns_total_and_cards():
    client = FakeClient(data=[card()], total=12)

    result = asyncio.run(
        search_cards(client, SearchFilter(name="chien-pao", subtypes=["EX"], types=["-Water"]))
    )

    assert result == {"total": 12, "cards": [card()]}
    assert client.queries == ['name:"chien-pao" subtypes:EX -types:Water']


def test_search_cards_with_no_matches_is_data():
    result = asyncio.run(search_cards(FakeClient(), SearchFilter(name="Missingno")))
    assert result == {"total": 0, "cards": []}


def test_search_cards_propagates_upstream_failure():
    client = FakeClient(error=UpstreamUnavailable("down", query="name:x", status_code=502))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(search_cards(client, SearchFilter(name="x")))


# --- price lookup -------------------------------------------------------------
def test_lookup_price_without_match_returns_error_payload():
    result = asyncio.run(lookup_price(FakeClient(), "Missingno"))

    assert result == {"error": "No cards found matching the criteria"}
    assert "name" not in result
    assert "tcgplayer" not in result


def test_lookup_price_uses_first_card():
    client = FakeClient(
        data=[card(tcgplayer=TCGPLAYER, cardmarket=CARDMARKET), card(name="Other")]
    )

    result = asyncio.run(lookup_price(client, "chien-pao", SetFilter(id="sv2")))

    assert client.queries == ['name:"chien-pao" set.id:sv2']
    assert result == {
        "name": "Chien-Pao ex",
        "set": "Paldea Evolved",
        "tcgplayer": TCGPLAYER,
        "cardmarket": CARDMARKET,
    }


def test_lookup_price_missing_marketplace_is_null():
    client = FakeClient(data=[card(tcgplayer=TCGPLAYER)])

    result = asyncio.run(lookup_price(client, "chien-pao", RawClause("set.id:sv2")))

    assert client.queries == ['name:"chien-pao" set.id:sv2']
    assert result["tcgplayer"] == TCGPLAYER
    assert result["cardmarket"] is None


def test_summarize_prices_drops_extra_fields():
    summary = summarize_prices(card(tcgplayer=dict(TCGPLAYER, extra="x"), hp="220"))
    assert summary["tcgplayer"] == TCGPLAYER
    assert summary["cardmarket"] is None
    assert set(summary) == {"name", "set", "tcgplayer", "cardmarket"}


def test_lookup_price_accepts_plain_string_set():
    client = FakeClient(data=[card()])

    asyncio.run(lookup_price(client, "chien-pao", "sv2"))

    assert client.queries == ['name:"chien-pao" set:sv2']
