"""Shapes of the card API responses. Only used for annotation; payloads stay plain dicts."""

from typing import Dict, List, Optional, TypedDict


class Attack(TypedDict, total=False):
    name: str
    cost: List[str]
    damage: str
    text: str


class Weakness(TypedDict, total=False):
    type: str
    value: str


class CardSet(TypedDict, total=False):
    id: str
    name: str
    series: str


class CardImages(TypedDict, total=False):
    small: str
    large: str


class TcgplayerPrice(TypedDict, total=False):
    low: float
    mid: float
    high: float
    market: float
    directLow: float


class TcgplayerBlock(TypedDict, total=False):
    url: str
    updatedAt: str
    # holofoil / normal / reverseHolofoil
    prices: Dict[str, TcgplayerPrice]


class CardmarketBlock(TypedDict, total=False):
    url: str
    updatedAt: str
    # averageSellPrice, lowPrice, trendPrice, avg1/avg7/avg30 and reverse-holo variants
    prices: Dict[str, float]


class Card(TypedDict, total=False):
    id: str
    name: str
    supertype: str
    subtypes: List[str]
    hp: str
    types: List[str]
    evolvesTo: List[str]
    attacks: List[Attack]
    weaknesses: List[Weakness]
    set: CardSet
    images: CardImages
    regulationMark: str
    tcgplayer: TcgplayerBlock
    cardmarket: CardmarketBlock


class PtcgResponse(TypedDict):
    data: List[Card]
    page: int
    pageSize: int
    count: int
    totalCount: int


class PriceBlock(TypedDict):
    url: Optional[str]
    updatedAt: Optional[str]
    prices: Optional[Dict]


class PriceSummary(TypedDict):
    name: str
    set: Optional[str]
    tcgplayer: Optional[PriceBlock]
    cardmarket: Optional[PriceBlock]
