from .cards import Card, PriceSummary, PtcgResponse
from .filters import (
    SUBTYPES,
    AttackFilter,
    Legalities,
    RawClause,
    SearchFilter,
    SetFilter,
    Subtype,
    WeaknessFilter,
    as_nested,
)

__all__ = [
    "SUBTYPES",
    "AttackFilter",
    "Card",
    "Legalities",
    "PriceSummary",
    "PtcgResponse",
    "RawClause",
    "SearchFilter",
    "SetFilter",
    "Subtype",
    "WeaknessFilter",
    "as_nested",
]
