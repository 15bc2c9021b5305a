"""
Search filter types for the Pokemon TCG card search.

Nested fields (legalities, set, attacks, weaknesses) accept either a structured
model or a pre-formatted clause. The latter is wrapped in RawClause so the
compiler can tell the two apart without inspecting strings.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Union, get_args

from pydantic import BaseModel


Subtype = Literal[
    "BREAK",
    "Baby",
    "Basic",
    "EX",
    "GX",
    "Goldenrod Game Corner",
    "Item",
    "LEGEND",
    "Level-Up",
    "MEGA",
    "Pokémon Tool",
    "Pokémon Tool F",
    "Rapid Strike",
    "Restored",
    "Rocket's Secret Machine",
    "Single Strike",
    "Special",
    "Stadium",
    "Stage 1",
    "Stage 2",
    "Supporter",
    "TAG TEAM",
    "Technical Machine",
    "V",
    "VMAX",
    "VSTAR",
    "Tera",
]

SUBTYPES = get_args(Subtype)

Legality = Literal["legal", "banned"]


class Legalities(BaseModel):
    standard: Optional[Legality] = None
    expanded: Optional[Legality] = None
    unlimited: Optional[Legality] = None


class SetFilter(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    series: Optional[str] = None


class AttackFilter(BaseModel):
    name: Optional[str] = None
    cost: Optional[List[str]] = None
    damage: Optional[str] = None
    text: Optional[str] = None


class WeaknessFilter(BaseModel):
    type: Optional[str] = None
    value: Optional[str] = None


@dataclass(frozen=True)
class RawClause:
    """A caller-formatted clause such as "set.id:sm1" or a bare value like "sm1"."""

    text: str


# Range fields take a plain value or caller-supplied range syntax ("[1 TO 3]", "!2").
RangeValue = Union[int, str]

LegalitiesFilter = Union[RawClause, Legalities]
SetValue = Union[RawClause, SetFilter]
AttacksFilter = Union[RawClause, Sequence[AttackFilter]]
WeaknessesFilter = Union[RawClause, Sequence[WeaknessFilter]]


def as_nested(value):
    """Wrap a plain string in RawClause; structured values pass through."""
    if isinstance(value, str):
        return RawClause(value)
    return value


@dataclass
class SearchFilter:
    """Structured card search parameters. Every field is optional."""

    name: Optional[str] = None
    subtypes: Optional[List[str]] = None
    legalities: Optional[LegalitiesFilter] = None
    hp: Optional[RangeValue] = None
    types: Optional[List[str]] = None
    evolves_to: Optional[List[str]] = None
    converted_retreat_cost: Optional[RangeValue] = None
    national_pokedex_numbers: Optional[RangeValue] = None
    page: Optional[RangeValue] = None
    page_size: Optional[RangeValue] = None
    set: Optional[SetValue] = None
    attacks: Optional[AttacksFilter] = None
    weaknesses: Optional[WeaknessesFilter] = None
    regulation_mark: Optional[str] = None

    def __post_init__(self):
        # Plain strings on nested fields are raw clauses
        self.legalities = as_nested(self.legalities)
        self.set = as_nested(self.set)
        self.attacks = as_nested(self.attacks)
        self.weaknesses = as_nested(self.weaknesses)
