from typing import List, Optional

from ..models.filters import SearchFilter
from .clauses import nested_clauses, range_clause, split_negated, value_clause


def name_clause(name: Optional[str]) -> Optional[str]:
    """Quoted literal unless the name asks for exact (!) or wildcard (*) matching."""
    if not name:
        return None
    if name.startswith("!") or "*" in name:
        return f"name:{name}"
    return f'name:"{name}"'


def types_clause(types: Optional[List[str]]) -> Optional[str]:
    """Inclusion OR-group followed by an exclusion group for "-"-prefixed types."""
    positive, negative = split_negated(types)
    fragments = [
        fragment
        for fragment in (
            value_clause(positive, "types"),
            value_clause(negative, "types", negative=True),
        )
        if fragment
    ]
    return " ".join(fragments) or None


def compile_query(search: SearchFilter) -> str:
    """
    Compile a SearchFilter into a single card search query string.

    Clauses are space-joined (implicit AND) in a fixed order so the same filter
    always yields the same string. An empty filter compiles to "".
    """
    parts: List[Optional[str]] = [
        name_clause(search.name),
        value_clause(search.subtypes, "subtypes"),
    ]
    parts.extend(nested_clauses(search.legalities, "legalities"))
    parts.append(types_clause(search.types))
    parts.append(value_clause(search.evolves_to, "evolvesTo"))

    parts.append(range_clause(search.hp, "hp"))
    parts.append(range_clause(search.converted_retreat_cost, "convertedRetreatCost"))
    parts.append(range_clause(search.national_pokedex_numbers, "nationalPokedexNumbers"))
    parts.append(range_clause(search.page, "page"))
    parts.append(range_clause(search.page_size, "pageSize"))

    parts.extend(nested_clauses(search.set, "set"))
    parts.extend(nested_clauses(search.attacks, "attacks"))
    parts.extend(nested_clauses(search.weaknesses, "weaknesses"))

    if search.regulation_mark:
        parts.append(f"regulationMark:{search.regulation_mark}")

    return " ".join(part for part in parts if part)
