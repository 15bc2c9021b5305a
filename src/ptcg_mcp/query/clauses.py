"""Clause builders for the card search query grammar (Lucene-style, space means AND)."""

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel

from ..models.filters import RawClause


def value_clause(values: Optional[List[str]], field: str, negative: bool = False) -> Optional[str]:
    """
    OR-group of `field:value` clauses, one per value.

    Values containing a dot are already nested-field expressions and pass through.
    Values starting with "!" are exact matches and are never negated.
    A single alternative is returned bare; two or more are parenthesized.
    """
    if not values:
        return None

    alternatives = []
    for value in values:
        if "." in value:
            alternatives.append(value)
        elif value.startswith("!"):
            alternatives.append(f"{field}:{value}")
        elif negative:
            alternatives.append(f"-{field}:{value}")
        else:
            alternatives.append(f"{field}:{value}")

    query = " OR ".join(alternatives)
    return query if len(alternatives) == 1 else f"({query})"


def split_negated(values: Optional[List[str]]) -> Tuple[List[str], List[str]]:
    """Split ["Fire", "-Water"] into (["Fire"], ["Water"])."""
    positive: List[str] = []
    negative: List[str] = []
    for value in values or []:
        if value.startswith("-"):
            negative.append(value[1:])
        else:
            positive.append(value)
    return positive, negative


def _defined_items(obj: Any) -> Iterable[Tuple[str, Any]]:
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(exclude_none=True)
    if isinstance(obj, Mapping):
        return [(k, v) for k, v in obj.items() if v is not None]
    return []


def nested_clauses(value: Any, field: str) -> List[str]:
    """
    Clauses for a nested field.

    RawClause: passed through when it already names a nested path, otherwise
    prefixed with `field:`. Structured object: one `field.key:value` clause per
    defined key. A list of objects yields the clauses of each in order.
    """
    if value is None:
        return []

    if isinstance(value, RawClause):
        if not value.text:
            return []
        return [value.text if "." in value.text else f"{field}:{value.text}"]

    if isinstance(value, (BaseModel, Mapping)):
        objects = [value]
    else:
        objects = list(value)

    parts: List[str] = []
    for obj in objects:
        for key, val in _defined_items(obj):
            if isinstance(val, (list, tuple)):
                parts.extend(f"{field}.{key}:{item}" for item in val)
            else:
                parts.append(f"{field}.{key}:{val}")
    return parts


def range_clause(value: Any, field: str) -> Optional[str]:
    """
    `field:value` for numeric or range fields.

    Only None and "" count as absent, so an explicit 0 compiles to `field:0`.
    Range and exact-match syntax ("[1 TO 3]", "{1 TO 3}", "[* TO 100]", "!2")
    is emitted exactly as given.
    """
    if value is None or value == "":
        return None
    return f"{field}:{value}"
