from typing import Annotated, Any, Dict, List, Optional, Union

from fastmcp import Context
from pydantic import Field

from ..analysis.card import search_cards as compute_search_cards
from ..client import UpstreamUnavailable
from ..models import AttackFilter, Legalities, SearchFilter, SetFilter, Subtype, WeaknessFilter
from . import descriptions
from .log_decorator import log_tool_calls
from .mcp import mcp
from .utils import client, upstream_tool_error

RangeParam = Optional[Union[int, str]]


TOOL_NAME = "pokemon-card-search"


@mcp.tool(name=TOOL_NAME)
@log_tool_calls(name=TOOL_NAME)
async def search_cards(
    name: Annotated[Optional[str], Field(description=descriptions.NAME)] = None,
    subtypes: Annotated[Optional[List[Subtype]], Field(description=descriptions.SUBTYPES)] = None,
    legalities: Annotated[
        Optional[Union[Legalities, str]], Field(description=descriptions.LEGALITIES)
    ] = None,
    hp: Annotated[RangeParam, Field(description=descriptions.HP)] = None,
    types: Annotated[Optional[List[str]], Field(description=descriptions.TYPES)] = None,
    evolves_to: Annotated[Optional[List[str]], Field(description=descriptions.EVOLVES_TO)] = None,
    converted_retreat_cost: Annotated[
        RangeParam, Field(description=descriptions.CONVERTED_RETREAT_COST)
    ] = None,
    national_pokedex_numbers: Annotated[
        RangeParam, Field(description=descriptions.NATIONAL_POKEDEX_NUMBERS)
    ] = None,
    page: Annotated[RangeParam, Field(description=descriptions.PAGE)] = None,
    page_size: Annotated[RangeParam, Field(description=descriptions.PAGE_SIZE)] = None,
    set: Annotated[Optional[Union[SetFilter, str]], Field(description=descriptions.SET)] = None,
    attacks: Annotated[
        Optional[Union[List[AttackFilter], str]], Field(description=descriptions.ATTACKS)
    ] = None,
    weaknesses: Annotated[
        Optional[Union[List[WeaknessFilter], str]], Field(description=descriptions.WEAKNESSES)
    ] = None,
    regulation_mark: Annotated[
        Optional[str], Field(description=descriptions.REGULATION_MARK)
    ] = None,
    ctx: Context = None,
) -> Dict[str, Any]:
    """
    Searches for Pokemon cards.

    Every parameter is optional and becomes one clause of a single search query;
    clauses are combined with AND. Returns {"total": <match count>, "cards": [...]}.

    Workflow Integration:
    - Use pokemon-card-price instead when only the price of a named card is wanted.
    """
    search = SearchFilter(
        name=name,
        subtypes=subtypes,
        legalities=legalities,
        hp=hp,
        types=types,
        evolves_to=evolves_to,
        converted_retreat_cost=converted_retreat_cost,
        national_pokedex_numbers=national_pokedex_numbers,
        page=page,
        page_size=page_size,
        set=set,
        attacks=attacks,
        weaknesses=weaknesses,
        regulation_mark=regulation_mark,
    )
    try:
        return await compute_search_cards(client, search)
    except UpstreamUnavailable as e:
        raise upstream_tool_error(e) from e
