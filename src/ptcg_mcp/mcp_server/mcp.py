from dotenv import load_dotenv
from fastmcp import FastMCP

# Settings are read when the tool modules import; pick up .env first
load_dotenv()


mcp = FastMCP(
    name="ptcg mcp server",
    instructions="""
        This server exposes tools for looking up Pokemon TCG cards through the
        Pokemon TCG API (api.pokemontcg.io).

        ## Tools
          - pokemon-card-search(name?, subtypes?, legalities?, hp?, types?, evolves_to?,
            converted_retreat_cost?, national_pokedex_numbers?, page?, page_size?, set?,
            attacks?, weaknesses?, regulation_mark?): search cards, returns {total, cards}
          - pokemon-card-price(name, set?): price summary (TCGPlayer and Cardmarket) for
            the first matching card, or {error} when nothing matches

        ## Query Syntax
        Every parameter becomes one clause of a single query; clauses are ANDed.
          - name: quoted exact phrase, hyphens kept ("chien-pao"); "char*" wildcard; "!Pikachu" exact
          - list parameters: several values are ORed, e.g. ["Basic", "EX"]
          - types: prefix a value with "-" to exclude it, e.g. ["Fire", "-Water"]
          - numeric parameters: 150, "[100 TO 200]", "{1 TO 3}", "[* TO 100]", "!2"
          - nested parameters (legalities, set, attacks, weaknesses): structured objects,
            or raw clauses such as "set.id:sm1"

        Only pass values the user explicitly asked for. Never infer or add defaults.
    """,
)

# Import all tool modules to register them with the MCP server
from . import (  # noqa: E402
    card_price,  # noqa: F401
    search_cards,  # noqa: F401
)
