from ptcg_mcp.models import (
    AttackFilter,
    Legalities,
    RawClause,
    SearchFilter,
    SetFilter,
    WeaknessFilter,
)
from ptcg_mcp.query import compile_query


# --- Name ---------------------------------------------------------------------
def test_name_is_quoted_and_keeps_hyphens():
    query = compile_query(SearchFilter(name="chien-pao"))
    assert query == 'name:"chien-pao"'
    assert "chien pao" not in query
    assert "chienpao" not in query


def test_name_with_spaces_is_quoted():
    assert compile_query(SearchFilter(name="charizard ex")) == 'name:"charizard ex"'


def test_wildcard_name_is_unquoted():
    assert compile_query(SearchFilter(name="char*")) == "name:char*"
    assert compile_query(SearchFilter(name="char*der")) == "name:char*der"


def test_exact_match_name_is_unquoted():
    assert compile_query(SearchFilter(name="!Pikachu")) == "name:!Pikachu"


# --- OR groups ----------------------------------------------------------------
def test_single_subtype_is_bare():
    assert compile_query(SearchFilter(subtypes=["EX"])) == "subtypes:EX"


def test_multiple_subtypes_are_parenthesized():
    query = compile_query(SearchFilter(subtypes=["Basic", "EX"]))
    assert query == "(subtypes:Basic OR subtypes:EX)"


def test_evolves_to_group():
    query = compile_query(SearchFilter(evolves_to=["Raichu", "Alolan Raichu"]))
    assert query == "(evolvesTo:Raichu OR evolvesTo:Alolan Raichu)"


def test_dotted_value_passes_through():
    query = compile_query(SearchFilter(types=["set.id:sm1", "Fire"]))
    assert query == "(set.id:sm1 OR types:Fire)"


def test_empty_list_contributes_nothing():
    assert compile_query(SearchFilter(subtypes=[], types=[])) == ""


# --- Types negation -----------------------------------------------------------
def test_negated_type_produces_separate_clause():
    query = compile_query(SearchFilter(types=["Fire", "-Water"]))
    assert query == "types:Fire -types:Water"


def test_only_negated_types():
    assert compile_query(SearchFilter(types=["-Water"])) == "-types:Water"


def test_several_negated_types_group_together():
    query = compile_query(SearchFilter(types=["Grass", "-Water", "-Fire"]))
    assert query == "types:Grass (-types:Water OR -types:Fire)"


def test_exact_type_is_never_negated():
    assert compile_query(SearchFilter(types=["-!Water"])) == "types:!Water"


# --- Nested -------------------------------------------------------------------
def test_set_object_single_key():
    assert compile_query(SearchFilter(set=SetFilter(id="sm1"))) == "set.id:sm1"


def test_set_object_multiple_keys_are_separate_clauses():
    query = compile_query(SearchFilter(set=SetFilter(name="Base", series="Base")))
    assert query == "set.name:Base set.series:Base"
    assert "(" not in query and " OR " not in query


def test_raw_set_clause():
    assert compile_query(SearchFilter(set=RawClause("set.id:sm1"))) == "set.id:sm1"
    assert compile_query(SearchFilter(set=RawClause("sm1"))) == "set:sm1"


def test_legalities_object():
    query = compile_query(SearchFilter(legalities=Legalities(standard="banned")))
    assert query == "legalities.standard:banned"


def test_attacks_and_weaknesses_lists():
    query = compile_query(
        SearchFilter(
            attacks=[AttackFilter(name="Spelunk", cost=["Fire", "Colorless"])],
            weaknesses=[WeaknessFilter(type="Water")],
        )
    )
    assert query == (
        "attacks.name:Spelunk attacks.cost:Fire attacks.cost:Colorless weaknesses.type:Water"
    )


def test_raw_weakness_string_is_prefixed():
    assert compile_query(SearchFilter(weaknesses=RawClause("Water"))) == "weaknesses:Water"


# --- Ranges -------------------------------------------------------------------
def test_range_passthrough():
    assert compile_query(SearchFilter(hp="[100 TO 200]")) == "hp:[100 TO 200]"
    assert compile_query(SearchFilter(hp="{1 TO 3}")) == "hp:{1 TO 3}"
    assert compile_query(SearchFilter(hp="[* TO 100]")) == "hp:[* TO 100]"
    assert compile_query(SearchFilter(national_pokedex_numbers="!25")) == "nationalPokedexNumbers:!25"


def test_plain_numeric_values():
    assert compile_query(SearchFilter(hp="150")) == "hp:150"
    assert compile_query(SearchFilter(page=2, page_size=50)) == "page:2 pageSize:50"


def test_zero_retreat_cost_is_kept():
    assert compile_query(SearchFilter(converted_retreat_cost=0)) == "convertedRetreatCost:0"


def test_regulation_mark():
    assert compile_query(SearchFilter(regulation_mark="G")) == "regulationMark:G"


# --- Assembly -----------------------------------------------------------------
def test_empty_filter_compiles_to_empty_string():
    assert compile_query(SearchFilter()) == ""


def test_end_to_end_order():
    query = compile_query(SearchFilter(name="chien-pao", subtypes=["EX"], types=["-Water"]))
    assert query == 'name:"chien-pao" subtypes:EX -types:Water'


def test_full_clause_order():
    query = compile_query(
        SearchFilter(
            name="Pikachu",
            subtypes=["Basic"],
            legalities=Legalities(expanded="legal"),
            types=["Lightning", "-Metal"],
            evolves_to=["Raichu"],
            hp="[60 TO *]",
            converted_retreat_cost=1,
            national_pokedex_numbers="25",
            page=1,
            page_size=10,
            set=SetFilter(series="Sword & Shield"),
            attacks=RawClause("attacks.name:Thunder"),
            weaknesses=[WeaknessFilter(type="Fighting")],
            regulation_mark="F",
        )
    )
    assert query == (
        'name:"Pikachu" subtypes:Basic legalities.expanded:legal '
        "types:Lightning -types:Metal evolvesTo:Raichu hp:[60 TO *] "
        "convertedRetreatCost:1 nationalPokedexNumbers:25 page:1 pageSize:10 "
        "set.series:Sword & Shield attacks.name:Thunder weaknesses.type:Fighting "
        "regulationMark:F"
    )


def test_plain_string_nested_fields_are_raw_clauses():
    search = SearchFilter(set="sm1", attacks=[AttackFilter(name="Spelunk")])
    assert search.set == RawClause("sm1")
    assert compile_query(search) == "set:sm1 attacks.name:Spelunk"


def test_plain_string_nested_fields_compile():
    assert compile_query(SearchFilter(set="sm1")) == "set:sm1"
    assert compile_query(SearchFilter(set="set.id:sm1")) == "set.id:sm1"
    assert (
        compile_query(SearchFilter(legalities="legalities.standard:legal"))
        == "legalities.standard:legal"
    )
    assert compile_query(SearchFilter(weaknesses="Water")) == "weaknesses:Water"
    assert compile_query(SearchFilter(attacks="attacks.name:Spelunk")) == "attacks.name:Spelunk"
