"""Parameter descriptions shown to the model calling the card tools."""

EXACT_MATCH = 'Use ! for exact matching (e.g., "!value" to match only exact value).'
RANGE_INCLUSIVE = "Use [ and ] for inclusive ranges (e.g., [1 TO 3] for values 1-3)."
RANGE_EXCLUSIVE = (
    "Use { and } for exclusive ranges (e.g., {1 TO 3} for values more than 1 and less than 3)."
)
RANGE_UNBOUNDED = (
    "Use * for unbounded ranges (e.g., [* TO 100] for values up to 100, "
    "or [100 TO *] for values 100 or higher)."
)
NEGATIVE_FILTER = 'Use negative values with a "-" prefix to exclude values (e.g., ["-value"] to exclude value).'
NO_INFERENCE = (
    "CRITICAL: Never infer or guess values. Never provide default values. "
    "Never make assumptions about what the user might want. Just query exactly "
    "what was asked for, nothing more and nothing less."
)
PRESERVE_HYPHEN = (
    'IMPORTANT: For hyphenated names like "chien-pao", you MUST preserve the '
    "hyphen exactly as it appears."
)
WILDCARD_MATCH = (
    'Use * for wildcard matching (e.g., "char*" to match all cards starting with "char", '
    'or "char*der" to match cards starting with "char" and ending with "der").'
)
NESTED_FIELD = (
    'Use dot notation (.) to search nested fields (e.g., "set.id:sm1" for set ID, '
    '"attacks.name:Spelunk" for attack names).'
)

NUMERICAL = f"{EXACT_MATCH} {RANGE_INCLUSIVE} {RANGE_EXCLUSIVE} {RANGE_UNBOUNDED}"
FILTERABLE = f"{NEGATIVE_FILTER} {EXACT_MATCH}"


NAME = (
    f"{NO_INFERENCE} {PRESERVE_HYPHEN} For example, \"chien-pao ex\" should have name "
    f'"chien-pao" (with the hyphen) and subtypes ["EX"]. Never remove or modify '
    f"hyphens in the name. {WILDCARD_MATCH} {EXACT_MATCH} If no name is explicitly "
    "provided in the query, do not include a name field at all."
)

SUBTYPES = (
    f'{NO_INFERENCE} For example, "chien pao ex" should have name "chien pao" and '
    'subtypes ["EX"]. If multiple subtypes are present like "basic pikachu ex", '
    f'use ["Basic", "EX"]. {FILTERABLE} If no subtypes are explicitly mentioned, '
    "omit this field entirely."
)

LEGALITIES = (
    f'{NO_INFERENCE} The legalities for a given card. Each format takes "legal" or '
    f'"banned". {FILTERABLE} {NESTED_FIELD} For example, "legalities.standard:banned" '
    "to find cards banned in Standard. If no legalities are explicitly mentioned, "
    "omit this field entirely."
)

CONVERTED_RETREAT_COST = (
    f"{NO_INFERENCE} The converted retreat cost for a given Pokemon card. If the "
    'user explicitly specifies "free retreat", set this to 0. If no retreat cost '
    f"is explicitly mentioned, omit this field. {NUMERICAL}"
)

HP = (
    f"{NO_INFERENCE} The HP (Hit Points) of the Pokemon card. {NUMERICAL} "
    "If no HP is explicitly mentioned, omit this field entirely."
)

NATIONAL_POKEDEX_NUMBERS = (
    f"{NO_INFERENCE} The National Pokedex numbers of the Pokemon. {NUMERICAL} "
    "If no Pokedex numbers are explicitly mentioned, omit this field entirely."
)

PAGE = (
    f"{NO_INFERENCE} The page number for pagination. {NUMERICAL} "
    "If no page is explicitly mentioned, omit this field entirely."
)

PAGE_SIZE = (
    f"{NO_INFERENCE} The number of cards per page. {NUMERICAL} "
    "If no page size is explicitly mentioned, omit this field entirely."
)

TYPES = (
    f'{NO_INFERENCE} The types of the Pokemon card (e.g., ["Grass", "Psychic"]). '
    f"{FILTERABLE} If no types are explicitly mentioned, omit this field entirely."
)

EVOLVES_TO = (
    f"{NO_INFERENCE} The Pokemon this card evolves into. {EXACT_MATCH} "
    "If no evolution information is explicitly mentioned, omit this field entirely."
)

SET = (
    f"{NO_INFERENCE} The set information for this card, as an object with id, name "
    f'and/or series, or a raw clause. {NESTED_FIELD} For example, "set.id:sm1" to '
    "find cards from a specific set. If no set information is explicitly mentioned, "
    "omit this field entirely."
)

ATTACKS = (
    f"{NO_INFERENCE} The attacks available to this Pokemon card. {NESTED_FIELD} "
    'For example, "attacks.name:Spelunk" to find cards with a specific attack name. '
    "If no attack information is explicitly mentioned, omit this field entirely."
)

WEAKNESSES = (
    f"{NO_INFERENCE} The weaknesses of this Pokemon card. {NESTED_FIELD} "
    'For example, "weaknesses.type:Water" to find cards weak to Water. '
    "If no weakness information is explicitly mentioned, omit this field entirely."
)

REGULATION_MARK = (
    f'{NO_INFERENCE} The regulation mark (also known as "block") of the card '
    '(e.g., "F", "G", "H"). This indicates which regulation block the card belongs '
    "to. If no regulation mark is explicitly mentioned, omit this field entirely."
)

PRICE_LOOKUP = (
    "Look up the current market price for a specific Pokemon card. Returns both "
    "TCGPlayer and Cardmarket prices if available."
)
