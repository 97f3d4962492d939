"""Formal grammar rules for the game script language.

The grammar is implemented with the combinators in ``pzscript.parser``;
these constants are the reference documentation for it. The block tags
and field orders below are also read by the domain parsers, so the
documented schema and the implemented one cannot drift apart.

Grammar notation used here:
    ``::=``     production rule
    ``|``       alternation
    ``( )``     grouping
    ``*``       zero or more repetitions
    ``WS``      one or more whitespace characters, line breaks included
    ``SP``      one or more spaces or tabs
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

GRAMMAR_BLOCK = """
named_block   ::= TAG SP name WS '{' WS body WS '}'
unnamed_block ::= TAG WS '{' WS body WS '}'
repeated_body ::= item ( WS item )*

name ::= <text up to the first '{', minus the separator before it,
          trailing whitespace trimmed; interior spaces allowed>
"""

# ---------------------------------------------------------------------------
# Fields and atoms
# ---------------------------------------------------------------------------

GRAMMAR_FIELD = """
field ::= SP? FIELD_NAME SP? SEP SP? value ','

identifier ::= [A-Za-z0-9.]+
bool       ::= 'true' | 'false'
float      ::= [+-]? ( digits ( '.' digits? )? | '.' digits ) ( [eE] [+-]? digits )?
"""

# ---------------------------------------------------------------------------
# Module
# ---------------------------------------------------------------------------

GRAMMAR_MODULE = """
script ::= WS? module ( WS module )* WS? EOF
module ::= 'module' SP name WS '{' WS definition ( WS definition )* WS '}'

definition ::= item | recipe
"""

# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------

GRAMMAR_ITEM = """
item ::= 'item' SP name WS '{' WS item_body WS '}'

item_body ::=
    'DisplayCategory' '=' identifier ',' WS
    'Type'            '=' identifier ',' WS
    'DisplayName'     '=' identifier ',' WS
    'Icon'            '=' identifier ','
"""

# ---------------------------------------------------------------------------
# Recipe
# ---------------------------------------------------------------------------

GRAMMAR_RECIPE = """
recipe ::= 'recipe' SP name WS '{' WS recipe_body WS '}'

recipe_body ::=
    ingredient ( WS ingredient )* WS
    'Result'        ':' identifier ',' WS
    'Time'          ':' float      ',' WS
    'Category'      ':' identifier ',' WS
    'NeedToBeLearn' ':' bool       ','

ingredient ::= identifier ','
"""

FULL_GRAMMAR: str = "\n".join([
    "# Game Script Grammar (EBNF-like notation)",
    "# =========================================",
    "",
    "# Blocks",
    GRAMMAR_BLOCK,
    "# Fields",
    GRAMMAR_FIELD,
    "# Module",
    GRAMMAR_MODULE,
    "# Item",
    GRAMMAR_ITEM,
    "# Recipe",
    GRAMMAR_RECIPE,
])

# Block tags recognized by the domain grammars.
MODULE_TAG = "module"
ITEM_TAG = "item"
RECIPE_TAG = "recipe"

# Fixed field order of an item body, as (field name, separator) pairs.
ITEM_FIELD_ORDER: list[tuple[str, str]] = [
    ("DisplayCategory", "="),
    ("Type", "="),
    ("DisplayName", "="),
    ("Icon", "="),
]

# Fixed field order of a recipe body, following the ingredient list.
RECIPE_FIELD_ORDER: list[tuple[str, str]] = [
    ("Result", ":"),
    ("Time", ":"),
    ("Category", ":"),
    ("NeedToBeLearn", ":"),
]
