# menu_engine/beverage_enricher.py
"""
Beverage Enrichment

Attaches beverage attributes to an already-classified item by matching its
name + description against the tables in parsers/beverage_vocab.py:

  spirit_type           first spirit keyword in the text ("gin", "bourbon")
  beer_style            first beer-style keyword ("IPA", "stout")
  cocktail_ingredients  description split on , & + "and", minus serving text
  alcohol_content       "5.6% ABV" kept verbatim
  serving_style         "on draft", "neat or on the rocks", "pint"
  is_non_alcoholic      virgin / mocktail / alcohol-free / 0%
  temperature           chilled / iced / warm / hot / room temperature
  serving_options       "Pint £6.50, Half Pint £3.25" size/price pairs

Wines also get grape_varieties (named grapes, then appellation rules such as
Chianti -> Sangiovese), vintage (a 19xx/20xx year) and wine_color (colour
word in the text or header, else the colour of the first grape).

The drink kind from category_infer.infer_drink_kind() gates the fields that
make no sense for a kind: no spirit on a beer ("bourbon barrel stout"), no
beer style on a cocktail ("topped with ginger ale"), ingredients only for
cocktails, wine fields only for wines.

Non-beverage items pass through untouched. The input item is never
modified; a new item is returned.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Pattern, Dict, Tuple

from menu_engine.contracts import ParsedMenuItem, ServingOption
from menu_engine.parsers.beverage_vocab import (
    ALCOHOL_CONTENT_RE,
    ALTERNATIVE_GAP_RE,
    BEER_STYLE_MAP,
    BEER_STYLE_RE,
    GRAPE_COLOR,
    GRAPE_MAP,
    GRAPE_RE,
    INGREDIENT_SPLIT_RE,
    NON_ALCOHOLIC_RE,
    PREPARATION_RE,
    REGION_GRAPE_MAP,
    REGION_GRAPE_RE,
    SERVING_STYLE_MAP,
    SERVING_STYLE_RE,
    SPIRIT_MAP,
    SPIRIT_RE,
    TEMPERATURE_MAP,
    TEMPERATURE_RE,
    VINTAGE_RE,
    WINE_COLOR_MAP,
    WINE_COLOR_RE,
    normalize_ingredient,
)
from menu_engine.parsers.price_parser import PRICE_RE, extract_serving_options

DRINK_COCKTAIL = "cocktail"
DRINK_BEER = "beer"
DRINK_SPIRIT = "spirit"
DRINK_WINE = "wine"

_SPIRIT_BLOCKED_KINDS = {DRINK_BEER, DRINK_WINE}
_BEER_STYLE_BLOCKED_KINDS = {DRINK_COCKTAIL, DRINK_SPIRIT, DRINK_WINE}

# An ingredient fragment longer than this is prose, not an ingredient.
_MAX_INGREDIENT_WORDS = 6


# ---------------------------------------------------------------------------
# Field detectors (each takes the combined name + description text)
# ---------------------------------------------------------------------------

def _first_match(text: str, rx: Pattern[str], table: Dict[str, str]) -> Optional[str]:
    """Earliest match in the text; longest keyword wins at the same spot."""
    m = rx.search(text or "")
    if not m:
        return None
    return table.get(m.group(1).lower())


def detect_spirit_type(text: str) -> Optional[str]:
    return _first_match(text, SPIRIT_RE, SPIRIT_MAP)


def detect_beer_style(text: str) -> Optional[str]:
    return _first_match(text, BEER_STYLE_RE, BEER_STYLE_MAP)


def detect_temperature(text: str) -> Optional[str]:
    return _first_match(text, TEMPERATURE_RE, TEMPERATURE_MAP)


def detect_non_alcoholic(text: str) -> bool:
    return bool(NON_ALCOHOLIC_RE.search(text or ""))


def detect_alcohol_content(text: str) -> Optional[str]:
    m = ALCOHOL_CONTENT_RE.search(text or "")
    return m.group(0) if m else None


def detect_serving_style(text: str) -> Optional[str]:
    """
    Collect serving phrases in text order.

    "served neat or on the rocks" -> "neat or on the rocks"
    "half pint available"         -> "half pint"
    "Pint £6.50, Half Pint £3.25" -> "pint, half pint"
    """
    matches: List[Tuple[str, int, int]] = []
    seen = set()
    for m in SERVING_STYLE_RE.finditer(text or ""):
        style = SERVING_STYLE_MAP.get(m.group(1).lower())
        if not style or style in seen:
            continue
        seen.add(style)
        matches.append((style, m.start(), m.end()))
    if not matches:
        return None

    out = matches[0][0]
    for (_, _, prev_end), (style, start, _) in zip(matches, matches[1:]):
        gap = text[prev_end:start]
        sep = " or " if ALTERNATIVE_GAP_RE.match(gap) else ", "
        out += sep + style
    return out


# ---------------------------------------------------------------------------
# Wine detectors
# ---------------------------------------------------------------------------

def detect_grape_varieties(text: str) -> Tuple[str, ...]:
    """
    Grapes named in the text, in order, then grapes implied by an
    appellation ("Chianti Classico" -> Sangiovese, "Prosecco" -> Glera).
    """
    found: List[str] = []
    for rx, table in ((GRAPE_RE, GRAPE_MAP), (REGION_GRAPE_RE, REGION_GRAPE_MAP)):
        for m in rx.finditer(text or ""):
            grape = table.get(m.group(1).lower())
            if grape and grape not in found:
                found.append(grape)
    return tuple(found)


def detect_vintage(text: str) -> Optional[int]:
    m = VINTAGE_RE.search(text or "")
    return int(m.group(1)) if m else None


def detect_wine_color(text: str, section_header: str = "",
                      grapes: Tuple[str, ...] = ()) -> Optional[str]:
    """Colour word in the item text, then in the header, then from the grape."""
    color = (
        _first_match(text, WINE_COLOR_RE, WINE_COLOR_MAP)
        or _first_match(section_header, WINE_COLOR_RE, WINE_COLOR_MAP)
    )
    if color:
        return color
    return next((GRAPE_COLOR[g] for g in grapes if g in GRAPE_COLOR), None)


def extract_cocktail_ingredients(description: Optional[str]) -> Tuple[str, ...]:
    """
    Split a cocktail description into ingredient names, in order.

    Fragments mentioning serving/garnish instructions, ABV or prices are
    dropped; qualifiers like "fresh" are stripped; duplicates are removed
    case-insensitively.
    """
    if not description:
        return ()
    out: List[str] = []
    seen = set()
    for frag in INGREDIENT_SPLIT_RE.split(description):
        frag = frag.strip(" .;:-–")
        if not frag:
            continue
        if PREPARATION_RE.search(frag):
            continue
        if ALCOHOL_CONTENT_RE.search(frag) or PRICE_RE.search(frag):
            continue
        if len(frag.split()) > _MAX_INGREDIENT_WORDS:
            continue
        ingredient = normalize_ingredient(frag)
        key = ingredient.lower()
        if not ingredient or key in seen:
            continue
        seen.add(key)
        out.append(ingredient)
    return tuple(out)


def _wants_ingredients(drink_kind: Optional[str], spirit: Optional[str],
                       description: Optional[str]) -> bool:
    if drink_kind == DRINK_COCKTAIL:
        return True
    if drink_kind is None and spirit and description:
        return len([f for f in INGREDIENT_SPLIT_RE.split(description) if f.strip()]) >= 2
    return False


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def enrich(item: ParsedMenuItem, drink_kind: Optional[str] = None) -> ParsedMenuItem:
    """Return a copy of a beverage item with its beverage attributes filled."""
    if not item.is_beverage:
        return item

    text = " ".join(p for p in (item.name, item.description) if p)

    non_alcoholic = detect_non_alcoholic(text)

    spirit = None if drink_kind in _SPIRIT_BLOCKED_KINDS else detect_spirit_type(text)
    beer_style = None if drink_kind in _BEER_STYLE_BLOCKED_KINDS else detect_beer_style(text)

    ingredients: Tuple[str, ...] = ()
    if _wants_ingredients(drink_kind, spirit, item.description):
        ingredients = extract_cocktail_ingredients(item.description)

    # Non-alcoholic wins: "Virgin Mojito" never carries a spirit or beer style.
    if non_alcoholic:
        spirit = None
        beer_style = None

    options: Tuple[ServingOption, ...] = tuple(extract_serving_options(text))

    grapes: Tuple[str, ...] = ()
    vintage = None
    wine_color = None
    if drink_kind == DRINK_WINE:
        grapes = detect_grape_varieties(text)
        vintage = detect_vintage(text)
        wine_color = detect_wine_color(text, item.category, grapes)

    return replace(
        item,
        spirit_type=spirit,
        beer_style=beer_style,
        cocktail_ingredients=ingredients,
        alcohol_content=detect_alcohol_content(text),
        serving_style=detect_serving_style(text),
        is_non_alcoholic=non_alcoholic,
        temperature=detect_temperature(text),
        serving_options=options,
        grape_varieties=grapes,
        vintage=vintage,
        wine_color=wine_color,
    )
