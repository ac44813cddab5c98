# menu_engine/parsers/beverage_vocab.py
"""
Shared Beverage Vocabulary

Single source of truth for the keyword tables the beverage enricher matches
against. Every table maps a lowercase keyword (or phrase) to the display
value written onto the item, so vocabulary can grow without touching the
matching code in beverage_enricher.py.

Each table has a pre-built regex (longest-first alternation on word
boundaries) so that "india pale ale" wins over "ale" and "half pint" wins
over "pint" at the same position.
"""

from __future__ import annotations

from typing import Dict, Iterable, Pattern
import re


def _build_word_re(words: Iterable[str]) -> Pattern[str]:
    """Longest-first, case-insensitive alternation bounded by word breaks."""
    alts = "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))
    return re.compile(r"(?<!\w)(" + alts + r")(?!\w)", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Spirits: keyword -> canonical spirit
# ---------------------------------------------------------------------------
SPIRIT_MAP: Dict[str, str] = {
    "gin": "gin",
    "vodka": "vodka",
    "rum": "rum",
    "whisky": "whisky",
    "whiskey": "whiskey",
    "scotch": "whisky",
    "bourbon": "bourbon",
    "tequila": "tequila",
    "mezcal": "mezcal",
    "brandy": "brandy",
    "cognac": "brandy",
    "armagnac": "brandy",
}

SPIRIT_RE = _build_word_re(SPIRIT_MAP)


# ---------------------------------------------------------------------------
# Beer styles: keyword -> display style
# ---------------------------------------------------------------------------
BEER_STYLE_MAP: Dict[str, str] = {
    "ipa": "IPA",
    "india pale ale": "IPA",
    "pale ale": "pale ale",
    "stout": "stout",
    "lager": "lager",
    "pilsner": "pilsner",
    "pils": "pilsner",
    "porter": "porter",
    "bitter": "bitter",
    "wheat beer": "wheat beer",
    "ale": "ale",
}

BEER_STYLE_RE = _build_word_re(BEER_STYLE_MAP)


# ---------------------------------------------------------------------------
# Serving style phrases
# ---------------------------------------------------------------------------
SERVING_STYLE_MAP: Dict[str, str] = {
    "on draft": "on draft",
    "on draught": "on draught",
    "on tap": "on tap",
    "draft": "draft",
    "draught": "draught",
    "neat": "neat",
    "on the rocks": "on the rocks",
    "straight up": "straight up",
    "half pint": "half pint",
    "pint": "pint",
    "bottled": "bottled",
    "by the glass": "by the glass",
    "chilled": "chilled",
    "frozen": "frozen",
}

SERVING_STYLE_RE = _build_word_re(SERVING_STYLE_MAP)

# Text between two serving matches that marks them as alternatives.
ALTERNATIVE_GAP_RE = re.compile(r"^\s*,?\s*or\s*$", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Temperature cues
# ---------------------------------------------------------------------------
TEMPERATURE_MAP: Dict[str, str] = {
    "room temperature": "room temperature",
    "ice cold": "chilled",
    "chilled": "chilled",
    "iced": "iced",
    "frozen": "frozen",
    "warm": "warm",
    "warmed": "warm",
    "hot": "hot",
}

TEMPERATURE_RE = _build_word_re(TEMPERATURE_MAP)


# ---------------------------------------------------------------------------
# Non-alcoholic cues
# ---------------------------------------------------------------------------
NON_ALCOHOLIC_RE = re.compile(
    r"""
    (?<!\w)(?:virgin|non[-\s]?alcoholic|mocktails?|alcohol[-\s]free|zero[-\s]proof)(?!\w)
    |
    (?<![\d.,])0(?:\.0)?\s*%      # "0%" / "0.0%" but not "10%" or "5.0%"
    """,
    re.IGNORECASE | re.VERBOSE,
)


# ---------------------------------------------------------------------------
# Alcohol content: "5.6% ABV", "40% vol"
# ---------------------------------------------------------------------------
ALCOHOL_CONTENT_RE = re.compile(
    r"\d{1,2}(?:[.,]\d{1,2})?\s*%\s*(?:abv|vol)\b",
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# Cocktail ingredient cleanup
# ---------------------------------------------------------------------------

# Separators between ingredient fragments in a cocktail description.
INGREDIENT_SPLIT_RE = re.compile(r"\s*(?:,|;|&|\+|\band\b)\s*", re.IGNORECASE)

# A fragment mentioning any of these is serving instruction, not an ingredient.
PREPARATION_WORDS = (
    "garnish", "garnished", "served", "serve", "topped", "finished",
    "shaken", "stirred", "built", "strained", "blended", "choice of",
    "available", "perfect for", "on the rocks", "neat",
)

PREPARATION_RE = _build_word_re(PREPARATION_WORDS)

# Qualifiers stripped from the front of an ingredient.
INGREDIENT_QUALIFIER_RE = re.compile(
    r"^(?:freshly[-\s]squeezed|fresh[-\s]squeezed|fresh|house[-\s]made|homemade|muddled)\s+",
    re.IGNORECASE,
)

# Synonyms folded onto one name (applied after qualifier stripping).
INGREDIENT_NORMALIZATIONS: Dict[str, str] = {
    "club soda": "soda water",
    "sparkling water": "soda water",
    "tonic water": "tonic",
    "maraschino cherry": "cherry",
    "cocktail cherry": "cherry",
    "lemon twist": "lemon peel",
    "orange twist": "orange peel",
    "lime twist": "lime peel",
    "gomme": "simple syrup",
}


def normalize_ingredient(raw: str) -> str:
    """Strip preparation qualifiers and fold known synonyms.

    Examples:
        "Fresh lime juice"      -> "lime juice"
        "house-made grenadine"  -> "grenadine"
        "club soda"             -> "soda water"
        "Lillet rosé vermouth"  -> "Lillet rosé vermouth"
    """
    text = INGREDIENT_QUALIFIER_RE.sub("", raw.strip()).strip()
    return INGREDIENT_NORMALIZATIONS.get(text.lower(), text)


# ---------------------------------------------------------------------------
# Serving sizes for multi-price beverage lines ("Pint £6.50, Half Pint £3.25")
# ---------------------------------------------------------------------------
SERVING_SIZE_MAP: Dict[str, str] = {
    "half pint": "Half Pint",
    "1/2 pint": "Half Pint",
    "pint": "Pint",
    "bottle": "Bottle",
    "can": "Can",
    "glass": "Glass",
    "large glass": "Large Glass",
    "small glass": "Small Glass",
    "carafe": "Carafe",
    "jug": "Jug",
    "pitcher": "Pitcher",
    "shot": "Shot",
    "single": "Single",
    "double": "Double",
    "triple": "Triple",
}


def normalize_serving_size(raw: str) -> str:
    """Map a raw size token to its display label ("175 ml" -> "175ml")."""
    low = re.sub(r"\s+", " ", raw.strip().lower())
    if low in SERVING_SIZE_MAP:
        return SERVING_SIZE_MAP[low]
    m = re.match(r"^(\d{2,4})\s?ml$", low)
    if m:
        return f"{m.group(1)}ml"
    return raw.strip()


# ---------------------------------------------------------------------------
# Wine: grape varieties, region -> grape rules, colour words, vintage
# ---------------------------------------------------------------------------

# keyword -> display grape; unaccented spellings map onto the accented name
RED_GRAPES: Dict[str, str] = {
    "cabernet sauvignon": "Cabernet Sauvignon",
    "merlot": "Merlot",
    "pinot noir": "Pinot Noir",
    "syrah": "Syrah",
    "shiraz": "Shiraz",
    "tempranillo": "Tempranillo",
    "sangiovese": "Sangiovese",
    "grenache": "Grenache",
    "malbec": "Malbec",
    "zinfandel": "Zinfandel",
    "barbera": "Barbera",
    "nebbiolo": "Nebbiolo",
    "primitivo": "Primitivo",
    "montepulciano": "Montepulciano",
    "nero d'avola": "Nero d'Avola",
    "corvina": "Corvina",
    "dolcetto": "Dolcetto",
    "aglianico": "Aglianico",
    "carmenère": "Carmenère",
    "carmenere": "Carmenère",
    "petite sirah": "Petite Sirah",
    "mourvèdre": "Mourvèdre",
    "mourvedre": "Mourvèdre",
    "cinsault": "Cinsault",
    "gamay": "Gamay",
}

WHITE_GRAPES: Dict[str, str] = {
    "chardonnay": "Chardonnay",
    "sauvignon blanc": "Sauvignon Blanc",
    "riesling": "Riesling",
    "pinot grigio": "Pinot Grigio",
    "pinot gris": "Pinot Gris",
    "gewürztraminer": "Gewürztraminer",
    "gewurztraminer": "Gewürztraminer",
    "albariño": "Albariño",
    "albarino": "Albariño",
    "verdejo": "Verdejo",
    "moscato": "Moscato",
    "glera": "Glera",
    "trebbiano": "Trebbiano",
    "vermentino": "Vermentino",
    "fiano": "Fiano",
    "viognier": "Viognier",
    "chenin blanc": "Chenin Blanc",
    "sémillon": "Sémillon",
    "semillon": "Sémillon",
    "grüner veltliner": "Grüner Veltliner",
    "gruner veltliner": "Grüner Veltliner",
}

GRAPE_MAP: Dict[str, str] = {**RED_GRAPES, **WHITE_GRAPES}

GRAPE_RE = _build_word_re(GRAPE_MAP)

# Display grape -> colour, for wines that name a grape but no colour
GRAPE_COLOR: Dict[str, str] = {
    **{g: "red" for g in RED_GRAPES.values()},
    **{g: "white" for g in WHITE_GRAPES.values()},
}

# Appellations that imply a grape without naming it
REGION_GRAPE_MAP: Dict[str, str] = {
    "chianti": "Sangiovese",
    "prosecco": "Glera",
    "barolo": "Nebbiolo",
    "barbaresco": "Nebbiolo",
    "champagne": "Champagne Blend",
    "cava": "Cava Blend",
    "lambrusco": "Lambrusco",
}

REGION_GRAPE_RE = _build_word_re(REGION_GRAPE_MAP)

WINE_COLOR_MAP: Dict[str, str] = {
    "red": "red",
    "rouge": "red",
    "tinto": "red",
    "rosso": "red",
    "white": "white",
    "blanc": "white",
    "blanco": "white",
    "bianco": "white",
    "rosé": "rosé",
    "rose": "rosé",
    "rosado": "rosé",
    "rosato": "rosé",
    "chiaretto": "rosé",
    "pink": "rosé",
    "blush": "rosé",
}

WINE_COLOR_RE = _build_word_re(WINE_COLOR_MAP)

# Four-digit year not glued to a price, a percentage or other digits
VINTAGE_RE = re.compile(r"(?<![\w£$€.,])((?:19|20)\d{2})(?![\w%])")
