"""
menu_engine/category_infer.py

Item-type classification for parsed menu items.

Goals:
- Keyword tables, not branching: vocabulary lives in the dicts below.
- Section header beats item name ("COCKTAILS" makes any item a beverage).
- Also infer a finer drink kind (cocktail / beer / wine / spirit / soft) that
  the beverage enricher uses to decide which attributes make sense.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Pattern, Sequence, Tuple
import re

from menu_engine.contracts import (
    ITEM_TYPE_BEVERAGE,
    ITEM_TYPE_FOOD,
    ITEM_TYPE_OTHER,
    ParsedMenuItem,
)


# ------------------------
# Keyword tables
# ------------------------

# Drink kind -> vocabulary. Table order is the priority order when one text
# mentions several kinds ("Gin & Tonic" is a cocktail before it is a spirit).
DRINK_KIND_KEYWORDS: Dict[str, Sequence[str]] = {
    "cocktail": [
        "cocktail", "mocktail", "martini", "mojito", "negroni", "margarita",
        "daiquiri", "spritz", "manhattan", "old fashioned", "cosmopolitan",
        "bellini", "mule", "collins", "sour", "colada", "tonic", "highball",
        "punch", "sangria", "bloody mary", "caipirinha", "paloma", "fizz",
    ],
    "beer": [
        "beer", "ale", "lager", "stout", "ipa", "pilsner", "porter",
        "bitter", "cider", "draught", "on tap",
    ],
    "wine": [
        "wine", "champagne", "prosecco", "cava", "rosé", "merlot", "malbec",
        "pinot", "chardonnay", "sauvignon", "rioja", "shiraz", "chianti",
        "barolo", "riesling", "tempranillo", "sangiovese", "syrah",
        "zinfandel", "lambrusco",
    ],
    "spirit": [
        "spirit", "vodka", "gin", "rum", "whisky", "whiskey", "bourbon",
        "scotch", "tequila", "mezcal", "brandy", "cognac", "liqueur",
        "single malt",
    ],
    "soft": [
        "soft drink", "soda", "juice", "coffee", "espresso", "latte",
        "cappuccino", "tea", "lemonade", "cola", "smoothie", "milkshake",
        "mineral water", "hot chocolate",
    ],
}

# Flat beverage vocabulary (every drink kind counts).
BEVERAGE_KEYWORDS: Sequence[str] = tuple(
    kw for kws in DRINK_KIND_KEYWORDS.values() for kw in kws
) + ("drink", "beverage", "refreshment")

FOOD_KEYWORDS: Sequence[str] = (
    "food", "starter", "appetizer", "appetiser", "main", "entree", "entrée",
    "dessert", "pudding", "side", "snack", "small plate", "sharing",
    "breakfast", "brunch", "lunch", "dinner", "kitchen", "grill",
    "burger", "pizza", "salad", "soup", "sandwich", "wrap", "pasta",
    "steak", "chicken", "beef", "pork", "lamb", "fish", "salmon", "prawn",
    "chips", "fries", "bread", "cheese", "cake", "pie", "curry", "noodle",
    "rice", "taco", "wing", "risotto", "tart", "brownie", "sundae",
)

# Words that mark an item name as a dish even when it mentions a drink
# ("Beer-Battered Fish", "Rum Baba Cake", "Whisky Sauce Steak").
FOOD_CONTEXT_KEYWORDS: Sequence[str] = (
    "battered", "braised", "glazed", "marinated", "cake", "sauce",
    "butter", "sandwich", "burger", "pie", "steak", "pudding", "baba",
    "tart", "ice cream", "sorbet", "truffle", "chicken", "fish", "salad",
    "soup", "pizza",
)


def _build_re(words: Iterable[str]) -> Pattern[str]:
    alts = "|".join(re.escape(w) for w in sorted(set(words), key=len, reverse=True))
    # optional plural ("BEERS & ALES", "SPIRITS", "STARTERS")
    return re.compile(r"(?<!\w)(?:" + alts + r")(?:s|es)?(?!\w)", re.IGNORECASE)


_BEVERAGE_RE = _build_re(BEVERAGE_KEYWORDS)
_FOOD_RE = _build_re(FOOD_KEYWORDS)
_FOOD_CONTEXT_RE = _build_re(FOOD_CONTEXT_KEYWORDS)
_DRINK_KIND_RES: Dict[str, Pattern[str]] = {
    kind: _build_re(words) for kind, words in DRINK_KIND_KEYWORDS.items()
}


# ------------------------
# Matching helpers
# ------------------------

def is_beverage_text(text: Optional[str]) -> bool:
    return bool(text) and bool(_BEVERAGE_RE.search(text))


def is_food_text(text: Optional[str]) -> bool:
    return bool(text) and bool(_FOOD_RE.search(text))


def _type_for_text(text: Optional[str], food_context_wins: bool = False) -> Optional[str]:
    if not text:
        return None
    if food_context_wins and _FOOD_CONTEXT_RE.search(text):
        return ITEM_TYPE_FOOD
    if is_beverage_text(text):
        return ITEM_TYPE_BEVERAGE
    if is_food_text(text):
        return ITEM_TYPE_FOOD
    return None


def _kind_for_text(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    for kind, rx in _DRINK_KIND_RES.items():
        if rx.search(text):
            return kind
    return None


# ------------------------
# Public API
# ------------------------

def classify(item: ParsedMenuItem, section_header: str) -> Tuple[str, str]:
    """
    Return (item_type, category) for an extracted item.

    category is the trimmed section header. item_type comes from the first
    tier with a match: header, then item name, then description.
    """
    category = (section_header or "").strip()

    item_type = (
        _type_for_text(category)
        or _type_for_text(item.name, food_context_wins=True)
        or _type_for_text(item.description, food_context_wins=True)
        or ITEM_TYPE_OTHER
    )
    return item_type, category


def infer_drink_kind(section_header: str, name: str) -> Optional[str]:
    """
    Best-guess drink kind: "cocktail" | "beer" | "wine" | "spirit" | "soft".

    Header first so "Classic Manhattan" under SIGNATURE COCKTAILS is a
    cocktail and "Grey Goose Vodka" under SPIRITS is a spirit. Returns None
    when neither header nor name says.
    """
    return _kind_for_text(section_header) or _kind_for_text(name)
