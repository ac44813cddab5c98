"""
Confidence Scoring
Turns the structural and semantic signals found on an item into a 0-100 score.

Scores are additive: every signal that matched adds its fixed weight and the
total is capped at 100, so an extra matched field can never lower a score.

Beverages
  name 35 + price 15 = 50 for a bare "Name £x" line; description and the
  enrichment fields carry the rest.

Food / other
  scored on structure only (name, price, description) so they are not held
  back by beverage fields that never apply to them.
"""

from __future__ import annotations

from typing import Dict

from menu_engine.contracts import ParsedMenuItem

# Beverage weights
_W_BEV_NAME = 35
_W_BEV_PRICE = 15
_W_BEV_DESCRIPTION = 5
_W_SPIRIT = 10
_W_BEER_STYLE = 10
_W_INGREDIENTS = 15
_W_ALCOHOL = 10
_W_SERVING_STYLE = 10
_W_NON_ALCOHOLIC = 5
_W_TEMPERATURE = 5
_W_SERVING_OPTIONS = 5
_W_GRAPE = 10
_W_VINTAGE = 5
_W_WINE_COLOR = 5

# Food / other weights (sum to 100)
_W_NAME = 50
_W_PRICE = 30
_W_DESCRIPTION = 20

_MAX_SCORE = 100

# Tier thresholds
_TIER_HIGH = 80
_TIER_MEDIUM = 60
_TIER_LOW = 40


def _structural_signals(item: ParsedMenuItem) -> Dict[str, bool]:
    return {
        "name": bool(item.name and item.name.strip()),
        "price": item.price > 0,
        "description": bool(item.description),
    }


def score_breakdown(item: ParsedMenuItem) -> Dict[str, int]:
    """Per-signal points awarded to the item (before the 100 cap)."""
    s = _structural_signals(item)
    if not item.is_beverage:
        return {
            "name": _W_NAME if s["name"] else 0,
            "price": _W_PRICE if s["price"] else 0,
            "description": _W_DESCRIPTION if s["description"] else 0,
        }
    return {
        "name": _W_BEV_NAME if s["name"] else 0,
        "price": _W_BEV_PRICE if s["price"] else 0,
        "description": _W_BEV_DESCRIPTION if s["description"] else 0,
        "spiritType": _W_SPIRIT if item.spirit_type else 0,
        "beerStyle": _W_BEER_STYLE if item.beer_style else 0,
        "cocktailIngredients": _W_INGREDIENTS if item.cocktail_ingredients else 0,
        "alcoholContent": _W_ALCOHOL if item.alcohol_content else 0,
        "servingStyle": _W_SERVING_STYLE if item.serving_style else 0,
        "isNonAlcoholic": _W_NON_ALCOHOLIC if item.is_non_alcoholic else 0,
        "temperature": _W_TEMPERATURE if item.temperature else 0,
        "servingOptions": _W_SERVING_OPTIONS if item.serving_options else 0,
        "grapeVarieties": _W_GRAPE if item.grape_varieties else 0,
        "vintage": _W_VINTAGE if item.vintage else 0,
        "wineColor": _W_WINE_COLOR if item.wine_color else 0,
    }


def score(item: ParsedMenuItem) -> int:
    """Aggregate confidence for one item, 0-100."""
    total = sum(score_breakdown(item).values())
    return max(0, min(_MAX_SCORE, int(total)))


def confidence_tier(value: int) -> str:
    """Bucket a score: "high" (80+), "medium" (60-79), "low" (40-59), "reject"."""
    if value >= _TIER_HIGH:
        return "high"
    if value >= _TIER_MEDIUM:
        return "medium"
    if value >= _TIER_LOW:
        return "low"
    return "reject"
