# menu_engine/parse_report.py
"""
Menu-level parse summary.

Rolls a ParsedMenu up into the numbers the upload screen shows after a
parse: how many items of each type, how many beverages picked up at least
one enrichment field, and how confident the parser was overall.

Does not touch the menu; returns a plain JSON-ready dict.
"""

from __future__ import annotations

import statistics
from typing import Any, Dict

from menu_engine.contracts import ITEM_TYPES, ParsedMenu
from menu_engine.scoring.confidence import confidence_tier

_TIERS = ("high", "medium", "low", "reject")


def _empty_tiers() -> Dict[str, int]:
    return {t: 0 for t in _TIERS}


def summarize_menu(menu: ParsedMenu) -> Dict[str, Any]:
    """
    Returns dict with:
      - totalItems: int
      - itemTypeCounts: {beverage, food, other}
      - beverageCount / enhancedBeverageCount: int
      - enhancementRate: float, share of beverages with any enrichment field
      - meanConfidence / medianConfidence: float
      - minConfidence / maxConfidence: int
      - tierCounts: {high, medium, low, reject}
      - categorySummary: {category: {count, meanConfidence}} in menu order
      - noteCount: int
    """
    items = menu.items
    type_counts = {t: 0 for t in ITEM_TYPES}

    if not items:
        return {
            "totalItems": 0,
            "itemTypeCounts": type_counts,
            "beverageCount": 0,
            "enhancedBeverageCount": 0,
            "enhancementRate": 0.0,
            "meanConfidence": 0.0,
            "medianConfidence": 0.0,
            "minConfidence": 0,
            "maxConfidence": 0,
            "tierCounts": _empty_tiers(),
            "categorySummary": {},
            "noteCount": len(menu.processing_notes),
        }

    tier_counts = _empty_tiers()
    cat_scores: Dict[str, list] = {}
    beverages = 0
    enhanced = 0

    for item in items:
        type_counts[item.item_type] = type_counts.get(item.item_type, 0) + 1
        tier_counts[confidence_tier(item.confidence)] += 1
        cat_scores.setdefault(item.category, []).append(item.confidence)
        if item.is_beverage:
            beverages += 1
            if item.enrichment_fields() or item.is_non_alcoholic:
                enhanced += 1

    scores = [it.confidence for it in items]

    return {
        "totalItems": len(items),
        "itemTypeCounts": type_counts,
        "beverageCount": beverages,
        "enhancedBeverageCount": enhanced,
        "enhancementRate": round(enhanced / beverages, 4) if beverages else 0.0,
        "meanConfidence": round(statistics.mean(scores), 2),
        "medianConfidence": round(float(statistics.median(scores)), 2),
        "minConfidence": min(scores),
        "maxConfidence": max(scores),
        "tierCounts": tier_counts,
        "categorySummary": {
            cat: {"count": len(vals), "meanConfidence": round(statistics.mean(vals), 2)}
            for cat, vals in cat_scores.items()
        },
        "noteCount": len(menu.processing_notes),
    }
