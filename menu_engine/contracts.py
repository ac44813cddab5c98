# menu_engine/contracts.py
"""
Result types for the menu text parser.

Everything the pipeline hands back is a frozen dataclass. Stages build new
items with dataclasses.replace() instead of mutating earlier output, so a
ParsedMenu is safe to share once parse_text() returns.

Python attributes are snake_case; to_dict() produces the camelCase JSON shape
the upload handlers send to the client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Item types
# ---------------------------------------------------------------------------

ITEM_TYPE_BEVERAGE = "beverage"
ITEM_TYPE_FOOD = "food"
ITEM_TYPE_OTHER = "other"

ITEM_TYPES = (ITEM_TYPE_BEVERAGE, ITEM_TYPE_FOOD, ITEM_TYPE_OTHER)

UNCATEGORIZED = "Uncategorized"


# ---------------------------------------------------------------------------
# Segmenter output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Section:
    """A header plus the raw lines under it (blank lines kept as "")."""
    header: str
    lines: Tuple[str, ...] = ()
    implicit: bool = False  # True for the synthesized "Uncategorized" section


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ServingOption:
    size: str
    price: float

    def to_dict(self) -> Dict[str, Any]:
        return {"size": self.size, "price": self.price}


@dataclass(frozen=True)
class ParsedMenuItem:
    name: str
    category: str = ""
    item_type: str = ITEM_TYPE_OTHER
    price: float = 0.0
    description: Optional[str] = None
    confidence: int = 0
    # beverage-only
    spirit_type: Optional[str] = None
    beer_style: Optional[str] = None
    cocktail_ingredients: Tuple[str, ...] = ()
    alcohol_content: Optional[str] = None
    serving_style: Optional[str] = None
    is_non_alcoholic: Optional[bool] = None
    temperature: Optional[str] = None
    serving_options: Tuple[ServingOption, ...] = ()
    # wine-only
    grape_varieties: Tuple[str, ...] = ()
    vintage: Optional[int] = None
    wine_color: Optional[str] = None

    @property
    def is_beverage(self) -> bool:
        return self.item_type == ITEM_TYPE_BEVERAGE

    def enrichment_fields(self) -> Dict[str, Any]:
        """Populated beverage-only attributes, keyed by JSON name."""
        out: Dict[str, Any] = {}
        if self.spirit_type:
            out["spiritType"] = self.spirit_type
        if self.beer_style:
            out["beerStyle"] = self.beer_style
        if self.cocktail_ingredients:
            out["cocktailIngredients"] = list(self.cocktail_ingredients)
        if self.alcohol_content:
            out["alcoholContent"] = self.alcohol_content
        if self.serving_style:
            out["servingStyle"] = self.serving_style
        if self.temperature:
            out["temperature"] = self.temperature
        if self.serving_options:
            out["servingOptions"] = [o.to_dict() for o in self.serving_options]
        if self.grape_varieties:
            out["grapeVarieties"] = list(self.grape_varieties)
        if self.vintage:
            out["vintage"] = self.vintage
        if self.wine_color:
            out["wineColor"] = self.wine_color
        return out

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "name": self.name,
            "category": self.category,
            "itemType": self.item_type,
            "price": self.price,
            "confidence": self.confidence,
        }
        if self.description:
            out["description"] = self.description
        # Beverage keys are left out entirely for food/other items.
        if self.is_beverage:
            out.update(self.enrichment_fields())
            out["isNonAlcoholic"] = bool(self.is_non_alcoholic)
        return out


# ---------------------------------------------------------------------------
# Menu + result envelope
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParsedMenu:
    menu_name: str
    total_items_found: int = 0
    items: Tuple[ParsedMenuItem, ...] = ()
    processing_notes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "menuName": self.menu_name,
            "totalItemsFound": self.total_items_found,
            "items": [it.to_dict() for it in self.items],
            "processingNotes": list(self.processing_notes),
        }


@dataclass(frozen=True)
class ParseResult:
    success: bool
    data: Optional[ParsedMenu] = None
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def ok(cls, menu: ParsedMenu) -> "ParseResult":
        return cls(success=True, data=menu)

    @classmethod
    def failed(cls, *errors: str) -> "ParseResult":
        return cls(success=False, errors=tuple(errors) or ("unknown parse error",))

    def to_dict(self) -> Dict[str, Any]:
        if self.success and self.data is not None:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "errors": list(self.errors)}
