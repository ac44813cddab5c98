# menu_engine/parsers/item_extractor.py
"""
Item Extractor

Turns one item block (the non-blank lines of a single menu entry) into a
ParsedMenuItem with name, price and description:

  Rosé Negroni £10.35                      <- name + price
  Mirabeau French rosé gin, Lillet ...     <- description

  - The first currency price on the first line splits name (before) from
    description (after + following lines).
  - No currency price there: a bare trailing decimal ("Mojito 9.50") is
    accepted, then the first currency price on any later line.
  - Still nothing: price 0.0 and a processing note naming the item.
  - "Name - description £5.80" on one line splits at the spaced dash.
  - An empty name drops the block with a note.

Category and item type are left at their defaults for the classifier.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from menu_engine.contracts import ParsedMenuItem
from menu_engine.parsers.beverage_vocab import SERVING_SIZE_MAP
from menu_engine.parsers.price_parser import find_price, find_trailing_price, has_price

_NAME_EDGE_CHARS = " \t-–—:|·•*"

# Serving size closing the name part of a multi-price line ("... Pint £6.50")
_TRAILING_SIZE_RE = re.compile(
    r"(?<!\w)(?:"
    + "|".join(re.escape(w) for w in sorted(SERVING_SIZE_MAP, key=len, reverse=True))
    + r"|\d{2,4}\s?ml)\s*[:\-–]?\s*$",
    re.IGNORECASE,
)

# "Guinness Draft - Classic Irish stout" -> name / description
_NAME_DESC_SPLIT_RE = re.compile(r"\s+[-–—]\s+")

_WHITESPACE_RE = re.compile(r"\s+")


def _clean_name(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip(_NAME_EDGE_CHARS).strip()


def _join_description(parts: Sequence[str]) -> Optional[str]:
    joined = _WHITESPACE_RE.sub(" ", " ".join(p.strip() for p in parts if p and p.strip())).strip()
    joined = joined.strip(" ,;-–—:|")
    return joined or None


def _split_first_line(first: str) -> Tuple[str, str, Optional[float]]:
    """Return (name_part, remainder, price) for the opening line.

    On a multi-price line ("Stella Artois Pint £6.50, Half Pint £3.25") the
    first price stays in the remainder, together with a serving size that
    directly precedes it, so the size/price pairs survive for enrichment.
    """
    hit = find_price(first)
    if hit is None:
        hit = find_trailing_price(first)
    if hit is None:
        return first, "", None
    value, start, end = hit
    if not has_price(first[end:]):
        return first[:start], first[end:], value

    name_part = first[:start]
    m = _TRAILING_SIZE_RE.search(name_part)
    if m and name_part[:m.start()].strip():
        start = m.start()
        name_part = first[:start]
    return name_part, first[start:], value


def extract_item(lines: Sequence[str]) -> Tuple[Optional[ParsedMenuItem], List[str]]:
    """
    Extract one item from a block.

    Returns (item, notes). item is None when the block has no usable name;
    notes hold any processing notes the block produced.
    """
    notes: List[str] = []
    block = [ln.strip() for ln in (lines or []) if ln and ln.strip()]
    if not block:
        return None, notes

    name_part, remainder, price = _split_first_line(block[0])
    rest = block[1:]

    if price is None:
        for ln in rest:
            hit = find_price(ln)
            if hit is not None:
                price = hit[0]
                break

    desc_parts: List[str] = []
    name_part = _WHITESPACE_RE.sub(" ", name_part)
    split = _NAME_DESC_SPLIT_RE.split(name_part, maxsplit=1)
    if len(split) == 2 and split[0].strip() and split[1].strip():
        name_part = split[0]
        desc_parts.append(split[1])
    desc_parts.append(remainder)
    desc_parts.extend(rest)

    name = _clean_name(name_part)
    if not name:
        notes.append(f'Skipped block with no item name: "{block[0][:60]}"')
        return None, notes

    if price is None:
        notes.append(f'Price not found for "{name}"; defaulted to 0')
        price = 0.0

    item = ParsedMenuItem(
        name=name,
        price=price,
        description=_join_description(desc_parts),
    )
    return item, notes
