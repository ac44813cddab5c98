"""
Price Parser
Finds currency prices in menu lines and normalizes them to floats.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from menu_engine.contracts import ServingOption
from menu_engine.parsers.beverage_vocab import SERVING_SIZE_MAP, normalize_serving_size

CURRENCY_SYMBOLS = "£$€"

# Grouped thousands first ("1,250.00", "1.250,00"), then a plain amount with
# an optional comma or dot decimal ("5,80" -> 5.80)
_AMOUNT = (
    r"\d{1,3}(?:,\d{3})+(?:\.\d{1,2})?"
    r"|\d{1,3}(?:\.\d{3})+,\d{1,2}"
    r"|\d{1,4}(?:[.,]\d{1,2})?"
)
_GROUPED_AMOUNT_RE = re.compile(r"^\d{1,3}(?:,\d{3})+(?:\.\d{1,2})?$")
_DOT_GROUPED_AMOUNT_RE = re.compile(r"^\d{1,3}(?:\.\d{3})+,\d{1,2}$")

PRICE_RE = re.compile(r"[£$€]\s?(" + _AMOUNT + r")(?![\d])")

# Bare decimal price ending the line ("Mojito .... 9.50"). Dot leaders are
# trimmed off afterwards, keeping the match linear in the line length.
TRAILING_PRICE_RE = re.compile(
    r"(?<![\d.,%])(\d{1,3}(?:,\d{3})+\.\d{2}|\d{1,4}[.,]\d{2})\s*$"
)
_LEADER_CHARS = " \t.·…"

_SIZE_ALTS = "|".join(
    re.escape(w) for w in sorted(SERVING_SIZE_MAP, key=len, reverse=True)
)

# "<size> [330ml] [:-] £price", or "175ml £7.50"
SERVING_OPTION_RE = re.compile(
    r"(?<!\w)(?P<size>" + _SIZE_ALTS + r"|\d{2,4}\s?ml)(?!\w)"
    r"(?:\s+\d{2,4}\s?ml)?\s*[:\-–]?\s*[£$€]\s?(?P<price>" + _AMOUNT + r")(?![\d])",
    re.IGNORECASE,
)

# A whole label that is only a serving size: "Pint", "175ml", "Bottle 330ml"
SERVING_SIZE_LABEL_RE = re.compile(
    r"^(?:" + _SIZE_ALTS + r"|\d{2,4}\s?ml)(?:\s+\d{2,4}\s?ml)?$",
    re.IGNORECASE,
)


def parse_price_value(s: str) -> float:
    """Parse a price string: grouping commas dropped, comma decimals to dot."""
    s = s.strip()
    if _GROUPED_AMOUNT_RE.match(s):
        s = s.replace(",", "")
    elif _DOT_GROUPED_AMOUNT_RE.match(s):
        s = s.replace(".", "").replace(",", ".")
    else:
        s = s.replace(",", ".")
    return round(float(s), 2)


def find_price(text: str) -> Optional[Tuple[float, int, int]]:
    """Return (value, start, end) of the first currency price in text."""
    m = PRICE_RE.search(text or "")
    if not m:
        return None
    try:
        return parse_price_value(m.group(1)), m.start(), m.end()
    except ValueError:
        return None


def find_trailing_price(text: str) -> Optional[Tuple[float, int, int]]:
    """Return (value, start, end) for a bare decimal price ending the line.

    start is where the name text stops, before any dot leaders.
    """
    text = text or ""
    m = TRAILING_PRICE_RE.search(text)
    if not m:
        return None
    try:
        value = parse_price_value(m.group(1))
    except ValueError:
        return None
    start = len(text[:m.start()].rstrip(_LEADER_CHARS))
    return value, start, m.end()


def has_price(text: str) -> bool:
    return bool(PRICE_RE.search(text or ""))


def has_currency_symbol(text: str) -> bool:
    return any(c in CURRENCY_SYMBOLS for c in (text or ""))


def extract_serving_options(text: str) -> List[ServingOption]:
    """
    Pull size/price pairs out of multi-price beverage text.

      "Pint £6.50, Half Pint £3.25, Bottle £4.75"
        -> [Pint 6.50, Half Pint 3.25, Bottle 4.75]
      "Draft Pint £6.75, Bottle 330ml £4.50"
        -> [Pint 6.75, Bottle 4.50]

    Duplicate size labels keep the first price seen.
    """
    options: List[ServingOption] = []
    seen = set()
    for m in SERVING_OPTION_RE.finditer(text or ""):
        size = normalize_serving_size(m.group("size"))
        if size.lower() in seen:
            continue
        try:
            price = parse_price_value(m.group("price"))
        except ValueError:
            continue
        if price <= 0:
            continue
        seen.add(size.lower())
        options.append(ServingOption(size=size, price=price))
    return options
