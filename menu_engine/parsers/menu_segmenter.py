# menu_engine/parsers/menu_segmenter.py
"""
Menu Segmenter

Splits raw menu text into sections (an ALL CAPS header plus the lines under
it) and each section into item blocks.

  - A header line is entirely non-lowercase letters plus spaces, "&" and a
    little punctuation, with no digits and no price.
  - Blank lines separate item blocks; they never start a section.
  - Text with no header at all becomes one implicit "Uncategorized" section.
    Lines that appear before the first header get their own implicit
    "Uncategorized" section ahead of the named ones.

Never raises: anything it cannot place ends up in an "Uncategorized" section.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from menu_engine.contracts import Section, UNCATEGORIZED
from menu_engine.parsers.price_parser import (
    SERVING_SIZE_LABEL_RE,
    find_price,
    find_trailing_price,
    has_currency_symbol,
    has_price,
)

_HEADER_PUNCT = set(" &'’-/.:")

# A block-opening "Name £9.50" line has at most this many words before the price
_MAX_NAME_WORDS = 8


# ---------------------------------------------------------------------------
# Header detection
# ---------------------------------------------------------------------------

def is_section_header(line: str) -> bool:
    """True if the line reads as a section header ("BEERS & ALES")."""
    s = (line or "").strip()
    if not s:
        return False
    if has_currency_symbol(s) or has_price(s) or find_trailing_price(s):
        return False
    letters = [c for c in s if c.isalpha()]
    if len(letters) < 2:
        return False
    if any(c.islower() for c in letters):
        return False
    return all(c.isalpha() or c in _HEADER_PUNCT for c in s)


def _clean_header(line: str) -> str:
    return line.strip().rstrip(":").strip()


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _trim_blank_edges(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start]:
        start += 1
    while end > start and not lines[end - 1]:
        end -= 1
    return lines[start:end]


def segment(raw_text: str) -> List[Section]:
    """Split raw menu text into Sections in document order."""
    text = raw_text if isinstance(raw_text, str) else ""
    if not text.strip():
        return []

    sections: List[Section] = []
    header: Optional[str] = None
    buf: List[str] = []

    def _close() -> None:
        body = _trim_blank_edges(buf)
        if header is not None:
            sections.append(Section(header=header, lines=tuple(body)))
        elif body:
            sections.append(Section(header=UNCATEGORIZED, lines=tuple(body), implicit=True))

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if is_section_header(line):
            _close()
            header = _clean_header(line)
            buf = []
            continue
        buf.append(line)
    _close()

    return sections


# ---------------------------------------------------------------------------
# Item blocks
# ---------------------------------------------------------------------------

# Lines that extend the item above them rather than start a new one
_ADDON_RE = re.compile(r"^(?:add|extra|plus|with|upgrade|make it|\+)(?!\w)", re.IGNORECASE)


def _opens_item(line: str) -> bool:
    """
    True for a self-contained "Name £9.50" line: the price closes the line
    and a short, comma-free name precedes it. Serving-size lines ("Pint",
    "175ml", "Bottle 330ml") and add-ons ("Add Baileys") never open an item.
    """
    hit = find_price(line)
    if hit is None:
        return False
    _, start, end = hit
    if line[end:].strip():
        return False
    name = line[:start].strip().rstrip("-–:|").strip()
    if not name or "," in name:
        return False
    if not (name[0].isupper() or name[0].isdigit()):
        return False
    if SERVING_SIZE_LABEL_RE.match(name) or _ADDON_RE.match(name):
        return False
    return len(name.split()) <= _MAX_NAME_WORDS


def _block_has_priced_opener(block: Sequence[str]) -> bool:
    return bool(block) and (find_price(block[0]) is not None or find_trailing_price(block[0]) is not None)


def split_item_blocks(lines: Sequence[str]) -> List[List[str]]:
    """
    Group section lines into item blocks.

    Blank lines always end a block. Inside a run of non-blank lines a new
    block also starts at a "Name £price" line once the current block already
    opened with a priced line, so flat lists without spacing still split
    one item per line. A run is therefore not always a single block: a
    priced line such as "Irish Coffee £7.50" directly under another item
    becomes its own item. Size/price lines and add-on lines ("Add Baileys
    £2.00") stay with the item above.
    """
    blocks: List[List[str]] = []
    current: List[str] = []
    for raw in lines:
        line = (raw or "").strip()
        if not line:
            if current:
                blocks.append(current)
                current = []
            continue
        if current and _block_has_priced_opener(current) and _opens_item(line):
            blocks.append(current)
            current = []
        current.append(line)
    if current:
        blocks.append(current)
    return blocks
