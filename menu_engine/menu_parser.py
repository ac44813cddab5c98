# menu_engine/menu_parser.py
"""
Menu text parser facade.

Single entry point for the upload handlers:

    from menu_engine.menu_parser import parse_text

    result = parse_text(raw_text, "Bar Menu")
    if result.success:
        menu = result.data          # ParsedMenu
    else:
        result.errors               # ("Menu parsing failed: ...",)

Stage order is fixed:
  segment -> split_item_blocks -> extract_item -> classify -> enrich -> score
  -> remove_duplicate_items -> aggregate

parse_text() never raises. Recoverable problems (missing price, nameless
block, headerless text, repeated items) become processing notes; anything
unexpected is logged and returned as ParseResult(success=False).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from menu_engine.beverage_enricher import enrich
from menu_engine.category_infer import classify, infer_drink_kind
from menu_engine.contracts import (
    ITEM_TYPE_BEVERAGE,
    ParsedMenu,
    ParsedMenuItem,
    ParseResult,
    Section,
    UNCATEGORIZED,
)
from menu_engine.parsers.item_extractor import extract_item
from menu_engine.parsers.menu_segmenter import segment, split_item_blocks
from menu_engine.scoring.confidence import score

log = logging.getLogger(__name__)

DEFAULT_MENU_NAME = "Untitled Menu"

NOTE_NO_CONTENT = "No content found in menu text"
NOTE_NO_HEADERS = f'No section headers found; items grouped under "{UNCATEGORIZED}"'
NOTE_LEADING_TEXT = f'Text before the first section header grouped under "{UNCATEGORIZED}"'


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def aggregate(menu_name: str, items: Sequence[ParsedMenuItem], notes: Sequence[str]) -> ParsedMenu:
    """Assemble the final ParsedMenu; notes are passed through as given."""
    items = tuple(items)
    return ParsedMenu(
        menu_name=menu_name,
        total_items_found=len(items),
        items=items,
        processing_notes=tuple(notes),
    )


# ---------------------------------------------------------------------------
# Menu name
# ---------------------------------------------------------------------------

def derive_menu_name(menu_name: Optional[str], sections: Sequence[Section]) -> Tuple[str, Optional[str]]:
    """
    Return (name, note). A non-blank caller label wins; otherwise the first
    header mentioning "menu", then the first header, then a default.
    """
    if isinstance(menu_name, str) and menu_name.strip():
        return menu_name.strip(), None

    headers = [s.header for s in sections if not s.implicit]
    pick = next((h for h in headers if "menu" in h.lower()), None)
    if pick is None and headers:
        pick = headers[0]
    name = pick.title() if pick else DEFAULT_MENU_NAME
    return name, f'Menu name not supplied; using "{name}"'


# ---------------------------------------------------------------------------
# Per-section work
# ---------------------------------------------------------------------------

def build_item(extracted: ParsedMenuItem, section_header: str) -> ParsedMenuItem:
    """Classify, enrich and score one extracted item."""
    item_type, category = classify(extracted, section_header)
    item = replace(extracted, item_type=item_type, category=category or UNCATEGORIZED)
    if item_type == ITEM_TYPE_BEVERAGE:
        item = enrich(item, infer_drink_kind(category, item.name))
    return replace(item, confidence=score(item))


def parse_section(section: Section) -> Tuple[List[ParsedMenuItem], List[str]]:
    items: List[ParsedMenuItem] = []
    notes: List[str] = []
    for block in split_item_blocks(section.lines):
        extracted, block_notes = extract_item(block)
        notes.extend(block_notes)
        if extracted is None:
            continue
        items.append(build_item(extracted, section.header))
    if not items and not section.implicit:
        notes.append(f'Section "{section.header}" contains no items')
    return items, notes


# ---------------------------------------------------------------------------
# Duplicates
# ---------------------------------------------------------------------------

def remove_duplicate_items(items: Sequence[ParsedMenuItem]) -> Tuple[List[ParsedMenuItem], List[str]]:
    """Drop repeats of name + item type + price, keeping the first one."""
    kept: List[ParsedMenuItem] = []
    notes: List[str] = []
    seen = set()
    for item in items:
        key = (item.name.strip().lower(), item.item_type, item.price)
        if key in seen:
            notes.append(f'Removed duplicate item "{item.name}"')
            continue
        seen.add(key)
        kept.append(item)
    return kept, notes


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _run_pipeline(raw_text: Optional[str], menu_name: Optional[str]) -> ParsedMenu:
    if raw_text is None:
        raw_text = ""
    if not isinstance(raw_text, str):
        raise TypeError(f"menu text must be a string, not {type(raw_text).__name__}")

    if not raw_text.strip():
        name, name_note = derive_menu_name(menu_name, [])
        return aggregate(name, [], [n for n in (name_note, NOTE_NO_CONTENT) if n])

    sections = segment(raw_text)
    name, name_note = derive_menu_name(menu_name, sections)

    items: List[ParsedMenuItem] = []
    notes: List[str] = [name_note] if name_note else []

    if sections and all(s.implicit for s in sections):
        notes.append(NOTE_NO_HEADERS)
    elif any(s.implicit for s in sections):
        notes.append(NOTE_LEADING_TEXT)

    for section in sections:
        section_items, section_notes = parse_section(section)
        items.extend(section_items)
        notes.extend(section_notes)

    items, dup_notes = remove_duplicate_items(items)
    notes.extend(dup_notes)

    return aggregate(name, items, notes)


def parse_text(raw_text: str, menu_name: str = "") -> ParseResult:
    """Parse free-text menu content into a ParseResult (never raises)."""
    log.debug("Parsing menu text (%d chars) as %r",
              len(raw_text) if isinstance(raw_text, str) else -1, menu_name)
    try:
        menu = _run_pipeline(raw_text, menu_name)
    except Exception as e:
        log.exception("Menu parsing failed for %r", menu_name)
        return ParseResult.failed(f"Menu parsing failed: {e}")

    log.info("Parsed menu %r: %d items, %d notes",
             menu.menu_name, menu.total_items_found, len(menu.processing_notes))
    return ParseResult.ok(menu)
