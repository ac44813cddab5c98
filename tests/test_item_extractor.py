"""
Item extractor: name / price / description from one item block.

Covers:
  - Name before price, description after price and on following lines
  - Price found on a later line
  - Missing price -> 0.0 plus a processing note naming the item
  - Blank name -> block skipped with a note
  - "Name - description £x" single-line form
  - Multi-price lines keep their size/price pairs in the description
  - Bare trailing decimal price fallback
  - Extracted items carry no category / beverage attributes yet
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from menu_engine.contracts import ITEM_TYPE_OTHER
from menu_engine.parsers.item_extractor import extract_item


class TestBasicExtraction:

    def test_name_price_description(self):
        item, notes = extract_item([
            "Rosé Negroni £10.35",
            "Mirabeau French rosé gin, Lillet rosé vermouth & Pampelle grapefruit apéritif",
        ])
        assert notes == []
        assert item.name == "Rosé Negroni"
        assert item.price == pytest.approx(10.35)
        assert item.description.startswith("Mirabeau French rosé gin")

    def test_multiple_description_lines_joined(self):
        item, _ = extract_item([
            "Punk IPA £5.80",
            "BrewDog hoppy India Pale Ale,",
            "   citrus notes   ",
        ])
        assert item.description == "BrewDog hoppy India Pale Ale, citrus notes"

    def test_no_description_is_none(self):
        item, _ = extract_item(["Chips £3.00"])
        assert item.description is None

    def test_text_after_price_is_description(self):
        item, _ = extract_item(["Guinness £5.80 Classic Irish stout"])
        assert item.name == "Guinness"
        assert item.description == "Classic Irish stout"

    def test_defaults_before_classification(self):
        item, _ = extract_item(["Chips £3.00"])
        assert item.category == ""
        assert item.item_type == ITEM_TYPE_OTHER
        assert item.spirit_type is None
        assert item.cocktail_ingredients == ()


class TestPriceFallbacks:

    def test_price_on_later_line(self):
        item, notes = extract_item([
            "Guinness Draft",
            "Classic Irish stout served on draft £5.80",
        ])
        assert notes == []
        assert item.name == "Guinness Draft"
        assert item.price == pytest.approx(5.80)
        assert item.description == "Classic Irish stout served on draft £5.80"

    def test_missing_price_defaults_to_zero_with_note(self):
        item, notes = extract_item(["House Special", "Ask your server"])
        assert item.price == 0.0
        assert notes == ['Price not found for "House Special"; defaulted to 0']

    def test_bare_trailing_price(self):
        item, notes = extract_item(["Mojito ........ 9.50"])
        assert notes == []
        assert item.name == "Mojito"
        assert item.price == pytest.approx(9.50)


class TestSkippedBlocks:

    def test_price_only_block_skipped(self):
        item, notes = extract_item(["£4.50"])
        assert item is None
        assert len(notes) == 1
        assert notes[0].startswith("Skipped block with no item name")

    def test_empty_block(self):
        item, notes = extract_item([])
        assert item is None
        assert notes == []


class TestSingleLineForms:

    def test_dash_separates_name_and_description(self):
        item, _ = extract_item(["Guinness Draft - Classic Irish stout served on draft £5.80"])
        assert item.name == "Guinness Draft"
        assert item.description == "Classic Irish stout served on draft"
        assert item.price == pytest.approx(5.80)

    def test_hyphenated_name_not_split(self):
        item, _ = extract_item(["Coca-Cola £2.50"])
        assert item.name == "Coca-Cola"

    def test_multi_price_line_keeps_pairs(self):
        item, _ = extract_item([
            "Stella Artois - Premium Belgian lager: Pint £6.50, Half Pint £3.25, Bottle £4.75",
        ])
        assert item.name == "Stella Artois"
        assert item.price == pytest.approx(6.50)
        assert item.description == "Premium Belgian lager: Pint £6.50, Half Pint £3.25, Bottle £4.75"

    def test_multi_price_line_size_moved_out_of_name(self):
        item, _ = extract_item(["Jameson Irish Whiskey Single £8.50, Double £15.00"])
        assert item.name == "Jameson Irish Whiskey"
        assert item.description == "Single £8.50, Double £15.00"
