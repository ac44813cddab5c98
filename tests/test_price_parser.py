"""
Price parser: currency prices, trailing bare prices, serving options.

Covers:
  - £ / $ / € prices anywhere on a line
  - Comma decimals (5,80 -> 5.80) and whole-number prices
  - Percentages and bare numbers are not currency prices
  - Trailing bare decimal prices with dot leaders
  - Size/price pairs on multi-price beverage lines
"""

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from menu_engine.parsers.price_parser import (
    extract_serving_options,
    find_price,
    find_trailing_price,
    has_currency_symbol,
    has_price,
    parse_price_value,
)


# ===========================================================================
# SECTION 1: Currency prices
# ===========================================================================

class TestFindPrice:

    @pytest.mark.parametrize("line,expected", [
        ("Rosé Negroni £10.35", 10.35),
        ("Cheeseburger $12.99", 12.99),
        ("Aperol Spritz €9,50", 9.50),
        ("Macallan 18 Year £45", 45.0),
        ("Punk IPA £ 5.80", 5.80),
        ("Macallan 25 Year £1,250.00", 1250.0),
        ("Jeroboam £1,250", 1250.0),
        ("Cuvée Prestige €1.250,00", 1250.0),
    ])
    def test_value(self, line, expected):
        hit = find_price(line)
        assert hit is not None
        assert hit[0] == pytest.approx(expected)

    def test_span_splits_name(self):
        line = "Rosé Negroni £10.35"
        value, start, end = find_price(line)
        assert line[:start].strip() == "Rosé Negroni"
        assert line[end:] == ""

    def test_thousands_separator_kept_whole(self):
        line = "Macallan 25 Year £1,250.00"
        value, start, end = find_price(line)
        assert value == pytest.approx(1250.0)
        assert line[:start].strip() == "Macallan 25 Year"
        assert end == len(line)

    def test_first_price_wins(self):
        value, _, _ = find_price("Pint £6.50, Half Pint £3.25")
        assert value == pytest.approx(6.50)

    def test_percentage_is_not_a_price(self):
        assert find_price("5.6% ABV, served on draft") is None

    def test_bare_number_is_not_a_currency_price(self):
        assert find_price("Macallan 18 Year") is None
        assert not has_price("Served 7 days a week")

    def test_empty_and_none(self):
        assert find_price("") is None
        assert find_price(None) is None


class TestHelpers:

    def test_parse_price_value_comma(self):
        assert parse_price_value("34,75") == pytest.approx(34.75)

    def test_parse_price_value_grouped(self):
        assert parse_price_value("1,250.00") == pytest.approx(1250.0)
        assert parse_price_value("12,345") == pytest.approx(12345.0)
        assert parse_price_value("1.250,50") == pytest.approx(1250.50)

    def test_has_currency_symbol(self):
        assert has_currency_symbol("£")
        assert has_currency_symbol("costs $3")
        assert not has_currency_symbol("BEERS & ALES")


# ===========================================================================
# SECTION 2: Trailing bare prices
# ===========================================================================

class TestTrailingPrice:

    def test_dot_leaders(self):
        value, start, _ = find_trailing_price("Mojito ........ 9.50")
        assert value == pytest.approx(9.50)
        assert "Mojito ........ 9.50"[:start].strip() == "Mojito"

    def test_requires_two_decimals(self):
        assert find_trailing_price("Macallan 18") is None

    def test_not_mid_line(self):
        assert find_trailing_price("4.20 pint of stout") is None

    def test_grouped_thousands(self):
        line = "Dom Perignon P2 ..... 1,250.00"
        value, start, _ = find_trailing_price(line)
        assert value == pytest.approx(1250.0)
        assert line[:start] == "Dom Perignon P2"

    def test_long_dot_leader_line_is_fast(self):
        line = "Mojito " + "." * 200_000 + " x"
        t0 = time.perf_counter()
        assert find_trailing_price(line) is None
        assert time.perf_counter() - t0 < 1.0

    def test_long_dot_leader_line_with_price(self):
        value, start, _ = find_trailing_price("Mojito " + "." * 200_000 + " 9.50")
        assert value == pytest.approx(9.50)
        assert start == len("Mojito")


# ===========================================================================
# SECTION 3: Serving options
# ===========================================================================

class TestServingOptions:

    def test_pint_half_bottle(self):
        opts = extract_serving_options("Premium Belgian lager: Pint £6.50, Half Pint £3.25, Bottle £4.75")
        assert [(o.size, o.price) for o in opts] == [
            ("Pint", 6.50), ("Half Pint", 3.25), ("Bottle", 4.75),
        ]

    def test_measures(self):
        opts = extract_serving_options("Single £8.50, Double £15.00, Triple £22.00")
        assert [o.size for o in opts] == ["Single", "Double", "Triple"]
        assert opts[1].price == pytest.approx(15.0)

    def test_volume_suffix_skipped(self):
        opts = extract_serving_options("Draft Pint £6.75, Bottle 330ml £4.50, Can 440ml £5.25")
        assert [(o.size, o.price) for o in opts] == [
            ("Pint", 6.75), ("Bottle", 4.50), ("Can", 5.25),
        ]

    def test_wine_measures(self):
        opts = extract_serving_options("175ml £7.50, 250ml £9.80, Bottle £28")
        assert [o.size for o in opts] == ["175ml", "250ml", "Bottle"]

    def test_grouped_prices(self):
        opts = extract_serving_options("Glass £95, Bottle £1,250.00")
        assert [(o.size, o.price) for o in opts] == [("Glass", 95.0), ("Bottle", 1250.0)]

    def test_duplicate_size_keeps_first(self):
        opts = extract_serving_options("Pint £5.00 or Pint £6.00")
        assert len(opts) == 1
        assert opts[0].price == pytest.approx(5.00)

    def test_no_sizes(self):
        assert extract_serving_options("Classic Irish stout served on draft £5.80") == []
