from __future__ import annotations

import math

import pytest

from pantone_match.colors import InvalidColorFormat, color_distance
from pantone_match.default_table import DEFAULT_PANTONE_TABLE
from pantone_match.matcher import PantoneMatcher, get_default_matcher
from pantone_match.models import PantoneColor, RGBColor
from pantone_match.palette import EmptyReferenceTable

TIE_TABLE = [
    PantoneColor(code="T1", hex="#000010", name="Dark Blue Tint"),
    PantoneColor(code="T2", hex="#100000", name="Dark Red Tint"),
    PantoneColor(code="T3", hex="#FFFFFF", name="Paper White"),
]


def test_closest_match_for_exact_table_entry():
    result = PantoneMatcher().find_closest_pantone("#C8102E")

    assert result.pantone.code == "186 C"
    assert result.pantone.name == "True Red"
    assert result.distance == 0.0
    assert result.match_quality == "exact"
    assert result.rgb == RGBColor(r=200, g=16, b=46)
    assert result.hex == "#C8102E"


def test_closest_match_returns_canonical_query_hex():
    result = PantoneMatcher().find_closest_pantone("c8102e")

    assert result.hex == "#C8102E"
    assert result.pantone.code == "186 C"


def test_closest_match_minimizes_distance_over_table():
    matcher = PantoneMatcher()
    for query in ("#123456", "#ABCDEF", "#7F7F7F", "#F0A0C0", "#010203"):
        result = matcher.find_closest_pantone(query)
        best = min(color_distance(query, entry.hex) for entry in DEFAULT_PANTONE_TABLE)
        assert result.distance == best
        assert color_distance(query, result.pantone.hex) == best


def test_closest_match_breaks_ties_by_table_order():
    result = PantoneMatcher(TIE_TABLE).find_closest_pantone("#000000")
    reversed_result = PantoneMatcher(TIE_TABLE[1::-1]).find_closest_pantone("#000000")

    assert result.pantone.code == "T1"
    assert reversed_result.pantone.code == "T2"
    assert result.distance == 16.0
    assert result.match_quality == "good"


def test_duplicate_entries_are_tolerated():
    table = [
        PantoneColor(code="A", hex="#C8102E", name="First"),
        PantoneColor(code="A", hex="#C8102E", name="Second"),
    ]
    matcher = PantoneMatcher(table)

    assert matcher.get_color_count() == 2
    assert matcher.find_closest_pantone("#C8102E").pantone.name == "First"
    assert matcher.get_pantone_by_code("a").name == "First"


def test_closest_match_rejects_malformed_hex():
    with pytest.raises(InvalidColorFormat):
        PantoneMatcher().find_closest_pantone("#12345G")


def test_rgb_to_pantone_delegates_through_hex():
    result = PantoneMatcher().rgb_to_pantone(RGBColor(r=200, g=16, b=46))

    assert result.pantone.code == "186 C"
    assert result.hex == "#C8102E"


def test_rgb_to_pantone_clamps_out_of_range_channels():
    result = PantoneMatcher().rgb_to_pantone(RGBColor(r=300, g=256, b=999))

    assert result.rgb == RGBColor(r=255, g=255, b=255)
    assert result.pantone.code == "White"
    assert result.distance == 0.0


def test_nearest_colors_are_sorted_and_bounded():
    results = PantoneMatcher().find_nearest_colors("#C8102E", 5)

    assert len(results) == 5
    assert results[0].pantone.code == "186 C"
    distances = [result.distance for result in results]
    assert distances == sorted(distances)
    assert all(result.hex == "#C8102E" for result in results)
    assert all(result.rgb == RGBColor(r=200, g=16, b=46) for result in results)


def test_nearest_colors_default_count_is_five():
    assert len(PantoneMatcher().find_nearest_colors("#00A3E0")) == 5


def test_nearest_colors_are_limited_by_table_size():
    results = PantoneMatcher(TIE_TABLE).find_nearest_colors("#000000", 5)

    assert [result.pantone.code for result in results] == ["T1", "T2", "T3"]
    assert [result.match_quality for result in results] == ["good", "good", "poor"]


def test_nearest_colors_with_non_positive_count_is_empty():
    assert PantoneMatcher().find_nearest_colors("#000000", 0) == []
    assert PantoneMatcher().find_nearest_colors("#000000", -3) == []


def test_complementary_color_of_white_is_matched_against_black():
    result = PantoneMatcher().get_complementary_color("#FFFFFF")

    assert result.rgb == RGBColor(r=0, g=0, b=0)
    assert result.hex == "#000000"
    assert result.pantone.code == "433 C"
    assert result.pantone.name == "Onyx"
    assert result.match_quality == "poor"
    assert math.isclose(result.distance, math.sqrt(30**2 + 37**2 + 43**2))


def test_complementary_color_is_arithmetic_inverse():
    table = [
        PantoneColor(code="INV", hex="#37EFD1", name="Inverse"),
        PantoneColor(code="SRC", hex="#C8102E", name="Source"),
    ]
    result = PantoneMatcher(table).get_complementary_color("#C8102E")

    assert result.rgb == RGBColor(r=55, g=239, b=209)
    assert result.pantone.code == "INV"
    assert result.distance == 0.0


def test_matcher_exposes_conversion_helpers():
    matcher = PantoneMatcher(TIE_TABLE)

    assert matcher.hex_to_rgb("#0A0B0C") == RGBColor(r=10, g=11, b=12)
    assert matcher.rgb_to_hex(RGBColor(r=10, g=11, b=12)) == "#0A0B0C"
    assert matcher.rgb_to_hsl(RGBColor(r=255, g=0, b=0)).h == 0
    assert matcher.get_color_distance("#000000", "#000304") == 5.0
    assert matcher.get_match_quality(59.99) == "approximate"


def test_default_table_is_loaded_when_no_table_given():
    matcher = PantoneMatcher()

    assert matcher.get_color_count() == len(DEFAULT_PANTONE_TABLE) == 80
    assert len(matcher) == 80
    assert matcher.get_all_colors() == list(DEFAULT_PANTONE_TABLE)


def test_get_all_colors_returns_a_copy():
    matcher = PantoneMatcher(TIE_TABLE)
    colors = matcher.get_all_colors()
    colors.clear()

    assert matcher.get_color_count() == 3


def test_custom_table_accepts_mappings_and_canonicalizes_hex():
    matcher = PantoneMatcher(
        [
            {"code": "X 1", "hex": "c8102e", "name": "Mapped Red"},
            PantoneColor(code="X 2", hex="#0050a0", name="Mapped Blue"),
        ]
    )

    colors = matcher.get_all_colors()
    assert colors[0] == PantoneColor(code="X 1", hex="#C8102E", name="Mapped Red")
    assert colors[1].hex == "#0050A0"


def test_empty_table_fails_fast():
    with pytest.raises(EmptyReferenceTable):
        PantoneMatcher([])


def test_table_entry_with_invalid_hex_fails_construction():
    with pytest.raises(InvalidColorFormat):
        PantoneMatcher([PantoneColor(code="BAD", hex="#12", name="Broken")])


def test_default_matcher_is_shared():
    assert get_default_matcher() is get_default_matcher()
    assert get_default_matcher().get_color_count() == 80


def test_match_result_serializes_to_plain_data():
    payload = PantoneMatcher().find_closest_pantone("#C8102E").to_dict()

    assert payload == {
        "pantone": {"code": "186 C", "hex": "#C8102E", "name": "True Red"},
        "distance": 0.0,
        "match_quality": "exact",
        "rgb": {"r": 200, "g": 16, "b": 46},
        "hex": "#C8102E",
    }
