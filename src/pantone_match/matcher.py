from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

import numpy as np

from .colors import (
    color_distance,
    hex_to_rgb,
    match_quality,
    rgb_to_hex,
    rgb_to_hsl,
)
from .default_table import DEFAULT_PANTONE_TABLE
from .extract import TOP_COLORS, PixelBuffer, count_quantized_colors
from .log import get_logger
from .models import (
    ColorMatchResult,
    HSLColor,
    MatchQuality,
    PantoneColor,
    PantoneSearchResult,
    RGBColor,
)
from .palette import TableRecord, build_table

logger = get_logger(__name__)

FAMILY_SYNONYMS: dict[str, tuple[str, ...]] = {
    "red": ("red", "scarlet", "vermillion"),
    "blue": ("blue", "cyan", "sky"),
    "green": ("green", "emerald", "lime"),
    "yellow": ("yellow", "gold", "lemon"),
    "purple": ("purple", "violet", "plum"),
    "orange": ("orange", "tangerine", "pumpkin"),
    "gray": ("gray", "grey", "silver"),
    "brown": ("brown", "coffee", "chocolate"),
}


class PantoneMatcher:
    """Nearest-match lookups against a fixed table of Pantone colors.

    Distances are plain Euclidean distances in RGB space. The table is
    fixed at construction, so one instance can be shared freely.
    """

    def __init__(self, table: Iterable[TableRecord] | None = None) -> None:
        if table is None:
            table = DEFAULT_PANTONE_TABLE
        self._table = build_table(table)
        self._table_rgb = np.asarray(
            [hex_to_rgb(entry.hex).as_tuple() for entry in self._table],
            dtype=np.int64,
        )
        logger.debug("pantone_matcher_ready", table_size=len(self._table))

    def __len__(self) -> int:
        return len(self._table)

    # Conversions

    def hex_to_rgb(self, hex_value: str) -> RGBColor:
        return hex_to_rgb(hex_value)

    def rgb_to_hex(self, rgb: RGBColor) -> str:
        return rgb_to_hex(rgb)

    def rgb_to_hsl(self, rgb: RGBColor) -> HSLColor:
        return rgb_to_hsl(rgb)

    def get_color_distance(self, hex1: str, hex2: str) -> float:
        return color_distance(hex1, hex2)

    def get_match_quality(self, distance: float) -> MatchQuality:
        return match_quality(distance)

    # Matching

    def find_closest_pantone(self, hex_value: str) -> ColorMatchResult:
        rgb = hex_to_rgb(hex_value)
        distances = self._distances(rgb)
        # argmin keeps the first entry on ties, i.e. table order wins.
        best_idx = int(np.argmin(distances))
        return self._result(best_idx, float(distances[best_idx]), rgb)

    def rgb_to_pantone(self, rgb: RGBColor) -> ColorMatchResult:
        return self.find_closest_pantone(rgb_to_hex(rgb))

    def find_nearest_colors(self, hex_value: str, count: int = 5) -> list[ColorMatchResult]:
        rgb = hex_to_rgb(hex_value)
        distances = self._distances(rgb)
        ordered = np.argsort(distances, kind="stable")[: max(0, count)]
        return [self._result(int(idx), float(distances[idx]), rgb) for idx in ordered]

    def get_complementary_color(self, hex_value: str) -> ColorMatchResult:
        rgb = hex_to_rgb(hex_value)
        complement = RGBColor(r=255 - rgb.r, g=255 - rgb.g, b=255 - rgb.b)
        return self.rgb_to_pantone(complement)

    def analyze_image_colors(
        self,
        pixel_data: PixelBuffer,
        width: int,
        height: int,
    ) -> list[ColorMatchResult]:
        """Match the most frequent colors of a flat RGBA buffer.

        Up to ~10,000 pixels are sampled, pixels with alpha below 128 are
        skipped and channels are rounded to multiples of 32 before counting.
        The ten most frequent buckets are matched in descending frequency.
        """
        buckets = count_quantized_colors(pixel_data, width, height, limit=TOP_COLORS)
        return [self.rgb_to_pantone(rgb) for rgb, _ in buckets]

    # Search

    def search_by_code(self, query: str) -> PantoneSearchResult:
        normalized_query = " ".join(query.lower().split())
        compact_query = normalized_query.replace(" ", "")

        matches = [
            entry
            for entry in self._table
            if normalized_query in entry.code.lower()
            or _compact(entry.code) == compact_query
        ]
        return PantoneSearchResult(matches=matches, query=normalized_query)

    def search_by_name(self, query: str) -> PantoneSearchResult:
        normalized_query = query.strip().lower()
        matches = [entry for entry in self._table if normalized_query in entry.name.lower()]
        return PantoneSearchResult(matches=matches, query=normalized_query)

    def get_pantone_by_code(self, code: str) -> PantoneColor | None:
        normalized_code = _compact(code)
        for entry in self._table:
            if _compact(entry.code) == normalized_code:
                return entry
        return None

    def validate_pantone_code(self, code: str) -> bool:
        return self.get_pantone_by_code(code) is not None

    def get_colors_by_family(self, family: str) -> list[PantoneColor]:
        family_lower = family.lower()
        keywords = FAMILY_SYNONYMS.get(family_lower, ()) + (family_lower,)
        return [
            entry
            for entry in self._table
            if any(keyword in entry.name.lower() for keyword in keywords)
        ]

    def get_all_colors(self) -> list[PantoneColor]:
        return list(self._table)

    def get_color_count(self) -> int:
        return len(self._table)

    def _distances(self, rgb: RGBColor) -> np.ndarray:
        delta = self._table_rgb - np.asarray(rgb.as_tuple(), dtype=np.int64)
        return np.sqrt(np.sum(np.square(delta), axis=1).astype(np.float64))

    def _result(self, idx: int, distance: float, rgb: RGBColor) -> ColorMatchResult:
        return ColorMatchResult(
            pantone=self._table[idx],
            distance=distance,
            match_quality=match_quality(distance),
            rgb=rgb,
            hex=rgb_to_hex(rgb),
        )


@lru_cache
def get_default_matcher() -> PantoneMatcher:
    """Shared matcher over the bundled reference table."""
    return PantoneMatcher()


def _compact(value: str) -> str:
    return "".join(value.lower().split())
