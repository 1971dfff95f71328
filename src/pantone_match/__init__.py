from .colors import InvalidColorFormat
from .matcher import PantoneMatcher, get_default_matcher
from .models import (
    ColorMatchResult,
    HSLColor,
    PantoneColor,
    PantoneSearchResult,
    RGBColor,
)
from .palette import EmptyReferenceTable, PaletteValidationError, load_table

__all__ = [
    "ColorMatchResult",
    "EmptyReferenceTable",
    "HSLColor",
    "InvalidColorFormat",
    "PaletteValidationError",
    "PantoneColor",
    "PantoneMatcher",
    "PantoneSearchResult",
    "RGBColor",
    "get_default_matcher",
    "load_table",
]
