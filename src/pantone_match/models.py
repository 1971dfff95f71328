from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

MatchQuality = Literal["exact", "good", "approximate", "poor"]


@dataclass(frozen=True)
class PantoneColor:
    code: str
    hex: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "hex": self.hex, "name": self.name}


@dataclass(frozen=True)
class RGBColor:
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def to_dict(self) -> dict[str, Any]:
        return {"r": int(self.r), "g": int(self.g), "b": int(self.b)}


@dataclass(frozen=True)
class HSLColor:
    h: int
    s: int
    l: int  # noqa: E741

    def to_dict(self) -> dict[str, Any]:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True)
class ColorMatchResult:
    pantone: PantoneColor
    distance: float
    match_quality: MatchQuality
    rgb: RGBColor
    hex: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "pantone": self.pantone.to_dict(),
            "distance": float(self.distance),
            "match_quality": self.match_quality,
            "rgb": self.rgb.to_dict(),
            "hex": self.hex,
        }


@dataclass(frozen=True)
class PantoneSearchResult:
    matches: list[PantoneColor]
    query: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "matches": [match.to_dict() for match in self.matches],
            "query": self.query,
        }
