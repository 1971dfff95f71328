from __future__ import annotations

import csv
import json
from collections.abc import Iterable, Mapping
from pathlib import Path

from .colors import InvalidColorFormat, hex_to_rgb, rgb_to_hex
from .log import get_logger
from .models import PantoneColor

logger = get_logger(__name__)

TableRecord = PantoneColor | Mapping[str, object]


class PaletteValidationError(ValueError):
    pass


class EmptyReferenceTable(PaletteValidationError):
    pass


class InvalidPaletteColor(PaletteValidationError, InvalidColorFormat):
    pass


def build_table(records: Iterable[TableRecord]) -> tuple[PantoneColor, ...]:
    entries: list[PantoneColor] = []
    for idx, record in enumerate(records, start=1):
        if isinstance(record, PantoneColor):
            entries.append(_canonical_entry(record))
        elif isinstance(record, Mapping):
            entries.append(_parse_entry(record, f"entry {idx}"))
        else:
            raise PaletteValidationError(
                f"entry {idx}: expected a PantoneColor or a mapping, got {type(record).__name__}"
            )

    if not entries:
        raise EmptyReferenceTable("reference table must contain at least one entry")
    return tuple(entries)


def load_table(path_like: str | Path) -> tuple[PantoneColor, ...]:
    path = Path(path_like)
    if not path.exists():
        raise PaletteValidationError(f"palette file does not exist: {path}")

    if path.suffix.lower() == ".csv":
        entries = _load_csv(path)
    elif path.suffix.lower() == ".json":
        entries = _load_json(path)
    else:
        raise PaletteValidationError(
            f"unsupported palette format '{path.suffix}'. Use .csv or .json"
        )

    if not entries:
        raise EmptyReferenceTable(f"palette has no usable entries: {path}")

    logger.info("palette_loaded", path=str(path), entries=len(entries))
    return tuple(entries)


def _load_csv(path: Path) -> list[PantoneColor]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise PaletteValidationError(f"palette csv has no header: {path}")

        return [
            _parse_entry(row, f"{path}:{idx}")
            for idx, row in enumerate(reader, start=2)
        ]


def _load_json(path: Path) -> list[PantoneColor]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PaletteValidationError(f"palette json at {path} is malformed: {exc}") from exc

    if isinstance(payload, dict):
        if "colors" not in payload or not isinstance(payload["colors"], list):
            raise PaletteValidationError(
                f"json palette at {path} must be a list or include a 'colors' list"
            )
        records = payload["colors"]
    elif isinstance(payload, list):
        records = payload
    else:
        raise PaletteValidationError(
            f"json palette at {path} must be a list or object with 'colors'"
        )

    entries: list[PantoneColor] = []
    for idx, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            raise PaletteValidationError(
                f"invalid palette entry at {path}:{idx} (expected object)"
            )
        entries.append(_parse_entry(record, f"{path}:{idx}"))
    return entries


def _parse_entry(raw_entry: Mapping[str, object], location: str) -> PantoneColor:
    normalized: dict[str, object] = {
        str(key).strip().lower(): value
        for key, value in raw_entry.items()
        if key is not None
    }

    code = _as_clean_str(normalized.get("code"))
    if not code:
        raise PaletteValidationError(f"{location}: missing required field 'code'")

    hex_value = _as_clean_str(normalized.get("hex"))
    if not hex_value:
        raise PaletteValidationError(f"{location}: missing required field 'hex'")

    name = _as_clean_str(normalized.get("name")) or code
    try:
        canonical_hex = rgb_to_hex(hex_to_rgb(hex_value))
    except InvalidColorFormat as exc:
        raise InvalidPaletteColor(f"{location}: {exc}") from exc

    return PantoneColor(code=code, hex=canonical_hex, name=name)


def _canonical_entry(entry: PantoneColor) -> PantoneColor:
    canonical_hex = rgb_to_hex(hex_to_rgb(entry.hex))
    if canonical_hex == entry.hex:
        return entry
    return PantoneColor(code=entry.code, hex=canonical_hex, name=entry.name)


def _as_clean_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None
