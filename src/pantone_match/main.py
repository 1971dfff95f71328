from __future__ import annotations

import argparse
import json
import sys
from typing import Any

import requests

from .buckets import get_distance_bucket
from .config import get_settings
from .io import read_image_rgba, write_result_json
from .log import get_logger, setup_logging
from .matcher import PantoneMatcher
from .palette import load_table

# Fixed name: under `python -m`, __name__ is "__main__".
logger = get_logger("pantone_match.main")


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--palette",
        default=settings.palette_path,
        help="Path to a custom Pantone reference table (.csv/.json).",
    )
    common.add_argument(
        "--out",
        default=None,
        help="Optional JSON output path. If omitted, prints JSON to stdout.",
    )

    parser = argparse.ArgumentParser(
        prog="pantone-match",
        description="Match colors and artwork to the nearest Pantone references.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    match = subparsers.add_parser(
        "match", parents=[common], help="Find the closest Pantone color to a hex color."
    )
    match.add_argument("hex", help="Hex color such as '#C8102E' or 'c8102e'.")

    nearest = subparsers.add_parser(
        "nearest", parents=[common], help="List the nearest Pantone colors to a hex color."
    )
    nearest.add_argument("hex", help="Hex color such as '#C8102E'.")
    nearest.add_argument(
        "--count",
        type=int,
        default=settings.nearest_count,
        help="Maximum number of matches to return.",
    )

    complement = subparsers.add_parser(
        "complement",
        parents=[common],
        help="Match the RGB complement (255 - channel) of a hex color.",
    )
    complement.add_argument("hex", help="Hex color such as '#FFFFFF'.")

    search = subparsers.add_parser(
        "search", parents=[common], help="Search Pantone colors by code or name."
    )
    search.add_argument("query", help="Code or name fragment, e.g. '186C' or 'navy'.")
    search.add_argument(
        "--by",
        choices=("code", "name"),
        default="code",
        help="Field to search (default: code).",
    )

    family = subparsers.add_parser(
        "family", parents=[common], help="List Pantone colors in a color family."
    )
    family.add_argument("family", help="Family such as red, blue, gray or brown.")

    lookup = subparsers.add_parser(
        "lookup", parents=[common], help="Look up a Pantone color by its exact code."
    )
    lookup.add_argument("code", help="Pantone code, whitespace and case insensitive.")

    analyze = subparsers.add_parser(
        "analyze",
        parents=[common],
        help="Match the dominant colors of an image to Pantone colors.",
    )
    analyze.add_argument(
        "--image", required=True, help="Path or URL to the input image."
    )

    return parser


def _run(args: argparse.Namespace, matcher: PantoneMatcher) -> tuple[Any, int]:
    if args.command == "match":
        return _with_bucket(matcher.find_closest_pantone(args.hex).to_dict()), 0

    if args.command == "nearest":
        results = matcher.find_nearest_colors(args.hex, count=args.count)
        return [_with_bucket(result.to_dict()) for result in results], 0

    if args.command == "complement":
        return _with_bucket(matcher.get_complementary_color(args.hex).to_dict()), 0

    if args.command == "search":
        if args.by == "name":
            return matcher.search_by_name(args.query).to_dict(), 0
        return matcher.search_by_code(args.query).to_dict(), 0

    if args.command == "family":
        colors = matcher.get_colors_by_family(args.family)
        return {
            "family": args.family,
            "colors": [color.to_dict() for color in colors],
        }, 0

    if args.command == "lookup":
        entry = matcher.get_pantone_by_code(args.code)
        if entry is None:
            return None, 1
        return entry.to_dict(), 0

    if args.command == "analyze":
        pixels, width, height = read_image_rgba(args.image)
        results = matcher.analyze_image_colors(pixels, width, height)
        return {
            "image": args.image,
            "width": width,
            "height": height,
            "colors": [_with_bucket(result.to_dict()) for result in results],
        }, 0

    raise ValueError(f"unknown command: {args.command}")


def _with_bucket(payload: dict[str, Any]) -> dict[str, Any]:
    payload["bucket"] = get_distance_bucket(payload["distance"]).label
    return payload


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        table = load_table(args.palette) if args.palette else None
        matcher = PantoneMatcher(table)
        payload, exit_code = _run(args, matcher)
    except (ValueError, OSError, requests.RequestException) as exc:
        logger.warning("command_failed", command=args.command, error=str(exc))
        parser.error(str(exc))

    if args.out:
        write_result_json(payload, args.out)
    else:
        print(json.dumps(payload, indent=2))

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
