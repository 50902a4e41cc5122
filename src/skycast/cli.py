# connects input (city names or coordinates) to the pipeline and prints the result cards

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from .config import WeatherConfig
from .errors import ConfigError
from .models import Coordinates, Resolution
from .presenter import EMPTY_QUERY, WeatherScreen, render
from .service import WeatherPipeline, resolve_all

# first search the app shows when started without input
DEFAULT_CITY = "London"

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skycast", description="Show current weather for a city or coordinates.")
    parser.add_argument("cities", nargs="*", metavar="CITY", help=f"city names to look up (default: {DEFAULT_CITY})")
    parser.add_argument("--lat", type=float, help="latitude of your location")
    parser.add_argument("--lon", type=float, help="longitude of your location")
    parser.add_argument("--name", help="display name for --lat/--lon")
    parser.add_argument("--json", action="store_true", help="print the view as json")
    parser.add_argument("--workers", type=int, default=3, help="concurrent lookups for several cities")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser

def _emit(resolution: Resolution, as_json: bool) -> bool:
    if not resolution.ok:
        print(f"Error: {resolution.message}", file=sys.stderr)
        return False
    if as_json:
        print(json.dumps(resolution.view.to_dict(), ensure_ascii=False))
    else:
        print(render(resolution.view))
    return True

def _locate(pipeline: WeatherPipeline, args: argparse.Namespace) -> int:
    screen = WeatherScreen()
    screen.locate(pipeline, Coordinates(args.lat, args.lon), args.name)
    if screen.weather is None:
        print(f"Error: {screen.error}", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(screen.weather.to_dict(), ensure_ascii=False))
    else:
        print(render(screen.weather))
    return 0

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    if args.lat is not None and args.cities:
        parser.error("give either CITY names or --lat/--lon, not both")

    try:
        config = WeatherConfig.from_env()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    pipeline = WeatherPipeline(config)

    if args.lat is not None:
        return _locate(pipeline, args)

    queries: List[str] = [c.strip() for c in args.cities] or [DEFAULT_CITY]
    if not all(queries):
        print(f"Error: {EMPTY_QUERY}", file=sys.stderr)
        return 1

    results = resolve_all(pipeline, queries, max_workers=args.workers)
    ok = True
    for i, resolution in enumerate(results):
        if i and not args.json:
            print()
        ok = _emit(resolution, args.json) and ok
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
