"""CLI entry point for the web search and weather lookup tools."""

import argparse
import sys

from src.utils.logger import set_level
from src.weather.open_meteo import OpenMeteoWeather
from src.web.duckduckgo_search import DuckDuckGoSearch
from src.web.fetcher import close_client


def run_command(args: argparse.Namespace) -> str:
    """Dispatch one parsed command and return the text to print."""
    if args.command == "search":
        return DuckDuckGoSearch().search(" ".join(args.query))

    weather = OpenMeteoWeather()
    if args.command == "coords":
        return weather.resolve_coordinates(" ".join(args.location))

    if args.lat is not None and args.lon is not None:
        return weather.current_weather(args.lat, args.lon, args.name or "")
    if not args.location:
        return "❌ Indica una ubicación o bien --lat y --lon."
    return weather.lookup_by_name(" ".join(args.location))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Web search and weather lookups")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search the web (DuckDuckGo)")
    search.add_argument("query", nargs="+")

    coords = sub.add_parser("coords", help="Coordinates for a place name")
    coords.add_argument("location", nargs="+")

    weather = sub.add_parser("weather", help="Current weather for a place or coordinates")
    weather.add_argument("location", nargs="*")
    weather.add_argument("--lat", type=float)
    weather.add_argument("--lon", type=float)
    weather.add_argument("--name", help="Label shown instead of the coordinates")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level("DEBUG")

    try:
        print(run_command(args))
    finally:
        close_client()


if __name__ == "__main__":
    sys.exit(main())
