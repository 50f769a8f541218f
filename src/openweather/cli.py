# connects input (city -> query) to the client and prints the result in a single line

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

import requests
from dotenv import load_dotenv

from .client import Client, OpenWeatherError
from .models import Units
from .options import with_base_url, with_units

UNIT_CHOICES = {
    "standard": Units.STANDARD,
    "metric": Units.METRIC,
    "imperial": Units.IMPERIAL,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the current temperature for a city (reads OPEN_WEATHER_API_KEY).",
    )
    parser.add_argument("city", help="City name, e.g. 'Montreal' or 'London,GB'")
    parser.add_argument(
        "--units",
        choices=sorted(UNIT_CHOICES),
        default="metric",
        help="Unit system for the reading (default: metric)",
    )
    parser.add_argument("--base-url", default=None, help="Override the API host")
    parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # local development keeps the key in .env, deployments inject it directly
    load_dotenv()

    units = UNIT_CHOICES[args.units]
    opts = [with_units(units)]
    if args.base_url:
        opts.append(with_base_url(args.base_url))

    try:
        client = Client.from_env(*opts)
        loc, _ = client.current.by_city(args.city, timeout=args.timeout)
    except (OpenWeatherError, requests.RequestException) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if loc.weather is None:
        print(f"error: no temperature reading for {args.city!r}", file=sys.stderr)
        return 1

    print(f"It is currently {loc.weather.temperature:.1f} degrees {units.temperature_label} in {loc.name}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
