"""Run: python -m route_picker [lat lon] [--distance KM] [--mode out-and-back|loop]
   With no coordinates, uses your approximate location (from IP). Saves route_map.html; open in browser.
"""
import argparse
import logging
import sys
from typing import List, Optional, Tuple

import requests

from .candidates import DEFAULT_BEARINGS, RouteMode, compute_candidate_routes
from .config import configure_logging, load_settings
from .errors import CandidateBatchError, InvalidInput
from .geo import Point
from .view_route import save_candidates_map

logger = logging.getLogger(__name__)

# default NYC
_DEFAULT_LAT, _DEFAULT_LON = 40.7128, -74.0060

# (url, latitude key, longitude key), tried in order
GEOIP_PROVIDERS: List[Tuple[str, str, str]] = [
    ("https://ipapi.co/json/", "latitude", "longitude"),
    ("http://ip-api.com/json/?fields=lat,lon", "lat", "lon"),
]


def get_user_location(timeout: float = 5) -> Optional[Point]:
    """Approximate start point from the caller's IP, or None if no provider answers."""
    for url, lat_key, lon_key in GEOIP_PROVIDERS:
        try:
            r = requests.get(url, timeout=timeout)
            r.raise_for_status()
            data = r.json()
            return Point(float(data[lat_key]), float(data[lon_key]))
        except (requests.RequestException, ValueError, TypeError, KeyError) as e:
            logger.debug("Geolocation via %s failed: %s", url, e)
    return None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="route_picker", description="Suggest candidate running routes.")
    p.add_argument("lat", type=float, nargs="?")
    p.add_argument("lon", type=float, nargs="?")
    p.add_argument("--distance", type=float, default=5.0, help="Desired distance in km (default 5)")
    p.add_argument("--mode", default=RouteMode.OUT_AND_BACK.value, choices=[m.value for m in RouteMode])
    p.add_argument("--bearings", type=float, nargs="+", default=list(DEFAULT_BEARINGS))
    p.add_argument("--output", default="route_map.html")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    if args.lat is not None and args.lon is not None:
        lat, lon = args.lat, args.lon
        print(f"Using location: {lat}, {lon}")
    else:
        loc = get_user_location()
        if loc:
            lat, lon = loc
            print(f"Using your location (from IP): {lat:.4f}, {lon:.4f}")
        else:
            lat, lon = _DEFAULT_LAT, _DEFAULT_LON
            print("Could not get your location; using New York. Pass lat lon to override.")

    try:
        client = settings.ors_client()
    except RuntimeError as e:
        print("Error:", e, file=sys.stderr)
        return 2

    start = Point(lat, lon)
    print(f"Computing {args.mode} routes of {args.distance} km...")
    try:
        routes = compute_candidate_routes(start, args.distance, args.mode, client.route, bearings=args.bearings)
    except InvalidInput as e:
        print("Error:", e, file=sys.stderr)
        return 2
    except CandidateBatchError as e:
        print(e, file=sys.stderr)
        return 1

    for r in routes:
        print(f"Bearing: {r.bearing:g}°, Color: {r.color}, points: {len(r.coordinates)}")
    out = save_candidates_map(routes, start, args.output)
    print("Map saved:", out)
    print("Open that file in your browser to see the routes.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
