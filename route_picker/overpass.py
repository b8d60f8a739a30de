"""
Overpass API client: fetch walkable ways (and their nodes) inside a bounding box.
Returns raw OSM elements for build_graph.
"""

import logging
from typing import Any, Dict, Iterable, List, NamedTuple

import requests

from .builder import elements_from_overpass
from .config import DEFAULT_OVERPASS_URL
from .errors import UpstreamFailure
from .geo import Point, destination_point

logger = logging.getLogger(__name__)

FOOT_HIGHWAYS = "footway|cycleway|path|pedestrian"


class BoundingBox(NamedTuple):
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float


def bbox_around(point: Point, radius_km: float) -> BoundingBox:
    """Box reaching radius_km north, east, south and west of point."""
    north = destination_point(point, radius_km, 0)
    east = destination_point(point, radius_km, 90)
    south = destination_point(point, radius_km, 180)
    west = destination_point(point, radius_km, 270)
    return BoundingBox(south.lat, west.lon, north.lat, east.lon)


def bbox_covering(points: Iterable[Point], margin_km: float = 0.5) -> BoundingBox:
    """Smallest box holding every point, padded by margin_km on each side."""
    boxes = [bbox_around(p, margin_km) for p in points]
    if not boxes:
        raise ValueError("bbox_covering needs at least one point")
    return BoundingBox(
        min(b.min_lat for b in boxes),
        min(b.min_lon for b in boxes),
        max(b.max_lat for b in boxes),
        max(b.max_lon for b in boxes),
    )


def build_query(bbox: BoundingBox, highways: str = FOOT_HIGHWAYS) -> str:
    return f"""
    [out:json];
    way
      ["highway"~"{highways}"]
      ({bbox.min_lat},{bbox.min_lon},{bbox.max_lat},{bbox.max_lon});
    (._;>;);
    out;
    """


class OverpassClient:
    def __init__(self, url: str = DEFAULT_OVERPASS_URL, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    def fetch(self, bbox: BoundingBox) -> Dict[str, Any]:
        """POST the footway query and return the decoded JSON response."""
        try:
            r = requests.post(self.url, data={"data": build_query(bbox)}, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamFailure(f"Overpass request failed: {e}") from e
        if not r.ok:
            raise UpstreamFailure(f"Overpass request failed: {r.status_code} {r.reason}", status_code=r.status_code)
        try:
            payload = r.json()
        except ValueError as e:
            raise UpstreamFailure("Overpass returned a non-JSON body", status_code=r.status_code) from e
        if not isinstance(payload, dict):
            raise UpstreamFailure("Overpass returned an unexpected JSON shape", status_code=r.status_code)
        return payload

    def fetch_elements(self, bbox: BoundingBox) -> List[Dict[str, Any]]:
        elements = elements_from_overpass(self.fetch(bbox))
        logger.info("Overpass returned %d elements for %s", len(elements), tuple(bbox))
        return elements
