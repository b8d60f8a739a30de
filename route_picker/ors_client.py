"""
OpenRouteService directions client.

Sole responsibility: talk to ORS over HTTP. Converts internal (lat, lon) points
to ORS [lon, lat] pairs and returns the route geometry.
"""

import logging
from typing import Any, Dict, List, Sequence

import requests

from .codec import decode_polyline
from .config import DEFAULT_ORS_BASE_URL
from .errors import InvalidInput, NoRouteFound, UpstreamFailure
from .geo import Point

logger = logging.getLogger(__name__)


class OpenRouteServiceClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_ORS_BASE_URL,
        profile: str = "foot-walking",
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.profile = profile
        self.timeout = timeout

    def format_coordinates(self, waypoints: Sequence[Point]) -> List[List[float]]:
        """(lat, lon) -> ORS [lon, lat]."""
        return [[lon, lat] for lat, lon in waypoints]

    def _post(self, waypoints: Sequence[Point]) -> Dict[str, Any]:
        if len(waypoints) < 2:
            raise InvalidInput("At least two waypoints are required to compute a route")
        url = f"{self.base_url}/v2/directions/{self.profile}"
        try:
            response = requests.post(
                url,
                json={"coordinates": self.format_coordinates(waypoints)},
                headers={"Authorization": self.api_key, "Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamFailure(f"ORS request failed: {e}") from e
        if not response.ok:
            raise UpstreamFailure(
                f"ORS request failed: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamFailure("ORS returned a non-JSON body", status_code=response.status_code) from e

    def directions(self, waypoints: Sequence[Point]) -> str:
        """Encoded geometry of the first route through the waypoints."""
        data = self._post(waypoints)
        routes = data.get("routes") if isinstance(data, dict) else None
        first = routes[0] if isinstance(routes, list) and routes else None
        geometry = first.get("geometry") if isinstance(first, dict) else None
        if not geometry or not isinstance(geometry, str):
            raise NoRouteFound("No route geometry found in ORS response.")
        return geometry

    def route(self, waypoints: Sequence[Point]) -> List[Point]:
        """Routed coordinates through the waypoints. Usable as a candidate router."""
        coords = decode_polyline(self.directions(waypoints))
        logger.debug("ORS %s route: %d waypoints -> %d points", self.profile, len(waypoints), len(coords))
        return coords
