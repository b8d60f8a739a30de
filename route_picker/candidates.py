"""
Candidate route geometry: one waypoint list per bearing, routed concurrently.

Out-and-back: start -> point at half the distance -> start.
Loop: equilateral triangle, side = distance / 3, corners at bearing and bearing + 120.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import CandidateBatchError, InvalidInput, RoutePickerError, UpstreamFailure
from .geo import Point, destination_point

logger = logging.getLogger(__name__)

DEFAULT_BEARINGS: Tuple[float, ...] = (0.0, 45.0, 90.0)
DEFAULT_COLORS: Tuple[str, ...] = ("red", "blue", "green")
FALLBACK_COLOR = "black"
LOOP_TURN_DEG = 120.0

Router = Callable[[List[Point]], List[Point]]


class RouteMode(str, Enum):
    OUT_AND_BACK = "out-and-back"
    LOOP = "loop"

    @classmethod
    def parse(cls, value) -> "RouteMode":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("_", "-")
        for mode in cls:
            if mode.value == key:
                return mode
        raise InvalidInput(f"Unknown route mode {value!r}; expected 'out-and-back' or 'loop'")


@dataclass(frozen=True)
class CandidateRoute:
    bearing: float
    color: str
    coordinates: Tuple[Point, ...]
    waypoints: Tuple[Point, ...] = ()


def _check_request(desired_km: float, bearings: Sequence[float]) -> None:
    try:
        ok = math.isfinite(desired_km) and desired_km > 0
    except TypeError:
        ok = False
    if not ok:
        raise InvalidInput(f"Desired distance must be a positive number, got {desired_km!r}")
    if not bearings:
        raise InvalidInput("At least one bearing is required")


def waypoints_for(start: Point, desired_km: float, mode: RouteMode, bearing: float) -> List[Point]:
    start = Point(*start)
    if mode is RouteMode.OUT_AND_BACK:
        dest = destination_point(start, desired_km / 2, bearing)
        return [start, dest, start]
    side = desired_km / 3
    p1 = destination_point(start, side, bearing)
    p2 = destination_point(start, side, bearing + LOOP_TURN_DEG)
    return [start, p1, p2, start]


def generate_candidates(
    start: Point,
    desired_km: float,
    mode,
    bearings: Sequence[float] = DEFAULT_BEARINGS,
) -> List[List[Point]]:
    """One waypoint list per bearing, in bearing order."""
    _check_request(desired_km, bearings)
    mode = RouteMode.parse(mode)
    return [waypoints_for(start, desired_km, mode, b) for b in bearings]


def compute_candidate_routes(
    start: Point,
    desired_km: float,
    mode,
    router: Router,
    bearings: Sequence[float] = DEFAULT_BEARINGS,
    colors: Sequence[str] = DEFAULT_COLORS,
    allow_partial: bool = False,
    max_workers: Optional[int] = None,
) -> List[CandidateRoute]:
    """Route every candidate concurrently and collect results in bearing order.

    router(waypoints) returns the routed coordinates. By default any failed candidate
    fails the whole batch (CandidateBatchError, cause chained). With allow_partial the
    failed candidates are dropped; the batch still fails if none succeeded.
    """
    waypoint_lists = generate_candidates(start, desired_km, mode, bearings)
    mode = RouteMode.parse(mode)
    workers = max_workers or len(waypoint_lists)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(router, wps) for wps in waypoint_lists]
        outcomes = []
        for fut in futures:
            try:
                outcomes.append((fut.result(), None))
            except RoutePickerError as e:
                outcomes.append((None, e))
            except Exception as e:
                # unexpected router errors still fail only this candidate
                wrapped = UpstreamFailure(f"Router failed: {e!r}")
                wrapped.__cause__ = e
                outcomes.append((None, wrapped))

    routes: List[CandidateRoute] = []
    first_error = None
    for idx, (bearing, wps, (coords, err)) in enumerate(zip(bearings, waypoint_lists, outcomes)):
        if err is not None:
            logger.warning("Candidate %s route at bearing %s failed: %s", mode.value, bearing, err)
            if first_error is None:
                first_error = (bearing, err)
            continue
        color = colors[idx] if idx < len(colors) else FALLBACK_COLOR
        routes.append(CandidateRoute(bearing, color, tuple(Point(*c) for c in coords), tuple(wps)))

    if first_error is not None and (not allow_partial or not routes):
        bearing, err = first_error
        raise CandidateBatchError(f"Error computing routes: {err}", bearing=bearing) from err

    logger.info("Computed %d %s candidate routes", len(routes), mode.value)
    return routes
