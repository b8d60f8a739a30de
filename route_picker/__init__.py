"""Candidate running routes: geodesic helpers, footway graph, Dijkstra, route candidates."""

from .builder import Edge, RoadGraph, build_graph, nearest_node, nearest_node_in_component
from .candidates import CandidateRoute, RouteMode, compute_candidate_routes, generate_candidates
from .codec import decode_polyline
from .dijkstra import find_path, path_found, shortest_path
from .errors import (
    CandidateBatchError,
    DecodeError,
    InvalidInput,
    NoRouteFound,
    NotFound,
    RoutePickerError,
    UpstreamFailure,
)
from .geo import Point, destination_point, haversine_km

__all__ = [
    "Point",
    "haversine_km",
    "destination_point",
    "Edge",
    "RoadGraph",
    "build_graph",
    "nearest_node",
    "nearest_node_in_component",
    "shortest_path",
    "path_found",
    "find_path",
    "RouteMode",
    "CandidateRoute",
    "generate_candidates",
    "compute_candidate_routes",
    "decode_polyline",
    "RoutePickerError",
    "InvalidInput",
    "NotFound",
    "NoRouteFound",
    "DecodeError",
    "UpstreamFailure",
    "CandidateBatchError",
]
