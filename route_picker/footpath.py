"""Walking path between two points over OSM footways: fetch, build graph, snap, Dijkstra."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from .builder import NodeId, build_graph, nearest_node, nearest_node_in_component, path_length_km, path_points
from .dijkstra import find_path
from .geo import Point
from .overpass import BoundingBox, bbox_covering

logger = logging.getLogger(__name__)

FetchElements = Callable[[BoundingBox], List[Dict[str, Any]]]


@dataclass(frozen=True)
class FootPath:
    nodes: List[NodeId]
    coordinates: List[Point]
    distance_km: float


def find_footpath(start: Point, end: Point, fetch_elements: FetchElements, margin_km: float = 0.5) -> FootPath:
    """Shortest footway path between the nodes nearest to start and end.

    The end is snapped to the closest node reachable from the start node.
    Raises NotFound if the area has no nodes.
    """
    bbox = bbox_covering([Point(*start), Point(*end)], margin_km)
    graph = build_graph(fetch_elements(bbox))
    src = nearest_node(Point(*start), graph.nodes)
    dst = nearest_node_in_component(Point(*end), graph, anchor=src)
    path = find_path(graph.adjacency, src, dst)
    dist = path_length_km(graph, path)
    logger.info("Footpath %s -> %s: %d nodes, %.3f km", src, dst, len(path), dist)
    return FootPath(nodes=path, coordinates=path_points(graph, path), distance_km=dist)
