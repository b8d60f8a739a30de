"""
Road graph from raw OSM elements, and nearest-node lookup.
Nodes keyed by int OSM id, edges weighted by haversine distance in km.
Uses: numpy, networkx.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, NamedTuple

import networkx as nx
import numpy as np

from .errors import NotFound
from .geo import Point, haversine_km, haversine_km_many

logger = logging.getLogger(__name__)

NodeId = int


class Edge(NamedTuple):
    target: NodeId
    weight: float


NodeMap = Dict[NodeId, Point]
Graph = Dict[NodeId, List[Edge]]


@dataclass(frozen=True)
class RoadGraph:
    """One graph snapshot: node positions plus undirected adjacency lists."""

    nodes: NodeMap
    adjacency: Graph

    @property
    def edge_count(self) -> int:
        """Undirected edges, parallel edges counted separately."""
        return sum(len(edges) for edges in self.adjacency.values()) // 2

    def to_networkx(self) -> nx.MultiGraph:
        G = nx.MultiGraph()
        for node_id, p in self.nodes.items():
            G.add_node(node_id, lat=p.lat, lon=p.lon)
        for u, edges in self.adjacency.items():
            loops = 0
            for v, w in edges:
                # each undirected edge is stored once per endpoint
                if u < v:
                    G.add_edge(u, v, weight=w)
                elif u == v:
                    loops += 1
                    if loops % 2:
                        G.add_edge(u, v, weight=w)
        return G


# ---------------------------------------------------------------------------
# Boundary with the map-data provider
# ---------------------------------------------------------------------------

def _node_id(raw: Any) -> NodeId:
    return int(raw)


def elements_from_overpass(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return the element list of an Overpass JSON response (empty if absent)."""
    return list(payload.get("elements") or [])


# ---------------------------------------------------------------------------
# Graph build
# ---------------------------------------------------------------------------

def build_graph(elements: Iterable[Dict[str, Any]]) -> RoadGraph:
    """Two passes: index every node, then link consecutive node pairs of every way.

    A way may reference nodes that appear later in the input. Pairs touching an
    unknown node are skipped (clipped/partial data).
    """
    elements = list(elements)
    nodes: NodeMap = {}
    graph: Graph = {}

    for el in elements:
        if el.get("type") == "node":
            nid = _node_id(el["id"])
            nodes[nid] = Point(float(el["lat"]), float(el["lon"]))
            graph[nid] = []

    skipped = 0
    for el in elements:
        if el.get("type") != "way":
            continue
        way_nodes = [_node_id(n) for n in (el.get("nodes") or el.get("nodeIds") or [])]
        for i in range(len(way_nodes) - 1):
            n1, n2 = way_nodes[i], way_nodes[i + 1]
            if n1 not in nodes or n2 not in nodes:
                skipped += 1
                continue
            dist = haversine_km(nodes[n1], nodes[n2])
            graph[n1].append(Edge(n2, dist))
            graph[n2].append(Edge(n1, dist))

    if skipped:
        logger.debug("Skipped %d way segments referencing unknown nodes", skipped)
    logger.debug("Built graph: %d nodes, %d adjacency entries", len(nodes), sum(len(e) for e in graph.values()))
    return RoadGraph(nodes=nodes, adjacency=graph)


# ---------------------------------------------------------------------------
# Nearest node
# ---------------------------------------------------------------------------

def nearest_node(point: Point, nodes: NodeMap) -> NodeId:
    """Id of the node closest to point. First one in iteration order wins ties."""
    if not nodes:
        raise NotFound("No nodes to snap to")
    ids = list(nodes.keys())
    positions = list(nodes.values())
    d = haversine_km_many(point, [p[0] for p in positions], [p[1] for p in positions])
    return ids[int(np.argmin(d))]


def nearest_node_in_component(point: Point, graph: RoadGraph, anchor: NodeId) -> NodeId:
    """Closest node to point among nodes connected to anchor, so a path from anchor exists."""
    if anchor not in graph.nodes:
        raise NotFound(f"Node {anchor} not in graph")
    comp = nx.node_connected_component(graph.to_networkx(), anchor)
    return nearest_node(point, {n: p for n, p in graph.nodes.items() if n in comp})


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------

def path_points(graph: RoadGraph, path: List[NodeId]) -> List[Point]:
    return [graph.nodes[n] for n in path]


def path_length_km(graph: RoadGraph, path: List[NodeId]) -> float:
    """Sum of the lightest edge between each consecutive pair of the path."""
    total = 0.0
    for u, v in zip(path, path[1:]):
        weights = [w for t, w in graph.adjacency.get(u, ()) if t == v]
        if not weights:
            raise NotFound(f"No edge between {u} and {v}")
        total += min(weights)
    return total
