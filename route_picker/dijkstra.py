"""
Single-source shortest path (Dijkstra) over any weighted adjacency mapping.

The graph is a mapping node -> iterable of (target, weight) pairs, e.g. the
adjacency of a RoadGraph. Weights must be non-negative.
"""

import heapq
import itertools
import math
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

from .errors import NotFound

WeightedGraph = Mapping[Hashable, Iterable[Tuple[Hashable, float]]]


def dijkstra(
    graph: WeightedGraph,
    start: Hashable,
    end: Optional[Hashable] = None,
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Optional[Hashable]]]:
    """Return (distances, previous). Stops as soon as end is settled when end is given.

    Nodes never reached are absent from distances (treat as infinity).
    """
    distances: Dict[Hashable, float] = {start: 0.0}
    previous: Dict[Hashable, Optional[Hashable]] = {start: None}
    # counter keeps heap entries comparable when node ids are not
    order = itertools.count()
    heap = [(0.0, next(order), start)]

    while heap:
        d, _, current = heapq.heappop(heap)
        if d > distances.get(current, math.inf):
            continue  # stale entry
        if current == end:
            break
        for neighbor, weight in graph.get(current, ()):
            alt = d + weight
            if alt < distances.get(neighbor, math.inf):
                distances[neighbor] = alt
                previous[neighbor] = current
                heapq.heappush(heap, (alt, next(order), neighbor))

    return distances, previous


def shortest_path(graph: WeightedGraph, start: Hashable, end: Hashable) -> List[Hashable]:
    """Nodes from start to end inclusive.

    If end is unreachable the result degenerates to [end]; use path_found() to tell
    that apart from a real path.
    """
    _, previous = dijkstra(graph, start, end)
    path = []
    curr: Optional[Hashable] = end
    while curr is not None:
        path.append(curr)
        curr = previous.get(curr)
    path.reverse()
    return path


def path_found(path: List[Hashable], start: Hashable, end: Hashable) -> bool:
    if not path or path[-1] != end or path[0] != start:
        return False
    return len(path) > 1 or start == end


def find_path(graph: WeightedGraph, start: Hashable, end: Hashable) -> List[Hashable]:
    """Like shortest_path but raises NotFound when start and end are not connected."""
    path = shortest_path(graph, start, end)
    if not path_found(path, start, end):
        raise NotFound(f"No path from {start} to {end}")
    return path
