import pytest

from route_picker.builder import (
    Edge,
    build_graph,
    elements_from_overpass,
    nearest_node,
    nearest_node_in_component,
    path_length_km,
    path_points,
)
from route_picker.errors import NotFound
from route_picker.geo import Point, haversine_km


def _node(nid, lat, lon):
    return {"type": "node", "id": nid, "lat": lat, "lon": lon}


def _way(*ids):
    return {"type": "way", "nodes": list(ids)}


def _targets(graph, nid):
    return [e.target for e in graph.adjacency[nid]]


def test_way_links_consecutive_nodes_only():
    g = build_graph([_node(1, 0, 0), _node(2, 0, 1), _node(3, 1, 0), _way(1, 2, 3)])
    assert _targets(g, 1) == [2]
    assert 3 not in _targets(g, 1)
    assert sorted(_targets(g, 2)) == [1, 3]
    assert _targets(g, 3) == [2]


def test_edges_are_symmetric_with_haversine_weight():
    g = build_graph([_node(1, 0, 0), _node(2, 0, 1), _way(1, 2)])
    w = haversine_km(Point(0, 0), Point(0, 1))
    assert g.adjacency[1] == [Edge(2, w)]
    assert g.adjacency[2] == [Edge(1, w)]


def test_way_before_its_nodes():
    g = build_graph([_way(10, 11), _node(10, 0, 0), _node(11, 0, 0.01)])
    assert _targets(g, 10) == [11]
    assert g.edge_count == 1


def test_unknown_nodes_are_skipped():
    g = build_graph([_node(1, 0, 0), _node(2, 0, 0.01), _way(1, 99, 2), _way(1, 2)])
    assert _targets(g, 1) == [2]
    assert 99 not in g.nodes
    assert 99 not in g.adjacency


def test_parallel_edges_and_self_loops_are_kept():
    g = build_graph([_node(1, 0, 0), _node(2, 0, 0.01), _way(1, 2), _way(2, 1), _way(1, 1)])
    assert _targets(g, 1).count(2) == 2
    assert _targets(g, 1).count(1) == 2
    assert g.edge_count == 3
    G = g.to_networkx()
    assert G.number_of_edges(1, 2) == 2
    assert G.number_of_edges(1, 1) == 1


def test_isolated_nodes_have_empty_adjacency():
    g = build_graph([_node(5, 1, 1), {"type": "relation", "id": 7}])
    assert g.nodes == {5: Point(1, 1)}
    assert g.adjacency == {5: []}


def test_string_ids_are_normalised_to_int():
    g = build_graph([_node("1", 0, 0), _node("2", 0, 0.01), {"type": "way", "nodeIds": ["1", "2"]}])
    assert set(g.nodes) == {1, 2}
    assert _targets(g, 1) == [2]


def test_elements_from_overpass():
    assert elements_from_overpass({"elements": [_node(1, 0, 0)]}) == [_node(1, 0, 0)]
    assert elements_from_overpass({}) == []


def test_nearest_node():
    nodes = {1: Point(0, 0), 2: Point(0, 1), 3: Point(1, 0)}
    assert nearest_node(Point(0.1, 0.9), nodes) == 2
    assert nearest_node(Point(0.9, 0.05), nodes) == 3


def test_nearest_node_tie_takes_first():
    nodes = {7: Point(0, 1), 3: Point(0, -1)}
    assert nearest_node(Point(0, 0), nodes) == 7


def test_nearest_node_empty_map():
    with pytest.raises(NotFound):
        nearest_node(Point(0, 0), {})


def test_nearest_node_in_component():
    g = build_graph([
        _node(1, 0, 0), _node(2, 0, 0.01),
        _node(3, 0, 0.02),  # closest to the query but unconnected
        _way(1, 2),
    ])
    assert nearest_node(Point(0, 0.019), g.nodes) == 3
    assert nearest_node_in_component(Point(0, 0.019), g, anchor=1) == 2
    with pytest.raises(NotFound):
        nearest_node_in_component(Point(0, 0), g, anchor=42)


def test_path_helpers():
    g = build_graph([_node(1, 0, 0), _node(2, 0, 0.01), _node(3, 0, 0.02), _way(1, 2, 3)])
    assert path_points(g, [1, 2, 3]) == [Point(0, 0), Point(0, 0.01), Point(0, 0.02)]
    assert path_length_km(g, [1, 2, 3]) == pytest.approx(haversine_km(Point(0, 0), Point(0, 0.02)))
    assert path_length_km(g, [1]) == 0
    with pytest.raises(NotFound):
        path_length_km(g, [1, 3])
