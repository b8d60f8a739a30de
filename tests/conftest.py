import pytest


@pytest.fixture
def footway_elements():
    """Small footway square 1-2-3 / 1-4-3, an isolated node 9 and a way clipped at node 5."""
    return [
        {"type": "node", "id": 1, "lat": 40.7000, "lon": -74.0000},
        {"type": "node", "id": 2, "lat": 40.7010, "lon": -74.0000},
        {"type": "node", "id": 3, "lat": 40.7010, "lon": -73.9990},
        {"type": "node", "id": 4, "lat": 40.7000, "lon": -73.9990},
        {"type": "node", "id": 9, "lat": 40.7100, "lon": -73.9900},
        {"type": "way", "nodes": [1, 2, 3]},
        {"type": "way", "nodes": [1, 4, 3]},
        {"type": "way", "nodes": [3, 5]},
    ]
