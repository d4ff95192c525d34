"""
Tests for the LocationGraph road network.
"""

import math

import pytest

from job_recommender.core import LocationGraph, UnknownLocation, UNREACHABLE, haversine_km


@pytest.fixture
def graph():
    """A - B - C chain with distances 15 and 25, plus an isolated D."""
    graph = LocationGraph()
    graph.add_location("A", 28.6139, 77.2090)
    graph.add_location("B", 28.7041, 77.1025)
    graph.add_location("C", 28.4595, 77.0266)
    graph.add_location("D", 28.5355, 77.3910)
    graph.add_road("A", "B", 15)
    graph.add_road("B", "C", 25)
    return graph


class TestLocations:
    """Test location registration and straight-line distances."""

    def test_first_registration_wins(self):
        graph = LocationGraph()
        assert graph.add_location("Town", 10.0, 20.0)
        assert not graph.add_location("Town", 30.0, 40.0)

        location = graph.get_location("Town")
        assert (location.latitude, location.longitude) == (10.0, 20.0)
        assert len(graph) == 1

    def test_direct_distance_uses_haversine(self, graph):
        expected = haversine_km(28.6139, 77.2090, 28.4595, 77.0266)
        assert graph.direct_distance("A", "C") == pytest.approx(expected)
        assert graph.direct_distance("A", "A") == pytest.approx(0.0)

    def test_direct_distance_ignores_roads(self, graph):
        assert graph.direct_distance("A", "D") < UNREACHABLE

    def test_direct_distance_unknown_location(self, graph):
        assert graph.direct_distance("A", "Nowhere") == UNREACHABLE

    def test_haversine_known_distance(self):
        # One degree of latitude is about 111.19 km on a 6371 km sphere
        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, abs=0.01)

    def test_locations_within_radius(self, graph):
        # From A in a straight line: B ~14.4 km, D ~19.8 km, C ~24.7 km
        assert sorted(graph.locations_within_radius(28.6139, 77.2090, 16)) == ["A", "B"]
        assert graph.locations_within_radius(0.0, 0.0, 100) == []


class TestRoads:
    """Test road validation."""

    def test_add_road_unknown_endpoint(self, graph):
        with pytest.raises(UnknownLocation) as exc_info:
            graph.add_road("A", "Nowhere", 5)

        assert exc_info.value.name == "Nowhere"
        assert "Nowhere" in str(exc_info.value)

    def test_failed_road_writes_nothing(self, graph):
        with pytest.raises(UnknownLocation):
            graph.add_road("Nowhere", "A", 5)

        assert len(graph.roads) == 2
        assert graph.shortest_distances("A")["D"] == UNREACHABLE

    def test_roads_are_undirected(self, graph):
        assert graph.shortest_distances("C")["A"] == 40


class TestNearbyWithin:
    """Test breadth-first proximity search."""

    def test_within_twenty_km(self, graph):
        assert graph.nearby_within("A", 20) == ["A", "B"]

    def test_within_forty_km_reaches_c(self, graph):
        assert graph.nearby_within("A", 40) == ["A", "B", "C"]

    def test_zero_distance_returns_start(self, graph):
        assert graph.nearby_within("A", 0) == ["A"]

    def test_unknown_start(self, graph):
        assert graph.nearby_within("Nowhere", 100) == []

    def test_finds_shorter_route_through_more_hops(self):
        graph = LocationGraph()
        for name in ["S", "X", "Y", "T", "U"]:
            graph.add_location(name)
        graph.add_road("S", "T", 9)
        graph.add_road("S", "X", 2)
        graph.add_road("X", "Y", 2)
        graph.add_road("Y", "T", 2)
        graph.add_road("T", "U", 3)

        # U is only within 10 km via S-X-Y-T-U (9 km), not via S-T-U (12 km)
        assert set(graph.nearby_within("S", 10)) == {"S", "X", "Y", "T", "U"}


class TestShortestPaths:
    """Test Dijkstra distances and paths."""

    def test_shortest_distances(self, graph):
        distances = graph.shortest_distances("A")

        assert distances["A"] == 0
        assert distances["B"] == 15
        assert distances["C"] == 40
        assert math.isinf(distances["D"])

    def test_shortest_distances_unknown_start(self, graph):
        distances = graph.shortest_distances("Nowhere")
        assert all(d == UNREACHABLE for d in distances.values())

    def test_shortest_path(self, graph):
        path = graph.shortest_path("A", "C")

        assert path == ["A", "B", "C"]
        assert graph.path_distance(path) == 40

    def test_shortest_path_prefers_lighter_route(self, graph):
        graph.add_road("A", "C", 50)
        assert graph.shortest_path("A", "C") == ["A", "B", "C"]

        graph.add_road("A", "C", 30)
        assert graph.shortest_path("A", "C") == ["A", "C"]
        assert graph.path_distance(["A", "C"]) == 30

    def test_shortest_path_to_self(self, graph):
        assert graph.shortest_path("B", "B") == ["B"]

    def test_shortest_path_unreachable(self, graph):
        assert graph.shortest_path("A", "D") == []

    def test_shortest_path_unknown_endpoint(self, graph):
        assert graph.shortest_path("A", "Nowhere") == []
        assert graph.shortest_path("Nowhere", "A") == []

    def test_path_distance_of_broken_path(self, graph):
        assert graph.path_distance(["A", "C"]) == UNREACHABLE
        assert graph.path_distance([]) == UNREACHABLE
