"""
Location Graph - Undirected weighted road network between named locations.

Supports:
- Proximity queries over road distance (breadth-first relaxation)
- Single-source shortest distances and shortest paths (Dijkstra)
- Straight-line (haversine) distances from stored coordinates
"""

from collections import deque
from dataclasses import dataclass
from typing import Optional
import heapq
import logging
import math

from .models import haversine_km


UNREACHABLE = math.inf


class UnknownLocation(KeyError):
    """Raised when a road references a location that was never added."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Location not found in graph: {self.name!r}"


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float

    def distance_to(self, latitude: float, longitude: float) -> float:
        return haversine_km(self.latitude, self.longitude, latitude, longitude)


@dataclass(frozen=True)
class Road:
    start: str
    end: str
    distance: float


class LocationGraph:
    """Adjacency-list graph of locations connected by roads."""

    def __init__(self):
        self._locations: dict[str, Location] = {}
        self._adjacency: dict[str, list[tuple[str, float]]] = {}
        self._roads: list[Road] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def add_location(self, name: str, latitude: float = 0.0, longitude: float = 0.0) -> bool:
        """
        Add a location. The first registration of a name wins.

        Returns:
            True if the location was new
        """
        if name in self._locations:
            return False

        self._locations[name] = Location(name, latitude, longitude)
        self._adjacency[name] = []
        return True

    def add_road(self, start: str, end: str, distance: float) -> None:
        """
        Connect two existing locations in both directions.

        Raises:
            UnknownLocation: if either endpoint was never added (nothing is written)
        """
        for name in (start, end):
            if name not in self._locations:
                self.logger.warning(f"Rejected road {start} <-> {end}: unknown location {name}")
                raise UnknownLocation(name)

        distance = max(0.0, float(distance))
        self._adjacency[start].append((end, distance))
        self._adjacency[end].append((start, distance))
        self._roads.append(Road(start, end, distance))

    def nearby_within(self, start: str, max_distance: float) -> list[str]:
        """
        Find locations reachable by road within max_distance of start.

        Nodes are relaxed breadth-first; a node is re-queued whenever a
        shorter route to it is found, and nothing past max_distance is expanded.

        Returns:
            Location names in the order they were first reached, start first.
            Empty if start is unknown.
        """
        if start not in self._locations:
            return []

        max_distance = max(0.0, max_distance)
        best = {start: 0.0}
        queue = deque([(start, 0.0)])

        while queue:
            current, distance = queue.popleft()
            if distance > best[current]:
                continue  # stale entry

            for neighbor, weight in self._adjacency[current]:
                new_distance = distance + weight
                if new_distance <= max_distance and new_distance < best.get(neighbor, UNREACHABLE):
                    best[neighbor] = new_distance
                    queue.append((neighbor, new_distance))

        return list(best)

    def shortest_distances(self, start: str) -> dict[str, float]:
        """
        Road distance from start to every location (Dijkstra).

        Unreachable locations map to UNREACHABLE (infinity); start maps to 0.
        """
        distances = {name: UNREACHABLE for name in self._locations}
        if start not in self._locations:
            return distances

        distances[start] = 0.0
        visited = set()
        heap = [(0.0, start)]

        while heap:
            distance, current = heapq.heappop(heap)
            if current in visited:
                continue
            visited.add(current)

            for neighbor, weight in self._adjacency[current]:
                new_distance = distance + weight
                if new_distance < distances[neighbor]:
                    distances[neighbor] = new_distance
                    heapq.heappush(heap, (new_distance, neighbor))

        return distances

    def shortest_path(self, start: str, end: str) -> list[str]:
        """
        Shortest road route from start to end, both included.

        Returns:
            Ordered location names, or an empty list when either endpoint is
            unknown or end cannot be reached
        """
        if start not in self._locations or end not in self._locations:
            return []

        distances = {start: 0.0}
        previous: dict[str, str] = {}
        visited = set()
        heap = [(0.0, start)]

        while heap:
            distance, current = heapq.heappop(heap)
            if current == end:
                break
            if current in visited:
                continue
            visited.add(current)

            for neighbor, weight in self._adjacency[current]:
                new_distance = distance + weight
                if new_distance < distances.get(neighbor, UNREACHABLE):
                    distances[neighbor] = new_distance
                    previous[neighbor] = current
                    heapq.heappush(heap, (new_distance, neighbor))

        if end not in distances:
            return []

        path = [end]
        while path[-1] != start:
            path.append(previous[path[-1]])
        path.reverse()
        return path

    def path_distance(self, path: list[str]) -> float:
        """Total road length along consecutive locations of a path."""
        if not path:
            return UNREACHABLE

        total = 0.0
        for current, following in zip(path, path[1:]):
            weights = [w for neighbor, w in self._adjacency.get(current, []) if neighbor == following]
            if not weights:
                return UNREACHABLE
            total += min(weights)
        return total

    def direct_distance(self, first: str, second: str) -> float:
        """Haversine distance between two stored locations, ignoring roads."""
        a = self._locations.get(first)
        b = self._locations.get(second)
        if a is None or b is None:
            return UNREACHABLE
        return a.distance_to(b.latitude, b.longitude)

    def locations_within_radius(self, latitude: float, longitude: float, radius: float) -> list[str]:
        """All stored locations within radius km (straight line) of a point."""
        return [
            location.name
            for location in self._locations.values()
            if location.distance_to(latitude, longitude) <= radius
        ]

    def has_location(self, name: str) -> bool:
        return name in self._locations

    def get_location(self, name: str) -> Optional[Location]:
        return self._locations.get(name)

    @property
    def locations(self) -> list[Location]:
        return list(self._locations.values())

    @property
    def roads(self) -> list[Road]:
        return list(self._roads)

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, name: str) -> bool:
        return name in self._locations
