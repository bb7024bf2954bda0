"""Undirected city network used to estimate delivery routes."""

from __future__ import annotations

from collections import deque
from typing import Optional


class RouteNetwork:
    """Adjacency lists of cities connected in both directions."""

    def __init__(self) -> None:
        self._adjacent: dict[str, list[str]] = {}

    def connect(self, source: str, target: str) -> None:
        """Add a two-way connection between two cities."""
        self._adjacent.setdefault(source, []).append(target)
        self._adjacent.setdefault(target, []).append(source)

    def neighbours(self, city: str) -> list[str]:
        """Directly connected cities, in the order they were connected."""
        try:
            return list(self._adjacent[city])
        except KeyError:
            raise KeyError(f"Kota tidak dikenal: {city}") from None

    def bfs(self, start: str) -> list[str]:
        """Cities reachable from start, in breadth-first order."""
        visited = {start}
        order: list[str] = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for nxt in self.neighbours(current):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return order

    def dfs(self, start: str) -> list[str]:
        """Cities reachable from start, in depth-first order."""
        visited: set[str] = set()
        order: list[str] = []
        stack = [start]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            order.append(current)
            stack.extend(n for n in reversed(self.neighbours(current)) if n not in visited)
        return order

    def shortest_hops(self, origin: str, destination: str) -> Optional[int]:
        """Fewest connections from origin to destination, or None if unreachable."""
        visited = {origin}
        queue = deque([(origin, 0)])
        while queue:
            current, distance = queue.popleft()
            if current == destination:
                return distance
            for nxt in self.neighbours(current):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append((nxt, distance + 1))
        return None