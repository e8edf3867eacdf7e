"""Breadth-first and depth-first traversal with alphabetical tie-breaking."""

from __future__ import annotations

from collections import deque

from .graph import Graph


def _check_start(graph: Graph, start: str) -> None:
    if start not in graph:
        raise KeyError(f"vertex {start!r} not found")


def _unvisited_sorted(graph: Graph, name: str, visited: set[str]) -> list[str]:
    return sorted(n for n in graph.neighbors(name) if n not in visited)


def bfs(graph: Graph, start: str) -> list[str]:
    """Breadth-first order from ``start``, visiting lower names first."""
    _check_start(graph, start)
    visited = {start}
    queue = deque([start])
    order: list[str] = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for name in _unvisited_sorted(graph, current, visited):
            if name not in visited:
                visited.add(name)
                queue.append(name)
    return order


def dfs(graph: Graph, start: str) -> list[str]:
    """Depth-first order from ``start``, visiting lower names first."""
    _check_start(graph, start)
    visited: set[str] = set()
    order: list[str] = []

    def visit(name: str) -> None:
        visited.add(name)
        order.append(name)
        for neighbour in _unvisited_sorted(graph, name, visited):
            if neighbour not in visited:
                visit(neighbour)

    visit(start)
    return order