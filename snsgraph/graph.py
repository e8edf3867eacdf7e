"""Undirected graph of named vertices backed by ordered adjacency lists."""

from __future__ import annotations

MAX_VERTICES = 20
MAX_NAME_LENGTH = 8


class GraphFullError(Exception):
    """Raised when adding a vertex would exceed ``MAX_VERTICES``."""


class Graph:
    """A graph of at most ``MAX_VERTICES`` named vertices.

    Vertices keep the order in which they were first seen, and each
    adjacency list keeps the order in which its arcs were added.
    """

    def __init__(self):
        self._names: list[str] = []
        self._index: dict[str, int] = {}
        self._adjacency: list[list[int]] = []

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"Graph({self._names!r})"

    def vertex_index(self, label: str) -> int:
        """Return the index of ``label``, adding it as a new vertex if absent."""
        index = self._index.get(label)
        if index is not None:
            return index
        if len(self._names) >= MAX_VERTICES:
            raise GraphFullError(
                f"cannot add vertex {label!r}: graph already holds {MAX_VERTICES} vertices"
            )
        index = len(self._names)
        self._names.append(label)
        self._index[label] = index
        self._adjacency.append([])
        return index

    def _link(self, source: int, target: int) -> bool:
        neighbours = self._adjacency[source]
        if target in neighbours:
            return False
        neighbours.append(target)
        return True

    def add_arc(self, source: str, target: str) -> bool:
        """Add the single arc ``source -> target``; return whether it was new."""
        source_index = self.vertex_index(source)
        target_index = self.vertex_index(target)
        return self._link(source_index, target_index)

    def add_edge(self, source: str, target: str) -> None:
        """Add an undirected edge, adding ``source`` before ``target``.

        If the arc ``source -> target`` already exists nothing is changed.
        """
        source_index = self.vertex_index(source)
        target_index = self.vertex_index(target)
        if not self._link(source_index, target_index):
            return
        self._link(target_index, source_index)

    def names(self) -> list[str]:
        """Vertex names in the order they were added."""
        return list(self._names)

    def neighbors(self, name: str) -> list[str]:
        """Names adjacent to ``name`` in adjacency-list order."""
        try:
            index = self._index[name]
        except KeyError:
            raise KeyError(f"vertex {name!r} not found") from None
        return [self._names[i] for i in self._adjacency[index]]

    def degree(self, name: str) -> int:
        """Number of entries in the adjacency list of ``name``."""
        return len(self.neighbors(name))

    def has_arc(self, source: str, target: str) -> bool:
        """Whether ``target`` appears in the adjacency list of ``source``."""
        if source not in self._index or target not in self._index:
            return False
        return self._index[target] in self._adjacency[self._index[source]]