"""Reading graph descriptions from text files and writing the report files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from .graph import MAX_NAME_LENGTH, Graph, GraphFullError
from .traversal import bfs, dfs

_SEPARATORS = re.compile(r"[ \t\n]+")
_COUNT = re.compile(r"\s*([+-]?\d+)")
_STOP_TOKEN = "-1"
_STRIPPED_EXTENSIONS = (".TXT", ".txt")


class GraphFormatError(ValueError):
    """Raised when a graph description cannot be parsed."""


def _tokens(line: str) -> list[str]:
    return [token for token in _SEPARATORS.split(line) if token]


def _vertex_name(token: str) -> str:
    return token[:MAX_NAME_LENGTH]


def parse_vertex_line(line: str, graph: Graph) -> None:
    """Add the arcs described by one vertex line to ``graph``.

    The first token names the vertex; the following tokens, up to an
    optional ``-1``, name its neighbours.  Only the arcs written on the
    line are added, in the order written, without duplicates.  Neighbours
    that do not fit into a full graph are skipped.
    """
    tokens = _tokens(line)
    if not tokens:
        raise GraphFormatError("empty vertex line")
    name = _vertex_name(tokens[0])
    try:
        graph.vertex_index(name)
    except GraphFullError as exc:
        raise GraphFormatError(str(exc)) from exc
    for token in tokens[1:]:
        if token == _STOP_TOKEN:
            break
        try:
            graph.add_arc(name, _vertex_name(token))
        except GraphFullError:
            continue


def parse_graph(text: str) -> Graph:
    """Build a graph from the text of a graph description."""
    match = _COUNT.match(text)
    if match is None:
        raise GraphFormatError("could not read number of vertices")
    count = int(match.group(1))

    rest = text[match.end():]
    newline = rest.find("\n")
    rest = "" if newline < 0 else rest[newline + 1:]
    lines = rest.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    count = max(count, 0)
    if count > len(lines):
        raise GraphFormatError(
            f"expected {count} vertex lines, found {len(lines)}"
        )
    vertex_lines = lines[:count]

    graph = Graph()
    # Register the described vertices first so they keep the file order.
    for line in vertex_lines:
        tokens = _tokens(line)
        if tokens:
            try:
                graph.vertex_index(_vertex_name(tokens[0]))
            except GraphFullError:
                pass
    for line in vertex_lines:
        parse_vertex_line(line, graph)
    return graph


def read_graph(path) -> Graph:
    """Read and parse the graph description stored at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_graph(handle.read())


def output_path(input_path, suffix: str) -> str:
    """Name of a report file: ``input_path`` without ``.TXT``/``.txt`` plus ``suffix``."""
    base = os.fspath(input_path)
    dot = base.rfind(".")
    if dot >= 0 and base[dot:] in _STRIPPED_EXTENSIONS:
        base = base[:dot]
    return base + suffix


def format_set(graph: Graph) -> str:
    """Sorted vertex set and sorted undirected edge set of ``graph``."""
    vertices = ",".join(sorted(graph.names()))
    edges = sorted(
        (name, neighbour)
        for name in graph.names()
        for neighbour in graph.neighbors(name)
        if name < neighbour
    )
    edge_text = ",".join(f"({a},{b})" for a, b in edges)
    return f"V(G)={{{vertices}}}\nE(G)={{{edge_text}}}\n"


def format_degrees(graph: Graph) -> str:
    """One ``name \\tdegree`` line per vertex, in name order."""
    return "".join(
        f"{name} \t{graph.degree(name)}\n" for name in sorted(graph.names())
    )


def format_list(graph: Graph) -> str:
    """Adjacency list representation, one vertex per line."""
    return "".join(
        name + "".join(f"->{n}" for n in graph.neighbors(name)) + "->\\\n"
        for name in graph.names()
    )


def format_matrix(graph: Graph) -> str:
    """Adjacency matrix with labelled rows and columns."""
    names = graph.names()
    header = "     " + "".join(f"{name:>8}" for name in names) + "\n"
    rows = [
        f"{row:>5}"
        + "".join(f"{int(graph.has_arc(row, column)):>8}" for column in names)
        + "\n"
        for row in names
    ]
    return header + "".join(rows)


def format_traversal(names: Iterable[str]) -> str:
    """A traversal sequence as space separated names on one line."""
    return " ".join(names) + "\n"


def _write(path: str, text: str) -> str:
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
    return path


def write_set(path, graph: Graph) -> str:
    """Write the vertex and edge sets; return the output file name."""
    return _write(output_path(path, "-SET.TXT"), format_set(graph))


def write_degrees(path, graph: Graph) -> str:
    """Write the vertex degrees; return the output file name."""
    return _write(output_path(path, "-DEGREE.TXT"), format_degrees(graph))


def write_list(path, graph: Graph) -> str:
    """Write the adjacency list; return the output file name."""
    return _write(output_path(path, "-LIST.TXT"), format_list(graph))


def write_matrix(path, graph: Graph) -> str:
    """Write the adjacency matrix; return the output file name."""
    return _write(output_path(path, "-MATRIX.TXT"), format_matrix(graph))


def write_bfs(path, graph: Graph, start: str) -> str:
    """Write the breadth-first order from ``start``; return the output file name."""
    text = format_traversal(bfs(graph, start)) if len(graph) else ""
    return _write(output_path(path, "-BFS.TXT"), text)


def write_dfs(path, graph: Graph, start: str) -> str:
    """Write the depth-first order from ``start``; return the output file name."""
    text = format_traversal(dfs(graph, start)) if len(graph) else ""
    return _write(output_path(path, "-DFS.TXT"), text)