"""Command line entry point that writes all graph reports for an input file."""

from __future__ import annotations

import argparse
import sys

from .fileio import (
    GraphFormatError,
    read_graph,
    write_bfs,
    write_degrees,
    write_dfs,
    write_list,
    write_matrix,
    write_set,
)


def _ask(prompt: str) -> str:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    words = line.split()
    return words[0] if words else ""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snsgraph",
        description="Write set, degree, list, matrix, BFS and DFS reports of a graph.",
    )
    parser.add_argument("filename", nargs="?", help="graph description file")
    parser.add_argument("--start", help="start vertex for the traversals")
    return parser


def main(argv=None) -> int:
    """Run the report generator; return the process exit status."""
    args = _build_parser().parse_args(argv)

    try:
        filename = args.filename or _ask("Input filename: ")
    except EOFError:
        return 1

    try:
        graph = read_graph(filename)
    except FileNotFoundError:
        print(f"File {filename} not found.")
        return 1
    except GraphFormatError as exc:
        print(f"Error: {exc}")
        return 1

    for write in (write_set, write_degrees, write_list, write_matrix):
        write(filename, graph)

    if len(graph) > 1:
        try:
            start = args.start or _ask("Input start vertex for the traversal: ")
        except EOFError:
            return 1
        if start not in graph:
            print(f"Vertex {start} not found.")
            return 1
        write_bfs(filename, graph, start)
        write_dfs(filename, graph, start)
    return 0


if __name__ == "__main__":
    sys.exit(main())