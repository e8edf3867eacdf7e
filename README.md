# snsgraph

snsgraph reads an undirected graph of social-network members from a text file. It writes six reports about the graph: the vertex and edge sets, the vertex degrees, the adjacency list, the adjacency matrix, and the breadth-first and depth-first traversals.

## Input format

The first line holds the number of vertex lines that follow. Each vertex line starts with a vertex name and then lists its neighbours. A `-1` ends the list, and any words after it are ignored:

```
4
Alice Bob Carol -1
Bob Alice -1
Carol Alice Dave -1
Dave Carol -1
```

- Names longer than 8 characters are cut to 8.
- A graph holds at most 20 vertices. Vertices named at the start of a line come first, in file order. Neighbours that would go beyond the limit are skipped.
- Only the arcs written on each line are added, and duplicates are left out. To get an undirected graph, list each edge on both vertices' lines.
- A neighbour that has no line of its own still becomes a vertex.

`read_graph` and `parse_graph` raise `GraphFormatError` (a `ValueError`) in these cases:

- the vertex count cannot be read;
- there are fewer vertex lines than the count says;
- a vertex line is empty.

## Command line

```
snsgraph [FILENAME] [--start VERTEX]
```

If `FILENAME` is left out, the command asks for it. If the graph has more than one vertex, the command also needs a start vertex for the traversals. It takes this from `--start`, or asks for it.

For an input file `FRIENDS.TXT` the command writes these files. A trailing `.TXT` or `.txt` is dropped before the suffix is added.

| File                 | Contents                                       |
|----------------------|------------------------------------------------|
| `FRIENDS-SET.TXT`    | `V(G)={...}` and `E(G)={...}` in sorted order  |
| `FRIENDS-DEGREE.TXT` | each vertex and its degree, sorted by name     |
| `FRIENDS-LIST.TXT`   | the adjacency list in input order              |
| `FRIENDS-MATRIX.TXT` | the adjacency matrix                           |
| `FRIENDS-BFS.TXT`    | breadth-first order from the start vertex      |
| `FRIENDS-DFS.TXT`    | depth-first order from the start vertex        |

The command exits with status 1 in these cases:

- the file is missing;
- the file is malformed;
- the start vertex is not in the graph;
- input ends before an answer is given.

The BFS and DFS files are written only when the graph has more than one vertex.

When a vertex has several unvisited neighbours, the traversals visit them in alphabetical order.

## Library use

```python
from snsgraph.fileio import read_graph, format_set, format_degrees, write_set
from snsgraph.traversal import bfs, dfs

graph = read_graph("FRIENDS.TXT")
print(format_set(graph))
print(format_degrees(graph))
print(bfs(graph, "Alice"))
print(dfs(graph, "Alice"))
write_set("FRIENDS.TXT", graph)   # returns "FRIENDS-SET.TXT"
```

`snsgraph.fileio` also provides the following:

- `parse_graph(text)` and `parse_vertex_line(line, graph)`;
- `output_path(input_path, suffix)`;
- `format_list`, `format_matrix` and `format_traversal`;
- `write_degrees`, `write_list`, `write_matrix`, `write_bfs` and `write_dfs`.

Each `write_*` function returns the name of the file it wrote.

You can also build a graph directly:

```python
from snsgraph.graph import Graph

graph = Graph()
graph.add_edge("Alice", "Bob")
graph.add_edge("Bob", "Carol")
graph.degree("Bob")             # 2
graph.neighbors("Bob")          # ['Alice', 'Carol']
graph.has_arc("Carol", "Bob")   # True
graph.names()                   # ['Alice', 'Bob', 'Carol']
```

These methods add to a graph:

- `add_arc(source, target)` adds one direction only, and returns whether the arc was new.
- `vertex_index(label)` returns a vertex's index, and adds the vertex if it is not there yet.

Adding a vertex beyond the 20-vertex limit raises `GraphFullError`. `neighbors`, `degree`, `bfs` and `dfs` raise `KeyError` for an unknown vertex.

## Tests

```
pip install -e .[test]
pytest
```