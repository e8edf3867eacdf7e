from pathlib import Path

import pytest

from snsgraph.fileio import (
    GraphFormatError,
    format_degrees,
    format_list,
    format_matrix,
    format_set,
    format_traversal,
    output_path,
    parse_graph,
    parse_vertex_line,
    read_graph,
    write_bfs,
    write_degrees,
    write_dfs,
    write_list,
    write_matrix,
    write_set,
)
from snsgraph.graph import Graph
from snsgraph.traversal import bfs, dfs

SAMPLE = "3\nAlice Bob Cara -1\nBob Alice -1\nCara Alice -1\n"


@pytest.fixture
def sample_graph():
    return parse_graph(SAMPLE)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "net.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.mark.parametrize("extension", [".txt", ".TXT"])
def test_output_path_strips_text_extension(extension):
    assert output_path("graph" + extension, "-SET.TXT") == "graph" + "-SET.TXT"


def test_output_path_keeps_other_extension():
    assert output_path("graph.dat", "-LIST.TXT") == "graph.dat" + "-LIST.TXT"


def test_output_path_accepts_path_objects(tmp_path):
    result = output_path(tmp_path / "g.txt", "-BFS.TXT")
    assert result == str(tmp_path / "g") + "-BFS.TXT"


def test_parse_graph_keeps_file_order(sample_graph):
    assert sample_graph.names() == ["Alice", "Bob", "Cara"]
    assert sample_graph.neighbors("Alice") == ["Bob", "Cara"]
    assert sample_graph.neighbors("Bob") == ["Alice"]


def test_parse_graph_described_vertices_come_first():
    graph = parse_graph("2\nZed Extra -1\nAmy Zed -1\n")
    assert graph.names() == ["Zed", "Amy", "Extra"]


def test_parse_graph_only_written_arcs():
    graph = parse_graph("1\nA B -1\n")
    assert graph.has_arc("A", "B")
    assert not graph.has_arc("B", "A")


def test_parse_graph_stops_at_minus_one():
    graph = parse_graph("1\nA B -1 C\n")
    assert "C" not in graph
    assert graph.neighbors("A") == ["B"]


def test_parse_graph_ignores_duplicate_neighbours():
    graph = parse_graph("1\nA B B B\n")
    assert graph.degree("A") == 1


def test_parse_graph_truncates_long_names():
    long_name = "Abcdefghijklmn"
    graph = parse_graph(f"1\n{long_name} {long_name}xyz -1\n")
    assert graph.names()[0] == long_name[:8]
    assert graph.has_arc(long_name[:8], long_name[:8])


def test_parse_graph_ignores_rest_of_count_line():
    graph = parse_graph("2 trailing words\nA B\nB A\n")
    assert graph.names() == ["A", "B"]


def test_parse_graph_without_final_newline():
    graph = parse_graph("1\nA B -1")
    assert graph.neighbors("A") == ["B"]


def test_parse_graph_negative_count_gives_empty_graph():
    assert len(parse_graph("-1\n")) == 0


def test_parse_graph_missing_count():
    with pytest.raises(GraphFormatError):
        parse_graph("Alice Bob\n")


def test_parse_graph_too_few_lines():
    with pytest.raises(GraphFormatError):
        parse_graph("3\nA B -1\n")


def test_parse_graph_empty_vertex_line():
    with pytest.raises(GraphFormatError):
        parse_graph("2\nA B -1\n\n")


def test_parse_graph_too_many_vertices():
    lines = "".join(f"V{i} -1\n" for i in range(21))
    with pytest.raises(GraphFormatError):
        parse_graph("21\n" + lines)


def test_parse_graph_skips_neighbours_beyond_capacity():
    lines = "".join(f"V{i} -1\n" for i in range(19))
    graph = parse_graph("20\n" + lines + "V19 X Y -1\n")
    assert len(graph) == 20
    assert "Y" not in graph
    assert graph.neighbors("V19") == []


def test_parse_vertex_line_extends_graph():
    graph = Graph()
    parse_vertex_line("Ann\tBen  Cy -1\n", graph)
    assert graph.neighbors("Ann") == ["Ben", "Cy"]


def test_parse_vertex_line_rejects_blank():
    with pytest.raises(GraphFormatError):
        parse_vertex_line("   \n", Graph())


def test_read_graph_matches_parse(sample_file):
    graph = read_graph(sample_file)
    assert graph.names() == parse_graph(SAMPLE).names()


def test_read_graph_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_graph(tmp_path / "absent.txt")


def test_format_set_sample(sample_graph):
    assert format_set(sample_graph) == (
        "V(G)={Alice,Bob,Cara}\nE(G)={(Alice,Bob),(Alice,Cara)}\n"
    )


def test_format_set_edges_sorted_and_ordered():
    graph = parse_graph("3\nZed Amy Bo -1\nAmy Zed Bo -1\nBo Amy -1\n")
    first, second = format_set(graph).splitlines()
    assert first[len("V(G)={"):-1].split(",") == sorted(graph.names())
    body = second[len("E(G)={("):-2]
    pairs = [tuple(p.split(",")) for p in body.split("),(")]
    assert pairs == sorted(pairs)
    assert all(a < b for a, b in pairs)
    assert len(set(pairs)) == len(pairs)


def test_format_set_empty_graph():
    assert format_set(Graph()).splitlines() == ["V(G)={}", "E(G)={}"]


def test_format_degrees(sample_graph):
    lines = format_degrees(sample_graph).splitlines()
    names = [line.split(" \t")[0] for line in lines]
    assert names == sorted(sample_graph.names())
    for line in lines:
        name, degree = line.split(" \t")
        assert int(degree) == sample_graph.degree(name)


def test_format_list_sample(sample_graph):
    assert format_list(sample_graph) == (
        "Alice->Bob->Cara->\\\nBob->Alice->\\\nCara->Alice->\\\n"
    )


def test_format_matrix(sample_graph):
    names = sample_graph.names()
    lines = format_matrix(sample_graph).splitlines()
    assert len(lines) == len(names) + 1
    assert lines[0].split() == names
    assert len(lines[0]) == 5 + 8 * len(names)
    for row, name in zip(lines[1:], names):
        cells = row.split()
        assert cells[0] == name
        assert len(row) == 5 + 8 * len(names)
        values = [int(c) for c in cells[1:]]
        assert values == [int(sample_graph.has_arc(name, o)) for o in names]


def test_format_matrix_directed_arc_not_symmetric():
    graph = parse_graph("1\nA B -1\n")
    rows = format_matrix(graph).splitlines()[1:]
    assert rows[0].split()[1:] == ["0", "1"]
    assert rows[1].split()[1:] == ["0", "0"]


def test_format_traversal():
    assert format_traversal(["a", "b"]) == "a b\n"


def test_write_reports(sample_file):
    graph = read_graph(sample_file)
    writers = [
        (write_set, "-SET.TXT", format_set),
        (write_degrees, "-DEGREE.TXT", format_degrees),
        (write_list, "-LIST.TXT", format_list),
        (write_matrix, "-MATRIX.TXT", format_matrix),
    ]
    for write, suffix, fmt in writers:
        out = write(sample_file, graph)
        assert out == output_path(sample_file, suffix)
        assert Path(out).read_text(encoding="utf-8") == fmt(graph)


def test_write_traversals(sample_file):
    graph = read_graph(sample_file)
    bfs_out = write_bfs(sample_file, graph, "Bob")
    dfs_out = write_dfs(sample_file, graph, "Bob")
    assert bfs_out == output_path(sample_file, "-BFS.TXT")
    assert Path(bfs_out).read_text(encoding="utf-8") == format_traversal(
        bfs(graph, "Bob")
    )
    assert Path(dfs_out).read_text(encoding="utf-8") == format_traversal(
        dfs(graph, "Bob")
    )


def test_write_traversal_empty_graph(tmp_path):
    path = tmp_path / "empty.txt"
    out = write_bfs(path, Graph(), "X")
    assert Path(out).read_text(encoding="utf-8") == ""
    out = write_dfs(path, Graph(), "X")
    assert Path(out).read_text(encoding="utf-8") == ""