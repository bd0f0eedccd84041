import pytest

import bipartite_flow._models as models
from bipartite_flow import InputFormatError, load_problem, parse_problem
from bipartite_flow._parser import clean_name


def test_parse(example_text):
    problem = parse_problem(example_text)
    assert problem.names == ["A", "B", "X", "Y"]
    assert problem.edges == [models.Edge(1, 3), models.Edge(2, 3), models.Edge(2, 4)]


def test_parse_ignores_trailing_content():
    problem = parse_problem("2\nA\nB\n1\n 1   2 weight=5\nextra line\n")
    assert problem.edges == [models.Edge(1, 2)]


@pytest.mark.parametrize(
    ("raw", "name"),
    [
        ("Alice", "Alice"),
        ("  Alice  ", "Alice"),
        ("Mary  Ann", "Mary Ann"),
        ("R2-D2", "R2D2"),
        ("Zoë", "Zo"),
        ("Node\t7", "Node7"),
    ],
)
def test_clean_name(raw, name):
    assert clean_name(raw) == name


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "Empty file"),
        ("\n  \n", "Empty file"),
        ("four\n", "line 1: Reading number of nodes failed: 'four' is not a number"),
        ("3\nA\nB\nC\n1\n1 2\n", "line 1: There should be a positive even number"),
        ("0\n", "line 1: There should be a positive even number"),
        ("-2\n", "line 1: There should be a positive even number"),
        ("4\nA\nB\n", "line 4: Reading node name failed: unexpected end of input"),
        ("2\nA\n--\n1\n1 2\n", "line 3: Name is invalid"),
        ("2\nA\nB\n", "line 4: Reading number of edges failed"),
        ("2\nA\nB\n0\n", "line 4: Edges must be greater than 0"),
        ("2\nA\nB\n2\n1 2\n", "line 6: Reading edge failed: unexpected end of input"),
        ("2\nA\nB\n1\n1 x\n", "line 5: Edge is invalid"),
        ("2\nA\nB\n1\n1\n", "line 5: Edge is invalid"),
    ],
)
def test_parse_invalid(text, message):
    with pytest.raises(InputFormatError) as execinfo:
        parse_problem(text)
    assert message in str(execinfo.value)


@pytest.mark.parametrize(
    ("edge", "message"),
    [
        ("0 3", "line 7: left: Invalid value: Value 0 is less than minimum 1"),
        ("1 5", "line 7: right: Node 5 is not in the right partition [3, 4]"),
        ("3 1", "line 7: left: Node 3 is not in the left partition [1, 2]"),
        ("+3 4", "line 7: left: Node 3 is not in the left partition [1, 2]"),
    ],
)
def test_parse_edge_out_of_range(edge, message):
    with pytest.raises(InputFormatError) as execinfo:
        parse_problem(f"4\nA\nB\nX\nY\n1\n{edge}\n")
    assert message in str(execinfo.value)
    assert execinfo.value.line_number == 7


def test_parse_edge_line_number():
    text = "4\nA\nB\nX\nY\n3\n1 3\n2 4\n2 1\n"
    with pytest.raises(InputFormatError) as execinfo:
        parse_problem(text)
    assert execinfo.value.line_number == 9
    assert "right: Node 1 is not in the right partition" in str(execinfo.value)


def test_input_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_problem("")


def test_line_number():
    with pytest.raises(InputFormatError) as execinfo:
        parse_problem("2\nA\n!\n")
    assert execinfo.value.line_number == 3


def test_load_text_file(example_file):
    problem = load_problem(example_file)
    assert problem.node_count == 4
    assert len(problem.edges) == 3


def test_load_missing_file(tmp_path):
    with pytest.raises(InputFormatError) as execinfo:
        load_problem(tmp_path / "missing.txt")
    assert "Error opening" in str(execinfo.value)


def test_load_file_not_utf8(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_bytes(b"2\n\xff\xfe\nB\n1\n1 2\n")
    with pytest.raises(InputFormatError) as execinfo:
        load_problem(path)
    assert "Error reading" in str(execinfo.value)
    assert "invalid start byte" in str(execinfo.value)


def test_load_toml_file(tmp_path):
    path = tmp_path / "graph.toml"
    path.write_text(
        """
        names = ["A", "B", "X", "Y"]
        edges = [[1, 3], [2, 3]]
        """
    )
    problem = load_problem(path)
    assert problem.names == ["A", "B", "X", "Y"]
    assert problem.edges == [models.Edge(1, 3), models.Edge(2, 3)]


def test_load_toml_file_with_edge_tables(tmp_path):
    path = tmp_path / "graph.toml"
    path.write_text(
        """
        names = ["A", "B", "X", "Y"]

        [[edges]]
        left = 2
        right = 4
        """
    )
    problem = load_problem(path)
    assert problem.edges == [models.Edge(2, 4)]


def test_load_toml_without_edges(tmp_path):
    path = tmp_path / "graph.toml"
    path.write_text('names = ["A", "X"]\n')
    assert load_problem(path).edges == []


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("names = [", "Invalid TOML"),
        ('names = ["A", "B", "C"]', "positive even number of nodes"),
        ('names = ["A", "X"]\nedges = [[1, 2, 3]]', "positional argument"),
        ('names = ["A", "X"]\nedges = [[1, 3]]', "not in the right partition"),
        ('names = ["A", "X"]\ncolors = 1', "Unknown keys: colors"),
        ("edges = []", "names"),
        ('names = "ABCD"\nedges = [[1, 3]]', "names: Expected list, got str"),
        ('names = ["A", "X"]\nedges = [[true, 2]]', "left: Expected int, got bool"),
        ('names = ["A", "X"]\nedges = [[1, false]]', "right: Expected int, got bool"),
    ],
)
def test_load_invalid_toml(tmp_path, content, message):
    path = tmp_path / "graph.toml"
    path.write_text(content)
    with pytest.raises(InputFormatError) as execinfo:
        load_problem(path)
    assert message in str(execinfo.value)
