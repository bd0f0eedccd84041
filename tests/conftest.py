import pytest

import bipartite_flow

EXAMPLE_TEXT = """\
4
A
B
X
Y
3
1 3
2 3
2 4
"""


@pytest.fixture
def example_text():
    return EXAMPLE_TEXT


@pytest.fixture
def example_problem():
    return bipartite_flow.parse_problem(EXAMPLE_TEXT)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(EXAMPLE_TEXT)
    return path


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Don't pick up the config file of the user running the tests"""

    monkeypatch.setenv("BIPARTITE_FLOW_CONFIG", str(tmp_path / "missing.toml"))
