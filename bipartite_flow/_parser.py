import logging
import pathlib
import re

import bipartite_flow._models as models
import bipartite_flow._util as util

from ._errors import InputFormatError, describe

logger = logging.getLogger(__name__)
_EDGE_PATTERN = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")


def load_problem(path):
    path = pathlib.Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputFormatError(f"Error opening {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise InputFormatError(f"Error reading {path}: {e.reason}") from e

    if path.suffix == ".toml":
        problem = parse_toml_problem(content)
    else:
        problem = parse_problem(content)

    logger.debug(
        'Loaded "%s": %d nodes, %d edges',
        path,
        problem.node_count,
        len(problem.edges),
    )
    return problem


def parse_problem(text):
    """Parse the line based input format.

    The format is a node count, followed by one name per node, followed by
    an edge count and one edge per line. An edge is written as two node
    numbers, the first one from the left partition, the second one from the
    right partition:

        4
        Alice
        Bob
        Red
        Blue
        3
        1 3
        2 3
        2 4
    """
    if not text.strip():
        raise InputFormatError("Empty file")

    lines = _Lines(text)

    node_count = _parse_count(lines, "number of nodes")
    if node_count < 2 or node_count % 2 != 0:
        raise InputFormatError(
            "There should be a positive even number of nodes", lines.line_number
        )

    names = []
    for _ in range(node_count):
        name = clean_name(lines.next("node name"))
        if not name:
            raise InputFormatError("Name is invalid", lines.line_number)
        names.append(name)

    edge_count = _parse_count(lines, "number of edges")
    if edge_count < 1:
        raise InputFormatError("Edges must be greater than 0", lines.line_number)

    edges = []
    for _ in range(edge_count):
        match = _EDGE_PATTERN.match(lines.next("edge"))
        if match is None:
            raise InputFormatError("Edge is invalid", lines.line_number)
        left, right = match.groups()
        try:
            edge = models.Edge(int(left), int(right))
            models.check_edge(edge, node_count)
        except (TypeError, ValueError) as e:
            raise InputFormatError(describe(e), lines.line_number) from e
        edges.append(edge)

    return _build_problem(names=names, edges=edges)


def parse_toml_problem(text):
    try:
        data = util.toml_loads(text)
    except ValueError as e:
        raise InputFormatError(f"Invalid TOML: {e}") from e

    try:
        return models.MatchingProblem.init_recursive(**data)
    except (TypeError, ValueError) as e:
        raise InputFormatError(describe(e)) from e


def clean_name(name):
    """Keep alphanumeric characters and single spaces between words."""
    clean = []
    for ch in name:
        if ch.isascii() and ch.isalnum():
            clean.append(ch)
        elif ch == " " and clean and clean[-1] != " ":
            clean.append(ch)
    return "".join(clean).rstrip(" ")


def _parse_count(lines, what):
    line = lines.next(what)
    try:
        return int(line.strip())
    except ValueError:
        raise InputFormatError(
            f"Reading {what} failed: {line!r} is not a number", lines.line_number
        ) from None


def _build_problem(**kwargs):
    try:
        return models.MatchingProblem.init_recursive(**kwargs)
    except (TypeError, ValueError) as e:
        raise InputFormatError(describe(e)) from e


class _Lines:
    def __init__(self, text):
        self._lines = text.splitlines()
        self._pos = 0

    @property
    def line_number(self):
        return self._pos

    def next(self, what):
        if self._pos >= len(self._lines):
            raise InputFormatError(
                f"Reading {what} failed: unexpected end of input", self._pos + 1
            )
        line = self._lines[self._pos]
        self._pos += 1
        return line
