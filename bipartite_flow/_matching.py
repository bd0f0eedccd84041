import dataclasses
from typing import Tuple


@dataclasses.dataclass(frozen=True)
class Matching:
    pairs: Tuple[Tuple[int, int], ...] = ()

    @property
    def size(self):
        return len(self.pairs)

    def __iter__(self):
        return iter(self.pairs)

    def __len__(self):
        return len(self.pairs)


def extract_matching(graph):
    """Read the matched pairs from a residual graph after the max-flow.

    A left node `i` is matched to a right node `j`, if a unit of flow
    crossed the edge `i -> j`. In that case the reverse residual capacity
    `j -> i` is 1. The graph is not modified.
    """
    matrix = graph.matrix
    pairs = tuple(
        (i, j)
        for i in graph.left_nodes
        for j in graph.right_nodes
        if matrix[j][i] == 1
    )
    return Matching(pairs)
