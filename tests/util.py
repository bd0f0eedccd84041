import itertools
import random

from bipartite_flow import ResidualGraph


def make_graph(n, edges):
    """Connected flow network with `n` nodes on each side.

    Edges are given as (left, right) with both sides numbered 1..n, the
    right side is shifted to its node index in the network.
    """
    graph = ResidualGraph(2 * n)
    for left, right in edges:
        graph.create_edge(left, n + right, 1)
    graph.connect_source_and_sink(graph.source, graph.sink)
    return graph


def all_edge_sets(n):
    candidates = list(itertools.product(range(1, n + 1), repeat=2))
    for mask in range(1 << len(candidates)):
        yield [c for i, c in enumerate(candidates) if mask & (1 << i)]


def random_edge_sets(n, count, seed):
    rng = random.Random(seed)
    candidates = list(itertools.product(range(1, n + 1), repeat=2))
    for _ in range(count):
        density = rng.random()
        yield [c for c in candidates if rng.random() < density]


def brute_force_matching_size(edges):
    adjacency = {}
    for left, right in edges:
        adjacency.setdefault(left, []).append(right)
    lefts = sorted(adjacency)

    def best(i, used):
        if i == len(lefts):
            return 0
        result = best(i + 1, used)
        for right in adjacency[lefts[i]]:
            if right not in used:
                result = max(result, 1 + best(i + 1, used | {right}))
        return result

    return best(0, frozenset())


def assert_valid_matching(pairs, n, edges):
    edge_set = {(left, n + right) for left, right in edges}
    lefts = [left for left, _ in pairs]
    rights = [right for _, right in pairs]
    assert len(set(lefts)) == len(lefts)
    assert len(set(rights)) == len(rights)
    assert set(pairs) <= edge_set
