import dataclasses
import logging

from ._flow import MaxFlowEngine
from ._matching import Matching, extract_matching
from ._models import MatchingProblem
from ._residual import ResidualGraph

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class MatchResult:
    problem: MatchingProblem
    matching: Matching
    flow: int
    phases: int

    @property
    def size(self):
        return self.matching.size

    def named_pairs(self):
        name_of = self.problem.name_of
        return [(name_of(left), name_of(right)) for left, right in self.matching]

    def dict(self):
        return {
            "matches": [
                {"left": left, "right": right} for left, right in self.named_pairs()
            ],
            "total": self.size,
        }


class BipartiteMatcher:
    def __init__(self, problem):
        self._problem = problem

    @property
    def problem(self):
        return self._problem

    def build_graph(self):
        graph = ResidualGraph(self._problem.node_count)
        for edge in self._problem.edges:
            graph.create_edge(edge.left, edge.right, 1)
        graph.connect_source_and_sink(graph.source, graph.sink)
        return graph

    def solve(self):
        graph = self.build_graph()
        logger.debug(
            "Solving %d nodes with %d edges",
            self._problem.node_count,
            len(self._problem.edges),
        )
        engine = MaxFlowEngine(graph)
        flow = engine.compute_max_flow(graph.source, graph.sink)
        matching = extract_matching(graph)

        if matching.size != flow:
            raise RuntimeError(
                f"Residual graph holds {matching.size} matches, "
                f"but a flow of {flow} was pushed"
            )

        logger.info(
            "Found %d matches for %d nodes in %d phases",
            matching.size,
            self._problem.node_count,
            engine.phases,
        )
        return MatchResult(self._problem, matching, flow, engine.phases)


def solve(problem):
    return BipartiteMatcher(problem).solve()
