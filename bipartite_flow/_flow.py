import collections
import dataclasses
import logging

from ._errors import InvalidArgumentError

logger = logging.getLogger(__name__)
UNREACHED = -1


@dataclasses.dataclass
class PathSearch:
    """State of the augmenting path search within one phase.

    `depth` is the level graph of the phase. `phase_capacity` is a copy of
    the residual capacities taken when the phase started. The search zeroes
    entries of this copy to mark dead ends, the real graph is only changed
    when a found path is committed. `path` holds the nodes of the path that
    is currently explored.
    """

    depth: list
    phase_capacity: list
    path: list = dataclasses.field(default_factory=list)

    def is_admissible(self, u, v):
        return (
            self.depth[v] == self.depth[u] + 1 and self.phase_capacity[u][v] > 0
        )

    def prune(self, node):
        for row in self.phase_capacity:
            row[node] = 0


class MaxFlowEngine:
    """Maximum flow on a unit capacity `ResidualGraph`.

    The flow is computed in phases. Every phase builds a level graph with a
    breadth-first search from the source and then pushes a blocking flow
    along shortest augmenting paths, that respect the levels. Once the sink
    can't be reached anymore, the flow is maximal.

    All capacities must be 0 or 1. Dead ends are pruned from the phase on
    the first visit, which is only correct if every path carries exactly
    one unit of flow.
    """

    def __init__(self, graph):
        self._graph = graph
        self.phases = 0
        self.flow = 0

    @property
    def graph(self):
        return self._graph

    def compute_max_flow(self, source, sink):
        total_nodes = self._graph.total_nodes
        for role, node in (("Source", source), ("Sink", sink)):
            if not 0 <= node < total_nodes:
                raise InvalidArgumentError(
                    f"{role} {node} is out of valid range [0, {total_nodes})"
                )

        self.phases = 0
        self.flow = 0

        while True:
            reachable, depth = self.level_graph(source, sink)
            if not reachable:
                break

            self.phases += 1
            search = PathSearch(depth, self._graph.snapshot())
            pushed = self.blocking_flow(search, source, sink)
            self.flow += pushed

            logger.debug(
                "Phase %d: sink at depth %d, pushed %d units",
                self.phases,
                depth[sink],
                pushed,
            )

        logger.debug(
            "Maximum flow %d found after %d phases", self.flow, self.phases
        )
        return self.flow

    def level_graph(self, source, sink):
        """Assign every node its distance from the source.

        Returns a tuple `(reachable, depth)`. The search stops as soon as
        the sink gets a depth, so nodes further away than the sink may be
        left at `UNREACHED`.
        """
        depth = [UNREACHED] * self._graph.total_nodes
        depth[source] = 0
        queue = collections.deque([source])

        while queue:
            u = queue.popleft()
            for v in self._graph.neighbors(u):
                if depth[v] == UNREACHED:
                    depth[v] = depth[u] + 1
                    if v == sink:
                        return True, depth
                    queue.append(v)

        return False, depth

    def blocking_flow(self, search, source, sink):
        pushed = 0
        while self.find_augmenting_path(search, source, sink) is not None:
            self.augment_flow_along_path(search)
            pushed += 1
        return pushed

    def find_augmenting_path(self, search, source, sink):
        """Find the next shortest augmenting path of the phase.

        This is a depth-first search without recursion. The cursor walks
        along admissible edges and the walked nodes are kept in
        `search.path`. If the cursor gets stuck, the node is pruned from
        the phase and the cursor goes back to its predecessor. Returns the
        path from source to sink, or None if the blocking flow is complete.
        """
        if source == sink:
            return None

        path = search.path
        cursor = source
        backtracking = False

        while cursor != sink:
            # the predecessor is still on the path after a backtrack
            if backtracking:
                backtracking = False
            else:
                path.append(cursor)

            next_node = self._find_next_node(search, cursor)
            if next_node is not None:
                cursor = next_node
                continue

            if cursor == source:
                return None

            search.prune(cursor)
            path.pop()
            cursor = path[-1]
            backtracking = True

        path.append(sink)
        return path

    def augment_flow_along_path(self, search):
        # every path carries exactly one unit, no need to look for the
        # bottleneck capacity
        path = search.path
        for u, v in zip(path, path[1:]):
            self._graph.push_unit(u, v)
        path.clear()

    def _find_next_node(self, search, cursor):
        for v in self._graph.neighbors(cursor):
            if search.is_admissible(cursor, v):
                return v
        return None
