import logging

from ._errors import OutOfRangeError

logger = logging.getLogger(__name__)


class ResidualGraph:
    """Unit capacity flow network of a bipartite graph.

    The network has `partition_size` real nodes plus an injected source and
    sink. Capacities are kept in a dense square matrix, indexed like this:

        0                                    source
        1 .. partition_size // 2             left partition
        partition_size // 2 + 1 .. partition_size   right partition
        partition_size + 1                   sink

    Edges between the partitions are added with `create_edge()`, then the
    source and sink are wired once with `connect_source_and_sink()`. After
    that the graph is handed to the max-flow engine, which mutates the
    capacities in place with `push_unit()`.
    """

    def __init__(self, partition_size):
        self._partition_size = partition_size
        self._total_nodes = partition_size + 2
        self._capacity = [[0] * self._total_nodes for _ in range(self._total_nodes)]
        self._connected = False

    @property
    def partition_size(self):
        return self._partition_size

    @property
    def total_nodes(self):
        return self._total_nodes

    @property
    def source(self):
        return 0

    @property
    def sink(self):
        return self._partition_size + 1

    @property
    def left_nodes(self):
        return range(1, self._partition_size // 2 + 1)

    @property
    def right_nodes(self):
        return range(self._partition_size // 2 + 1, self._partition_size + 1)

    @property
    def matrix(self):
        # mutable view, used by the engine for its bookkeeping
        return self._capacity

    def snapshot(self):
        return [list(row) for row in self._capacity]

    def create_edge(self, u, v, capacity=1):
        self._check_range(u, v)
        self._capacity[u][v] = capacity

    def connect_source_and_sink(self, source, sink):
        if self._connected:
            raise RuntimeError("Source and sink are already connected")
        self._check_range(source, sink)

        for node in self.left_nodes:
            self.create_edge(source, node, 1)
        for node in self.right_nodes:
            self.create_edge(node, sink, 1)

        self._connected = True
        logger.debug(
            "Connected source %d and sink %d to %d nodes",
            source,
            sink,
            self._partition_size,
        )

    def capacity(self, u, v):
        self._check_range(u, v)
        return self._capacity[u][v]

    def neighbors(self, u):
        self._check_range(u)
        row = self._capacity[u]
        return [v for v in range(self._total_nodes) if row[v] > 0]

    def push_unit(self, u, v):
        self._check_range(u, v)
        self._capacity[u][v] -= 1
        self._capacity[v][u] += 1

    def _check_range(self, *nodes):
        for node in nodes:
            if not 0 <= node < self._total_nodes:
                raise OutOfRangeError(
                    f"Node {node} is out of range [0, {self._total_nodes})"
                )
