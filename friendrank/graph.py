import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Hashable, Iterable, Optional, Tuple

from .errors import UnknownNodeReference

logger = logging.getLogger(__name__)

Node = Hashable
Edge = Tuple[Node, Node]


@dataclass(frozen=True)
class Graph:
    """Undirected graph with a dense, sorted node index.

    ``neighbors[i]`` holds the indices adjacent to ``nodes[i]``. A self-loop
    makes a node its own neighbour once; duplicate edges collapse.
    """

    nodes: Tuple[Node, ...]
    index: Dict[Node, int] = field(hash=False, compare=False)
    neighbors: Tuple[FrozenSet[int], ...]

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], nodes: Optional[Iterable[Node]] = None) -> "Graph":
        edges = [tuple(e) for e in edges]
        if nodes is None:
            node_set = set()
            for u, v in edges:
                node_set.add(u); node_set.add(v)
        else:
            node_set = set(nodes)
            for u, v in edges:
                for endpoint in (u, v):
                    if endpoint not in node_set:
                        raise UnknownNodeReference(endpoint)

        sorted_nodes = tuple(sorted(node_set))
        node_to_idx = {node: i for i, node in enumerate(sorted_nodes)}

        adjacency = [set() for _ in sorted_nodes]
        for u, v in edges:
            iu = node_to_idx[u]
            iv = node_to_idx[v]
            adjacency[iu].add(iv)
            adjacency[iv].add(iu)

        logger.debug("indexed %d nodes from %d edges", len(sorted_nodes), len(edges))
        return cls(sorted_nodes, node_to_idx, tuple(frozenset(a) for a in adjacency))

    def __len__(self):
        return len(self.nodes)

    def __contains__(self, node):
        return node in self.index

    @property
    def edges(self):
        """Distinct undirected edges as sorted ``(a, b)`` pairs with ``a <= b``."""
        pairs = []
        for i, adj in enumerate(self.neighbors):
            for j in sorted(adj):
                if j >= i:
                    pairs.append((self.nodes[i], self.nodes[j]))
        return pairs

    def _idx(self, node):
        try:
            return self.index[node]
        except KeyError:
            raise UnknownNodeReference(node, context="node") from None

    def neighbors_of(self, node):
        return [self.nodes[j] for j in sorted(self.neighbors[self._idx(node)])]

    def degree(self, node):
        return len(self.neighbors[self._idx(node)])

    def with_edge(self, a, b):
        """Return a graph rebuilt from scratch with the extra edge ``(a, b)``."""
        return Graph.from_edges(self.edges + [(a, b)], nodes=self.nodes + tuple(n for n in (a, b) if n not in self))
