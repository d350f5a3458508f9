"""Damped power iteration over a :class:`TransitionMatrix`.

Each call to :func:`compute_pagerank` indexes the graph, builds the
transition operator and solves from scratch; nothing is cached between calls.
"""
import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Tuple

import numpy as np

from .config import PageRankConfig
from .graph import Graph
from .transition import build_transition

logger = logging.getLogger(__name__)


@dataclass
class PageRankResult:
    scores: Dict[Hashable, float]
    iterations: int
    converged: bool
    delta: float
    deltas: List[float] = field(default_factory=list)

    def __len__(self):
        return len(self.scores)

    def __getitem__(self, node):
        return self.scores[node]

    def ranking(self) -> List[Tuple[Hashable, float]]:
        """Nodes by descending score; equal scores keep node order."""
        return sorted(self.scores.items(), key=lambda item: -item[1])

    def top(self, k=20):
        return self.ranking()[:k]


def power_iteration(transition, alpha=0.85, tol=1e-6, max_iter=50):
    """Iterate ``r = alpha * T r + (1 - alpha) / n`` from the uniform vector.

    Stops once the L1 change drops below ``tol`` or after ``max_iter``
    updates, then renormalises once. Returns ``(r, iterations, converged,
    deltas)``.
    """
    PageRankConfig(alpha, max_iter, tol).validate()
    n_nodes = transition.n_nodes
    dtype = transition.dtype
    r = np.ones(n_nodes, dtype=dtype) / n_nodes
    teleport = (1.0 - alpha) / n_nodes
    deltas = []
    converged = False

    for it in range(1, max_iter + 1):
        t0 = time.time()
        r_new = alpha * transition.matvec(r)
        r_new += teleport

        diff = float(np.linalg.norm(r_new - r, 1))
        deltas.append(diff)
        logger.debug("iter %3d: L1 diff = %.6e, time = %.3fs", it, diff, time.time() - t0)
        r = r_new
        if diff < tol:
            converged = True
            break

    if converged:
        logger.info("converged after %d iterations (L1 diff %.2e < tol %g)", it, deltas[-1], tol)
    else:
        logger.warning(
            "not converged after %d iterations (L1 diff %.2e >= tol %g); returning last iterate",
            it, deltas[-1], tol,
        )

    r = r / r.sum()
    return r, it, converged, deltas


def compute_pagerank(edges, nodes=None, config=None, **overrides):
    """Compute PageRank scores for an undirected edge list.

    Args:
        edges: iterable of ``(a, b)`` node pairs.
        nodes: optional declared node collection. When given, every edge
            endpoint must belong to it and isolated nodes are kept; when
            omitted the node set is inferred from ``edges``.
        config: a :class:`PageRankConfig` or a mapping of options
            (``dampingFactor``, ``maxIterations``, ``tolerance``).
        **overrides: field overrides applied on top of ``config``.

    Returns:
        PageRankResult whose ``scores`` map every node to a value in
        [0, 1], summing to 1.

    Raises:
        InvalidConfiguration: bad damping, iteration cap or tolerance.
        UnknownNodeReference: an edge endpoint missing from ``nodes``.
        EmptyGraph: no nodes at all.
    """
    if config is None:
        config = PageRankConfig()
    elif not isinstance(config, PageRankConfig):
        config = PageRankConfig.from_mapping(config)
    if overrides:
        config = config.replace(**overrides)
    config.validate()

    if isinstance(edges, Graph):
        graph = edges if nodes is None else Graph.from_edges(edges.edges, nodes)
    else:
        graph = Graph.from_edges(edges, nodes)
    transition = build_transition(graph)
    ranks, iterations, converged, deltas = power_iteration(
        transition,
        alpha=config.damping_factor,
        tol=config.tolerance,
        max_iter=config.max_iterations,
    )
    scores = {node: float(ranks[i]) for i, node in enumerate(graph.nodes)}
    return PageRankResult(scores, iterations, converged, deltas[-1], deltas)


async def compute_pagerank_async(edges, nodes=None, config=None, **overrides):
    """Run :func:`compute_pagerank` in a worker thread."""
    return await asyncio.to_thread(compute_pagerank, edges, nodes, config, **overrides)
