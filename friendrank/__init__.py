"""PageRank scoring and friend recommendation over undirected edge lists."""

from .config import PageRankConfig
from .errors import EmptyGraph, InvalidConfiguration, PageRankError, UnknownNodeReference
from .graph import Graph
from .recommend import Recommendation, recommend
from .solver import PageRankResult, compute_pagerank, compute_pagerank_async, power_iteration
from .transition import TransitionMatrix, build_transition

__all__ = [
    "PageRankConfig",
    "PageRankError",
    "EmptyGraph",
    "UnknownNodeReference",
    "InvalidConfiguration",
    "Graph",
    "TransitionMatrix",
    "build_transition",
    "power_iteration",
    "compute_pagerank",
    "compute_pagerank_async",
    "PageRankResult",
    "Recommendation",
    "recommend",
]
