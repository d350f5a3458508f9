from dataclasses import dataclass
from typing import Hashable

from .errors import UnknownNodeReference


@dataclass(frozen=True)
class Recommendation:
    node: Hashable
    score: float


def recommend(graph, result, node, k=3):
    """Top ``k`` nodes by PageRank that ``node`` is not yet connected to."""
    if node not in graph:
        raise UnknownNodeReference(node, context="node")
    excluded = set(graph.neighbors_of(node))
    excluded.add(node)
    candidates = [
        Recommendation(other, score)
        for other, score in result.ranking()
        if other not in excluded
    ]
    return candidates[:k]
