import logging

import numpy as np
import scipy.sparse as sp

from .errors import EmptyGraph

logger = logging.getLogger(__name__)


class TransitionMatrix:
    """Column-stochastic random-walk operator over a :class:`Graph`.

    ``links`` carries the edge-following part (row = destination,
    column = source). Columns flagged in ``dangling`` are the uniform
    ``1/n`` column and are applied in :meth:`matvec` rather than stored.
    """

    def __init__(self, links, outdeg, dtype=np.float64):
        self.links = links
        self.outdeg = outdeg
        self.dangling = outdeg == 0
        self.n_nodes = links.shape[0]
        self.dtype = dtype

    @property
    def shape(self):
        return self.links.shape

    def matvec(self, x):
        """Exact ``T @ x``."""
        y = self.links.dot(x)
        if self.dangling.any():
            y += x[self.dangling].sum() / self.n_nodes
        return y

    def to_dense(self):
        dense = self.links.toarray()
        dense[:, self.dangling] = 1.0 / self.n_nodes
        return dense

    def column_sums(self):
        sums = np.asarray(self.links.sum(axis=0), dtype=self.dtype).ravel()
        sums[self.dangling] = 1.0
        return sums


def build_transition(graph, dtype=np.float64):
    n_nodes = len(graph)
    if n_nodes == 0:
        raise EmptyGraph()

    outdeg = np.zeros(n_nodes, dtype=np.int64)
    rows = []
    cols = []
    for iu, adj in enumerate(graph.neighbors):
        for iv in adj:
            rows.append(iv)  # row index = destination
            cols.append(iu)  # col index = source
        outdeg[iu] = len(adj)

    data = np.ones(len(rows), dtype=dtype)
    rows = np.asarray(rows, dtype=np.int64)
    cols = np.asarray(cols, dtype=np.int64)
    M = sp.csr_matrix((data, (rows, cols)), shape=(n_nodes, n_nodes), dtype=dtype)
    nonzero_cols = outdeg > 0
    inv_out = np.zeros(n_nodes, dtype=dtype)
    inv_out[nonzero_cols] = 1.0 / outdeg[nonzero_cols].astype(dtype)
    M = sp.csr_matrix(M.multiply(inv_out))

    transition = TransitionMatrix(M, outdeg, dtype=dtype)
    logger.debug(
        "transition matrix %s, nnz=%d, dangling=%d",
        M.shape, M.nnz, int(transition.dangling.sum()),
    )
    return transition
