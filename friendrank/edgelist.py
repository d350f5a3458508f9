import logging

logger = logging.getLogger(__name__)


def load_edge_list(path, delimiter=None, max_edges=None):
    """Read ``u v`` integer pairs, one per line.

    Blank lines and ``#`` comments are ignored, as are lines that do not
    start with two integers. Returns ``(edges, nodes)``.
    """
    edges = []
    nodes = set()
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        for i, line in enumerate(f):
            if max_edges is not None and len(edges) >= max_edges:
                break
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            parts = line.split() if delimiter is None else line.split(delimiter)
            if len(parts) < 2:
                logger.debug("%s:%d: skipping line with fewer than two fields", path, i + 1)
                continue
            try:
                u = int(parts[0])
                v = int(parts[1])
            except ValueError:
                logger.debug("%s:%d: skipping non-integer edge %r", path, i + 1, line)
                continue
            edges.append((u, v))
            nodes.add(u); nodes.add(v)
    logger.info("loaded %d edges over %d nodes from %s", len(edges), len(nodes), path)
    return edges, nodes


def write_scores(path, result):
    with open(path, 'w', encoding='utf-8') as fo:
        for node, score in result.scores.items():
            fo.write(f"{node}\t{score:.12e}\n")
