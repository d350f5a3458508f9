class PageRankError(Exception):
    """Base class for every failure raised by friendrank."""


class EmptyGraph(PageRankError):
    def __init__(self, message="graph has no nodes; cannot compute PageRank"):
        super().__init__(message)


class UnknownNodeReference(PageRankError, KeyError):
    def __init__(self, node, context="edge endpoint"):
        self.node = node
        super().__init__(f"{context} {node!r} is not in the node set")

    def __str__(self):
        return self.args[0]


class InvalidConfiguration(PageRankError, ValueError):
    pass
