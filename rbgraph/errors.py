import networkx as nx


class RedBlackTreeError(Exception):
    pass


class NullValueError(RedBlackTreeError, TypeError):
    """Raised when None is passed where a tree value is required"""


class DuplicateValueError(RedBlackTreeError, ValueError):
    pass


class MissingValueError(RedBlackTreeError, ValueError):
    pass


class InvalidRotationError(RedBlackTreeError, ValueError):
    """Raised when rotating two nodes that are not parent and child"""


class UnknownVertexError(nx.NodeNotFound):
    pass


class NoPathError(nx.NetworkXNoPath):
    pass


class MissingEdgeError(nx.NetworkXException, KeyError):
    pass
