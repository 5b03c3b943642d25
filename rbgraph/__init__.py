from .dijkstra import DijkstraGraph, SearchNode, compute_shortest_path, dijkstra
from .errors import (
    DuplicateValueError,
    InvalidRotationError,
    MissingEdgeError,
    MissingValueError,
    NoPathError,
    NullValueError,
    RedBlackTreeError,
    UnknownVertexError,
)
from .rbtree import Colour, Direction, Node, RedBlackTree
