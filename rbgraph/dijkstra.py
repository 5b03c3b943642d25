import heapq
import logging
import numbers
from itertools import count
from typing import List, Optional, Tuple

import networkx as nx

from .errors import MissingEdgeError, NoPathError, UnknownVertexError

logger = logging.getLogger(__name__)


class SearchNode:
    """One step of a candidate path, linked back towards the start vertex"""

    def __init__(self, vertex, cost: float, predecessor: Optional["SearchNode"] = None):
        self.vertex = vertex
        self.cost = cost
        self.predecessor = predecessor

    def path(self) -> list:
        path = []
        node = self
        while node is not None:
            path.append(node.vertex)
            node = node.predecessor
        return path[::-1]

    def __repr__(self):
        return f"SearchNode({self.vertex!r}, cost={self.cost})"


def compute_shortest_path(graph: nx.DiGraph, start, end, weight_key="weight") -> SearchNode:
    """Runs Dijkstra's algorithm from start and returns the search node for end

    Edge weights are read from the `weight_key` attribute and must not be
    negative; edges without the attribute weigh 1.

    Args:
        graph (nx.DiGraph): graph to search, only read
        start: vertex the path begins at
        end: vertex the path ends at

    Raises:
        UnknownVertexError: if start or end is not in the graph
        NoPathError: if end cannot be reached from start

    Returns:
        SearchNode: node for end; its cost is the path cost and its
            predecessor chain leads back to start
    """
    for vertex in (start, end):
        if not graph.has_node(vertex):
            raise UnknownVertexError(f"vertex {vertex!r} is not in the graph")

    if start == end:
        return SearchNode(start, 0)

    logger.debug("searching for shortest path %r -> %r", start, end)
    counter = count()
    frontier = [(0, next(counter), SearchNode(start, 0))]
    visited = set()

    while frontier:
        cost, _, entry = heapq.heappop(frontier)
        if entry.vertex in visited:
            continue
        visited.add(entry.vertex)

        # weights are non-negative, so the first time end comes off the
        # frontier its cost is already minimal
        if entry.vertex == end:
            logger.debug("found path %r -> %r with cost %s after visiting %d vertices",
                         start, end, cost, len(visited))
            return entry

        for (_, v, w) in graph.edges(entry.vertex, data=weight_key, default=1):
            if v in visited:
                continue
            path_length = cost + w
            heapq.heappush(frontier, (path_length, next(counter), SearchNode(v, path_length, entry)))

    raise NoPathError(f"there is no path between {start!r} and {end!r}")


def dijkstra(graph: nx.DiGraph, src, dest, weight_key="weight") -> Tuple[float, list]:
    end = compute_shortest_path(graph, src, dest, weight_key)
    return end.cost, end.path()


class DijkstraGraph:
    """Directed weighted graph answering shortest path queries

    Storage is a networkx DiGraph; passing an existing graph copies it.
    """

    def __init__(self, graph: nx.DiGraph = None, weight_key="weight"):
        self._weight_key = weight_key
        self.graph = nx.DiGraph(graph) if graph is not None else nx.DiGraph()

    def insert_node(self, vertex) -> bool:
        if vertex is None:
            raise ValueError("graph vertices cannot be None")
        if self.graph.has_node(vertex):
            return False
        self.graph.add_node(vertex)
        return True

    def remove_node(self, vertex) -> bool:
        if not self.graph.has_node(vertex):
            return False
        # networkx drops the edges entering and leaving the vertex as well
        self.graph.remove_node(vertex)
        return True

    def contains_node(self, vertex) -> bool:
        return self.graph.has_node(vertex)

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def insert_edge(self, pred, succ, weight) -> bool:
        """Adds an edge pred -> succ, replacing the weight of an existing one"""
        for vertex in (pred, succ):
            if not self.graph.has_node(vertex):
                raise UnknownVertexError(f"vertex {vertex!r} is not in the graph")
        if not isinstance(weight, numbers.Real) or weight < 0:
            raise ValueError(f"edge weight must be a non-negative number, got {weight!r}")
        self.graph.add_edge(pred, succ, **{self._weight_key: weight})
        return True

    def remove_edge(self, pred, succ) -> bool:
        if not self.graph.has_edge(pred, succ):
            return False
        self.graph.remove_edge(pred, succ)
        return True

    def contains_edge(self, pred, succ) -> bool:
        return self.graph.has_edge(pred, succ)

    def get_edge(self, pred, succ):
        if not self.graph.has_edge(pred, succ):
            raise MissingEdgeError(f"there is no edge {pred!r} -> {succ!r}")
        return self.graph.edges[pred, succ].get(self._weight_key, 1)

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def compute_shortest_path(self, start, end) -> SearchNode:
        return compute_shortest_path(self.graph, start, end, self._weight_key)

    def shortest_path_data(self, start, end) -> List:
        return self.compute_shortest_path(start, end).path()

    def shortest_path_cost(self, start, end) -> float:
        return self.compute_shortest_path(start, end).cost
