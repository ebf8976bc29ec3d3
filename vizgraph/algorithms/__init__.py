"""Graph search algorithms."""

from vizgraph.algorithms.bfs import find_path, find_path_in_graph, path_nodes

__all__ = ["find_path", "find_path_in_graph", "path_nodes"]
