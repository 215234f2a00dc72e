"""Core logic – BFS crawler, graph storage and path queries."""

from wiki_graph.core.crawler import FrontierCrawler
from wiki_graph.core.graph import Graph
from wiki_graph.core.paths import children, parents, shortest_path
from wiki_graph.core.storage import graph_dir_for, load_graph, save_graph

__all__ = [
    "FrontierCrawler",
    "Graph",
    "children",
    "graph_dir_for",
    "load_graph",
    "parents",
    "save_graph",
    "shortest_path",
]
