"""
wiki-graph – crawl a wiki's article link graph breadth-first and query
shortest link paths between articles.
"""

from wiki_graph.core import (
    FrontierCrawler,
    Graph,
    children,
    graph_dir_for,
    load_graph,
    parents,
    save_graph,
    shortest_path,
)
from wiki_graph.errors import FetchError, GraphFormatError, UnknownVertexError
from wiki_graph.extraction import extract_links

__version__ = "1.0.0"
__all__ = [
    "FetchError",
    "FrontierCrawler",
    "Graph",
    "GraphFormatError",
    "UnknownVertexError",
    "children",
    "extract_links",
    "graph_dir_for",
    "load_graph",
    "parents",
    "save_graph",
    "shortest_path",
]
