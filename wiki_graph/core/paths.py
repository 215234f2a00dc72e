"""
Unweighted shortest paths and single-hop lookups on a loaded :class:`Graph`.
"""

from collections import deque

from wiki_graph.core.graph import Graph


def shortest_path(graph: Graph, start: str, end: str) -> list[str]:
    """
    Return a shortest path from *start* to *end* as a list of page names,
    or ``[]`` if *end* is unreachable.

    Raises :class:`~wiki_graph.errors.UnknownVertexError` if either name is
    not a vertex.
    """
    s = graph.index_of(start)
    e = graph.index_of(end)
    if s == e:
        return [graph.vertices[s]]

    # Each queue entry carries its whole path, so no backtracking is needed.
    visited = {s}
    queue: deque[list[int]] = deque([[s]])
    while queue:
        path = queue.popleft()
        for nxt in sorted(graph.out_indices(path[-1])):
            if nxt in visited:
                continue
            if nxt == e:
                return [graph.vertices[i] for i in path + [nxt]]
            visited.add(nxt)
            queue.append(path + [nxt])
    return []


def children(graph: Graph, page_id: str) -> list[str]:
    """Pages *page_id* links to, in vertex order."""
    i = graph.index_of(page_id)
    return [graph.vertices[d] for d in sorted(graph.out_indices(i))]


def parents(graph: Graph, page_id: str) -> list[str]:
    """Pages linking to *page_id*, in vertex order.  Scans every edge."""
    i = graph.index_of(page_id)
    return [
        graph.vertices[src]
        for src in sorted(graph.adjacency)
        if i in graph.adjacency[src]
    ]
