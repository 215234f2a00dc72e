"""
In-memory link graph used by the path queries.
"""

from wiki_graph.errors import UnknownVertexError


class Graph:
    """
    Immutable indexed graph.  ``vertices[i]`` is the page name of vertex
    ``i``; ``adjacency[i]`` holds the indices vertex ``i`` links to.
    Every index in the adjacency is a valid vertex index.
    """

    def __init__(
        self,
        vertices: list[str],
        adjacency: dict[int, set[int]],
        dropped_destinations: int = 0,
    ) -> None:
        self.vertices = vertices
        self.adjacency = adjacency
        self.dropped_destinations = dropped_destinations
        self.index: dict[str, int] = {}
        for i, name in enumerate(vertices):
            # Duplicate lines: the first occurrence keeps the name.
            self.index.setdefault(name, i)

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, page_id: object) -> bool:
        return page_id in self.index

    def index_of(self, page_id: str) -> int:
        try:
            return self.index[page_id]
        except KeyError:
            raise UnknownVertexError(page_id) from None

    def out_indices(self, i: int) -> set[int]:
        return self.adjacency.get(i, set())

    @property
    def edge_count(self) -> int:
        return sum(len(dests) for dests in self.adjacency.values())

    def edges(self) -> dict[str, set[str]]:
        """Adjacency keyed and valued by page name."""
        return {
            self.vertices[src]: {self.vertices[d] for d in dests}
            for src, dests in self.adjacency.items()
        }
