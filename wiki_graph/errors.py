"""
Exception types shared by the crawler, the graph store and the path finder.
"""

from pathlib import Path


class FetchError(Exception):
    """A page could not be retrieved or its body could not be decoded.

    Recoverable: the crawler records the page with zero outgoing links.
    """

    def __init__(self, page_id: str, reason: str) -> None:
        super().__init__(f"{page_id}: {reason}")
        self.page_id = page_id
        self.reason = reason


class GraphFormatError(ValueError):
    """An ``edges.txt`` line is missing the ``": "`` separator."""

    def __init__(self, path: Path, line_no: int, line: str) -> None:
        super().__init__(f"{path}:{line_no}: malformed edge line {line!r}")
        self.path = path
        self.line_no = line_no
        self.line = line


class UnknownVertexError(KeyError):
    """The requested page is not a vertex of the loaded graph."""

    def __init__(self, page_id: str) -> None:
        super().__init__(page_id)
        self.page_id = page_id

    def __str__(self) -> str:
        return f"unknown vertex: {self.page_id!r}"
