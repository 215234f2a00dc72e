"""
Graph persistence: ``vertices.txt`` and ``edges.txt`` in one directory
per crawl seed.

``vertices.txt`` holds one page name per line.  ``edges.txt`` holds one
line per crawled page: ``source: dest1, dest2, ...``.  Names are written
verbatim, so a name containing a newline, ``": "`` or ``", "`` does not
survive a save/load cycle.
"""

from pathlib import Path
from typing import Iterable

from wiki_graph.config import (
    DEFAULT_DATA_DIR,
    DESTINATION_SEPARATOR,
    EDGE_SEPARATOR,
    EDGES_FILE,
    VERTICES_FILE,
)
from wiki_graph.core.graph import Graph
from wiki_graph.errors import GraphFormatError
from wiki_graph.utils.log import log


def graph_dir_for(seed: str, data_dir: Path | str = DEFAULT_DATA_DIR) -> Path:
    """Directory holding the graph crawled from *seed*."""
    return Path(data_dir) / seed.replace("/", "_")


def save_text(path: Path, text: str) -> None:
    """Write *text* to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    log.debug("Saved → %s (%d chars)", path, len(text))


def save_graph(
    directory: Path,
    vertices: Iterable[str],
    edges: Iterable[tuple[str, list[str]]],
) -> None:
    """Write the crawl result to *directory*.  Vertices are sorted so the
    same crawl always produces the same file."""
    directory = Path(directory)
    if directory.exists():
        log.debug("Directory already exists: %s", directory)

    vertex_list = sorted(vertices)
    edge_lines = [
        f"{source}{EDGE_SEPARATOR}{DESTINATION_SEPARATOR.join(links)}"
        for source, links in edges
    ]
    save_text(directory / VERTICES_FILE, "\n".join(vertex_list))
    save_text(directory / EDGES_FILE, "\n".join(edge_lines))
    log.info("[SAVE] %d vertices, %d edge records → %s",
             len(vertex_list), len(edge_lines), directory.resolve())


def _read_lines(path: Path) -> list[str]:
    text = path.read_text(encoding="utf-8")
    return text.split("\n") if text else []


def load_graph(directory: Path) -> Graph:
    """
    Load the graph stored in *directory*.

    Raises ``OSError`` when either file is missing or unreadable and
    :class:`GraphFormatError` for an edge line without ``": "``.
    Destinations that are not listed in ``vertices.txt`` are dropped and
    counted in ``Graph.dropped_destinations``.
    """
    directory = Path(directory)
    vertices_path = directory / VERTICES_FILE
    edges_path = directory / EDGES_FILE

    adjacency: dict[int, set[int]] = {}
    graph = Graph(_read_lines(vertices_path), adjacency)
    index = graph.index

    edge_lines = _read_lines(edges_path)
    if edge_lines and edge_lines[-1] == "":
        edge_lines.pop()

    dropped = 0
    for line_no, line in enumerate(edge_lines, start=1):
        source, sep, rest = line.partition(EDGE_SEPARATOR)
        if not sep:
            raise GraphFormatError(edges_path, line_no, line)
        destinations = rest.split(DESTINATION_SEPARATOR) if rest else []

        src = index.get(source)
        if src is None:
            dropped += len(destinations)
            continue
        targets = adjacency.setdefault(src, set())
        for dest in destinations:
            d = index.get(dest)
            if d is None:
                dropped += 1
            else:
                targets.add(d)

    if dropped:
        log.debug("[DROP] %d destinations not in %s", dropped, vertices_path)

    graph.dropped_destinations = dropped
    log.info("[LOAD] %d vertices, %d edges from %s",
             len(graph), graph.edge_count, directory)
    return graph
