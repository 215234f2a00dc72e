"""
Command-line interface: crawl a link graph, or query a saved one.
"""

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from wiki_graph.config import (
    DEFAULT_DATA_DIR,
    DEFAULT_MAX_DEPTH,
    DEFAULT_THREADS,
    WIKI_BASE_URL,
    auto_concurrency,
)
from wiki_graph.core.crawler import FrontierCrawler
from wiki_graph.core.graph import Graph
from wiki_graph.core.paths import children, parents, shortest_path
from wiki_graph.core.storage import graph_dir_for, load_graph, save_graph
from wiki_graph.errors import GraphFormatError, UnknownVertexError
from wiki_graph.session import PageFetcher, build_session
from wiki_graph.utils.log import log, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wiki-graph",
        description="Wikipedia link-graph tool – crawl every article "
                    "reachable from a page, then query shortest link paths.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  wiki-graph --scan-url Berlin --max-depth 2\n"
            "  wiki-graph --scan-url Berlin --threads 0\n"
            "  wiki-graph --load Berlin\n"
            "  wiki-graph --load data/Berlin --parents Potsdam\n"
        ),
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-s", "--scan-url", metavar="PAGE_NAME",
        help="Load all links reachable from the given page",
    )
    mode.add_argument(
        "-l", "--load", metavar="NAME",
        help="Query a saved graph (directory path, or seed name under --data-dir)",
    )
    parser.add_argument(
        "-t", "--threads", type=int, default=DEFAULT_THREADS,
        help=f"Number of fetch workers, 0 = auto (default: {DEFAULT_THREADS})",
    )
    parser.add_argument(
        "-m", "--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
        help=f"Maximum number of BFS levels (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--data-dir", default=DEFAULT_DATA_DIR,
        help=f"Directory holding saved graphs (default: {DEFAULT_DATA_DIR})",
    )
    parser.add_argument(
        "--base-url", default=WIKI_BASE_URL,
        help=f"URL prefix page names are appended to (default: {WIKI_BASE_URL})",
    )
    parser.add_argument(
        "--children", action="append", default=[], metavar="PAGE",
        help="Query mode: print the pages PAGE links to and exit (repeatable)",
    )
    parser.add_argument(
        "--parents", action="append", default=[], metavar="PAGE",
        help="Query mode: print the pages linking to PAGE and exit (repeatable)",
    )
    parser.add_argument(
        "--no-progress", dest="progress", action="store_false", default=True,
        help="Disable the per-level progress bar",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    args = parser.parse_args(argv)
    if args.max_depth < 0:
        parser.error("--max-depth must not be negative")
    if args.threads < 0:
        parser.error("--threads must not be negative")
    return args


def resolve_threads(threads: int) -> int:
    if threads == 0:
        threads = auto_concurrency()
        log.info("Auto-detected concurrency: %d workers", threads)
    return threads


def run_crawl(args: argparse.Namespace) -> int:
    seed = args.scan_url
    threads = resolve_threads(args.threads)
    out_dir = graph_dir_for(seed, args.data_dir)

    log.info("Scanning: %s with max depth: %d and %d threads",
             seed, args.max_depth, threads)

    fetcher = PageFetcher(build_session(pool_size=threads), base_url=args.base_url)
    t0 = time.monotonic()
    with ThreadPoolExecutor(max_workers=threads) as executor:
        crawler = FrontierCrawler(fetcher, executor, show_progress=args.progress)
        vertices, edges = crawler.crawl(seed, args.max_depth)

    save_graph(out_dir, vertices, edges)
    log.info("Total elapsed time: %.1f s", time.monotonic() - t0)
    return 0


def _ask(graph: Graph, prompt: str) -> str:
    """Prompt until the answer names a vertex.  EOF propagates.

    The answer is matched exactly first; surrounding whitespace is only
    dropped when the exact text is not a vertex.
    """
    while True:
        answer = input(prompt)
        for page_id in (answer, answer.strip()):
            if page_id in graph:
                return page_id
        log.warning("Unknown page %r – try again", answer)


def query_loop(graph: Graph) -> None:
    """Answer start/end path queries from stdin until EOF or Ctrl-C."""
    try:
        while True:
            start = _ask(graph, "Start: ")
            end = _ask(graph, "End: ")
            path = shortest_path(graph, start, end)
            if path:
                log.debug("[PATH] %d hops", len(path) - 1)
                print(" -> ".join(path))
            else:
                print("No path found.")
    except (EOFError, KeyboardInterrupt):
        print()


def _print_neighbours(graph: Graph, label: str, lookup, pages: list[str]) -> int:
    status = 0
    for page_id in pages:
        try:
            found = lookup(graph, page_id)
        except UnknownVertexError as exc:
            log.error("%s", exc)
            status = 1
            continue
        print(f"{label} of {page_id} ({len(found)}):")
        for name in found:
            print(f"  {name}")
    return status


def run_query(args: argparse.Namespace) -> int:
    # A saved seed under --data-dir wins over a same-named local directory.
    directory = graph_dir_for(args.load, args.data_dir)
    if not directory.is_dir() and Path(args.load).is_dir():
        directory = Path(args.load)

    try:
        graph = load_graph(directory)
    except (OSError, GraphFormatError) as exc:
        log.error("Could not load graph from %s – %s", directory, exc)
        return 1

    if graph.dropped_destinations:
        log.info("[DROP] %d edge destinations were not crawled vertices",
                 graph.dropped_destinations)

    if args.children or args.parents:
        status = _print_neighbours(graph, "Children", children, args.children)
        return _print_neighbours(graph, "Parents", parents, args.parents) or status

    query_loop(graph)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.scan_url is not None:
        return run_crawl(args)
    return run_query(args)


if __name__ == "__main__":
    sys.exit(main())
