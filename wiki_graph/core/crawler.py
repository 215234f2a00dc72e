"""
Level-synchronous BFS crawler over the wiki link graph.

Each frontier level is fanned out over an injected executor: workers only
fetch and extract, they never touch crawl state.  Once every worker of the
level has finished, the calling thread merges the results into the vertex
set and builds the next frontier.  Because of that barrier the vertex set
needs no lock, and a page's BFS level is the level it was first seen at.
"""

import time
from concurrent.futures import Executor, as_completed
from typing import Callable

from tqdm import tqdm

from wiki_graph.errors import FetchError
from wiki_graph.extraction.links import extract_links
from wiki_graph.utils.log import ci_endgroup, ci_group, log

EdgeRecord = tuple[str, list[str]]


class FrontierCrawler:
    """
    Depth-limited BFS crawler.  ``fetch`` maps a page name to its raw
    markup (raising :class:`FetchError` on failure) and ``extract`` maps
    markup to the page names it links to.
    """

    def __init__(
        self,
        fetch: Callable[[str], str],
        executor: Executor,
        extract: Callable[[str], list[str]] = extract_links,
        show_progress: bool = False,
    ) -> None:
        self.fetch = fetch
        self.executor = executor
        self.extract = extract
        self.show_progress = show_progress
        self.level_stats: list[dict] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def crawl(self, seed: str, max_depth: int) -> tuple[set[str], list[EdgeRecord]]:
        """Crawl from *seed* for at most *max_depth* levels.

        Returns the set of every page seen and one ``(source, links)``
        record per processed page.
        """
        vertices: set[str] = {seed}
        frontier: list[str] = [seed]
        edges: list[EdgeRecord] = []
        self.level_stats = []

        level = 0
        while frontier and level < max_depth:
            ci_group(f"Level {level}")
            t0 = time.monotonic()

            records, failures = self._expand(frontier, level)

            next_frontier: list[str] = []
            for _source, links in records:
                for link in links:
                    if link not in vertices:
                        vertices.add(link)
                        next_frontier.append(link)
            edges.extend(records)

            self._record_level(level, len(frontier), time.monotonic() - t0,
                               len(vertices), failures)
            ci_endgroup()

            frontier = next_frontier
            level += 1

        log.info("Crawl complete. levels=%d  vertices=%d  records=%d",
                 level, len(vertices), len(edges))
        return vertices, edges

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _process(self, page_id: str) -> tuple[EdgeRecord, bool]:
        """Fetch and scan one page.  Runs on a worker thread."""
        try:
            content = self.fetch(page_id)
        except FetchError as exc:
            log.warning("[FETCH-ERR] %s", exc)
            return (page_id, []), False
        return (page_id, self.extract(content)), True

    def _expand(self, frontier: list[str], level: int) -> tuple[list[EdgeRecord], int]:
        """Run every frontier page through the executor and wait for all
        of them.  Records come back in completion order."""
        futures = [self.executor.submit(self._process, page_id) for page_id in frontier]
        records: list[EdgeRecord] = []
        failures = 0
        with tqdm(
            total=len(futures),
            desc=f"Level {level}",
            unit="page",
            dynamic_ncols=True,
            disable=not self.show_progress,
        ) as bar:
            for future in as_completed(futures):
                record, ok = future.result()
                records.append(record)
                if not ok:
                    failures += 1
                bar.update(1)
        return records, failures

    def _record_level(
        self,
        level: int,
        pages: int,
        elapsed: float,
        total_vertices: int,
        failures: int,
    ) -> None:
        rate = pages / elapsed if elapsed > 0 else float(pages)
        self.level_stats.append({
            "level": level,
            "pages": pages,
            "elapsed": elapsed,
            "rate": rate,
            "total_vertices": total_vertices,
            "failures": failures,
        })
        log.info("[LEVEL] %d: %d links in %.3fs", level, pages, elapsed)
        log.info("   Links per second: %.1f", rate)
        log.info("   Total links: %d  (failed fetches: %d)", total_vertices, failures)
