"""
Configuration constants for the wiki link-graph crawler.
"""

import os

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_DATA_DIR = "data"
DEFAULT_MAX_DEPTH = 1024
DEFAULT_THREADS = 250          # 0 = auto-detect from CPU/RAM

# Limits for auto-concurrency calculation
_MIN_WORKERS = 2
_MAX_WORKERS = 256
_RAM_PER_WORKER_MB = 16        # estimated RSS per fetch thread


def auto_concurrency() -> int:
    """Calculate a worker count for the fetch pool from the available
    CPU cores and system RAM.

    Heuristic:
      * Start with ``cpu_count * 16`` (the workload is almost pure network wait).
      * Cap by available RAM (``free_mb / _RAM_PER_WORKER_MB``).
      * Clamp between ``_MIN_WORKERS`` and ``_MAX_WORKERS``.
    """
    cpus = os.cpu_count() or 2
    workers = cpus * 16

    try:
        with open("/proc/meminfo") as f:
            for line in f:
                if line.startswith("MemAvailable:"):
                    mem_kb = int(line.split()[1])
                    mem_mb = mem_kb // 1024
                    ram_cap = max(1, mem_mb // _RAM_PER_WORKER_MB)
                    workers = min(workers, ram_cap)
                    break
    except (OSError, ValueError):
        pass

    return max(_MIN_WORKERS, min(workers, _MAX_WORKERS))

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
WIKI_BASE_URL = "https://de.wikipedia.org/wiki/"
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
USER_AGENT = "wiki-graph/1.0 (link graph crawler; python-requests)"

# ---------------------------------------------------------------------------
# Link extraction
# ---------------------------------------------------------------------------
PARAGRAPH_OPEN = "<p>"
PARAGRAPH_CLOSE = "</p>"
ANCHOR_PREFIX = '<a href="/wiki/'
ANCHOR_END = '"'

# Namespaces that never count as article links (file, category, help, user,
# special, project and talk pages).  Matched with a plain prefix test.
NAMESPACE_DENYLIST: tuple[str, ...] = (
    "Datei",
    "Kategorie",
    "Hilfe",
    "Benutzer",
    "Spezial",
    "Wikipedia",
    "Diskussion",
)

# ---------------------------------------------------------------------------
# Persisted graph layout
# ---------------------------------------------------------------------------
VERTICES_FILE = "vertices.txt"
EDGES_FILE = "edges.txt"
EDGE_SEPARATOR = ": "
DESTINATION_SEPARATOR = ", "
