"""
HTTP session creation and the page fetcher used by the crawler.

Provides sessions with:
* Automatic retry logic on 5xx errors
* A connection pool sized to the fetch worker count
* A descriptive User-Agent, as Wikimedia asks of API and bot clients
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from wiki_graph.config import MAX_RETRIES, REQUEST_TIMEOUT, USER_AGENT, WIKI_BASE_URL
from wiki_graph.errors import FetchError
from wiki_graph.utils.log import log


def build_session(pool_size: int = 20) -> requests.Session:
    """Return a ``requests.Session`` with retry logic and a keep-alive
    connection pool large enough for *pool_size* concurrent workers."""
    session = requests.Session()
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=0.5,
        status_forcelist=[500, 502, 503, 504],
    )
    adapter = HTTPAdapter(
        max_retries=retry,
        pool_connections=20,
        pool_maxsize=max(pool_size, 1),
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
    })
    return session


class PageFetcher:
    """Fetch the raw markup of a wiki page by name.

    Calling the fetcher returns the decoded body text.  Transport errors
    and undecodable bodies raise :class:`FetchError`.  A non-2xx status is
    not an error: the body of an error page is returned like any other.
    The instance is safe to share between worker threads.
    """

    def __init__(
        self,
        session: requests.Session,
        base_url: str = WIKI_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.session = session
        self.base_url = base_url
        self.timeout = timeout

    def url_for(self, page_id: str) -> str:
        return f"{self.base_url}{page_id}"

    def __call__(self, page_id: str) -> str:
        url = self.url_for(page_id)
        try:
            resp = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as exc:
            raise FetchError(page_id, f"no response ({exc})") from exc

        if not resp.ok:
            log.debug("  HTTP %s for %s", resp.status_code, url)

        encoding = resp.encoding or "utf-8"
        try:
            return resp.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise FetchError(page_id, f"no text ({exc})") from exc
