"""
Article-link extraction from raw wiki page markup.

A plain substring scan: only the text inside ``<p>…</p>`` paragraphs is
looked at, and every ``<a href="/wiki/`` anchor in it yields the page name
up to the closing quote.  No markup parsing happens, so a truncated anchor
yields whatever text follows it.
"""

from wiki_graph.config import (
    ANCHOR_END,
    ANCHOR_PREFIX,
    NAMESPACE_DENYLIST,
    PARAGRAPH_CLOSE,
    PARAGRAPH_OPEN,
)


def _paragraphs(content: str) -> list[str]:
    # Text before the first <p> is not paragraph content.
    return [
        chunk.split(PARAGRAPH_CLOSE, 1)[0]
        for chunk in content.split(PARAGRAPH_OPEN)[1:]
    ]


def is_article_link(page_id: str) -> bool:
    """Return ``False`` for links into a denylisted namespace."""
    return not page_id.startswith(NAMESPACE_DENYLIST)


def extract_links(content: str) -> list[str]:
    """
    Return the article page names linked from the paragraphs of *content*,
    in document order.  Duplicates are kept.  An anchor with an empty page
    name is skipped: ``source: `` on disk means "no links".
    """
    found: list[str] = []
    for paragraph in _paragraphs(content):
        for anchor in paragraph.split(ANCHOR_PREFIX)[1:]:
            page_id = anchor.split(ANCHOR_END, 1)[0]
            if page_id and is_article_link(page_id):
                found.append(page_id)
    return found
