"""Link extraction from raw page content."""

from wiki_graph.extraction.links import extract_links, is_article_link

__all__ = ["extract_links", "is_article_link"]
