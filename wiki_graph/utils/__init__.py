"""Logging helpers."""

from wiki_graph.utils.log import ci_endgroup, ci_group, log, setup_logging

__all__ = [
    "ci_endgroup",
    "ci_group",
    "log",
    "setup_logging",
]
