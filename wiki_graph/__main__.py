"""
Main entry point for the wiki_graph package.

Allows running the tool as: python -m wiki_graph
"""

import sys

from wiki_graph.cli import main

if __name__ == "__main__":
    sys.exit(main())
