"""Package setup for wiki_graph."""

from setuptools import setup, find_packages

setup(
    name="wiki-graph",
    version="1.0.0",
    description="Breadth-first Wikipedia link-graph crawler with shortest-path queries",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "tqdm>=4.66.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wiki-graph=wiki_graph.cli:main",
        ],
    },
)
