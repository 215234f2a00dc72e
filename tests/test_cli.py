"""
Tests for the command-line front-end: argument parsing, crawl mode and
the interactive query loop.
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from wiki_graph import cli
from wiki_graph.config import DEFAULT_DATA_DIR, DEFAULT_MAX_DEPTH, DEFAULT_THREADS, EDGES_FILE, VERTICES_FILE
from wiki_graph.core.storage import graph_dir_for, load_graph, save_graph
from wiki_graph.errors import FetchError
from wiki_graph.utils.log import log


def _cleanup_log():
    for h in list(log.handlers):
        h.close()
        log.removeHandler(h)


class FakeFetcher:
    SITE = {
        "A": '<p><a href="/wiki/B">B</a> <a href="/wiki/Kategorie:X">X</a></p>',
        "B": '<p><a href="/wiki/C">C</a></p>',
        "C": "<p>no links</p>",
    }

    def __init__(self, session, base_url=None):
        self.base_url = base_url

    def __call__(self, page_id):
        if page_id not in self.SITE:
            raise FetchError(page_id, "no response")
        return self.SITE[page_id]


# ------------------------------------------------------------------ #
# Argument parsing
# ------------------------------------------------------------------ #

class TestParseArgs(unittest.TestCase):
    def test_defaults(self):
        args = cli.parse_args(["--scan-url", "Berlin"])
        self.assertEqual(args.scan_url, "Berlin")
        self.assertIsNone(args.load)
        self.assertEqual(args.threads, DEFAULT_THREADS)
        self.assertEqual(args.max_depth, DEFAULT_MAX_DEPTH)
        self.assertEqual(args.data_dir, DEFAULT_DATA_DIR)
        self.assertTrue(args.progress)

    def test_short_flags(self):
        args = cli.parse_args(["-s", "Berlin", "-t", "8", "-m", "3"])
        self.assertEqual((args.scan_url, args.threads, args.max_depth), ("Berlin", 8, 3))

    def test_mode_required(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            cli.parse_args([])

    def test_modes_exclusive(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            cli.parse_args(["-s", "A", "-l", "A"])

    def test_negative_depth_rejected(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            cli.parse_args(["-s", "A", "-m", "-1"])

    def test_repeatable_lookups(self):
        args = cli.parse_args(["-l", "A", "--children", "X", "--children", "Y"])
        self.assertEqual(args.children, ["X", "Y"])
        self.assertEqual(args.parents, [])

    @patch("wiki_graph.cli.auto_concurrency", return_value=7)
    def test_zero_threads_means_auto(self, _mock):
        self.assertEqual(cli.resolve_threads(0), 7)
        self.assertEqual(cli.resolve_threads(5), 5)


# ------------------------------------------------------------------ #
# Crawl mode
# ------------------------------------------------------------------ #

class TestCrawlMode(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)

    def tearDown(self):
        _cleanup_log()
        self._tmp.cleanup()

    @patch("wiki_graph.cli.PageFetcher", FakeFetcher)
    def test_crawl_writes_graph(self):
        status = cli.main([
            "-s", "A", "-t", "2", "--data-dir", str(self.data_dir), "--no-progress",
        ])
        self.assertEqual(status, 0)
        out = graph_dir_for("A", self.data_dir)
        self.assertEqual((out / VERTICES_FILE).read_text(encoding="utf-8"), "A\nB\nC")
        graph = load_graph(out)
        self.assertEqual(graph.edges(), {"A": {"B"}, "B": {"C"}, "C": set()})

    @patch("wiki_graph.cli.PageFetcher", FakeFetcher)
    def test_crawl_respects_max_depth(self):
        cli.main([
            "-s", "A", "-m", "1", "--data-dir", str(self.data_dir), "--no-progress",
        ])
        out = graph_dir_for("A", self.data_dir)
        self.assertEqual((out / EDGES_FILE).read_text(encoding="utf-8"), "A: B")


# ------------------------------------------------------------------ #
# Query mode
# ------------------------------------------------------------------ #

class TestQueryMode(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)
        save_graph(
            graph_dir_for("A", self.data_dir),
            {"A", "B", "C", "D", "E"},
            [("A", ["B"]), ("B", ["C"]), ("C", ["D"]), ("D", []), ("E", [])],
        )

    def tearDown(self):
        _cleanup_log()
        self._tmp.cleanup()

    def _run(self, argv, answers=()):
        stdout = io.StringIO()
        with patch("builtins.input", side_effect=list(answers) + [EOFError()]), \
                redirect_stdout(stdout):
            status = cli.main(argv)
        return status, stdout.getvalue()

    def test_path_query_and_reprompt(self):
        status, out = self._run(
            ["-l", "A", "--data-dir", str(self.data_dir)],
            ["A", "D", "Nope", "A", "E"],
        )
        self.assertEqual(status, 0)
        self.assertIn("A -> B -> C -> D", out)
        self.assertIn("No path found.", out)

    def test_name_with_surrounding_space_matched_exactly(self):
        save_graph(
            graph_dir_for("Lead", self.data_dir),
            {" Lead", "B", "Lead "},
            [(" Lead", ["B"]), ("B", ["Lead "]), ("Lead ", [])],
        )
        status, out = self._run(
            ["-l", "Lead", "--data-dir", str(self.data_dir)],
            [" Lead", "Lead "],
        )
        self.assertEqual(status, 0)
        self.assertIn(" Lead -> B -> Lead ", out)

    def test_surrounding_space_dropped_when_not_a_vertex(self):
        status, out = self._run(
            ["-l", "A", "--data-dir", str(self.data_dir)],
            ["  A", "D\t"],
        )
        self.assertEqual(status, 0)
        self.assertIn("A -> B -> C -> D", out)

    def test_data_dir_wins_over_local_directory(self):
        cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as workdir:
            os.chdir(workdir)
            try:
                # ./A is a stray directory without a graph in it.
                Path("A").mkdir()
                status, out = self._run(
                    ["-l", "A", "--data-dir", str(self.data_dir)],
                    ["A", "D"],
                )
            finally:
                os.chdir(cwd)
        self.assertEqual(status, 0)
        self.assertIn("A -> B -> C -> D", out)

    def test_load_by_directory_path(self):
        directory = graph_dir_for("A", self.data_dir)
        status, out = self._run(["-l", str(directory)], ["B", "D"])
        self.assertEqual(status, 0)
        self.assertIn("B -> C -> D", out)

    def test_children_and_parents_lookup(self):
        status, out = self._run([
            "-l", "A", "--data-dir", str(self.data_dir),
            "--children", "A", "--parents", "C",
        ])
        self.assertEqual(status, 0)
        self.assertIn("Children of A (1):\n  B", out)
        self.assertIn("Parents of C (1):\n  B", out)

    def test_lookup_of_unknown_page_fails(self):
        status, _ = self._run([
            "-l", "A", "--data-dir", str(self.data_dir), "--children", "Nope",
        ])
        self.assertEqual(status, 1)

    def test_missing_graph_is_fatal(self):
        status, _ = self._run(["-l", "Missing", "--data-dir", str(self.data_dir)])
        self.assertEqual(status, 1)

    def test_malformed_graph_is_fatal(self):
        directory = graph_dir_for("A", self.data_dir)
        (directory / EDGES_FILE).write_text("A B", encoding="utf-8")
        status, _ = self._run(["-l", "A", "--data-dir", str(self.data_dir)])
        self.assertEqual(status, 1)


if __name__ == "__main__":
    unittest.main()
