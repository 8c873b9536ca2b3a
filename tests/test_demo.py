"""Tests for the demo driver scenario in examples/demo.py."""

import importlib.util
import io
from pathlib import Path

import pytest

from zippertree import Cursor, AtRootError, StopOnErrorPolicy, run_steps
from zippertree.testing import TreeTestHelper

DEMO_PATH = Path(__file__).parent.parent / "examples" / "demo.py"


def load_demo():
    spec = importlib.util.spec_from_file_location("zippertree_demo", DEMO_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def demo_steps(back=5, count=26):
    """The demo loop expressed as a step script."""
    return [("back", back) if i % 6 == 5 else ("branch", i) for i in range(count)]


class TestDemoScenario:
    """Seed -1, then alternate five branch creations with step_back(5)."""

    def test_root_has_five_branches(self):
        cursor = Cursor(-1)
        completed = run_steps(cursor, demo_steps())

        # Every step_back(5) lands exactly on the root, so nothing fails
        assert completed == 26
        assert cursor.root.map_children(lambda v: v) == [0, 6, 12, 18, 24]

    def test_each_round_builds_a_chain(self):
        cursor = Cursor(-1)
        run_steps(cursor, demo_steps())
        helper = TreeTestHelper(cursor)

        assert helper.as_nested(cursor.root.children[1]) == (
            6, [(7, [(8, [(9, [(10, [])])])])]
        )
        # The last round is cut short after 24, 25
        assert helper.cursor_path_values() == [-1, 24, 25]
        assert helper.get_summary()['total_nodes'] == 1 + 22

    def test_main_prints_tree_and_succeeds(self, capsys):
        demo = load_demo()
        assert demo.main() == 0

        captured = capsys.readouterr()
        assert captured.err == ""
        lines = captured.out.splitlines()
        assert lines[0] == "-1"
        assert lines[1] == "   0"
        assert lines[2] == "       1"
        assert len(lines) == 23
        # Depth-1 values are right-aligned in a 4-character field
        assert [line for line in lines if len(line) == 4] == [
            "   0", "   6", "  12", "  18", "  24",
        ]

    def test_too_deep_back_is_caught_and_tree_still_printed(self):
        """Backing six levels from depth five hits the root on the first round."""
        cursor = Cursor(-1)
        policy = StopOnErrorPolicy(verbose=False)
        completed = run_steps(cursor, demo_steps(back=6), policy)

        assert completed == 5
        assert policy.failed_index == 5
        assert isinstance(policy.error, AtRootError)
        # Partial progress kept: the five successful steps reached the root
        assert cursor.current is cursor.root

        out = io.StringIO()
        cursor.print_tree(out)
        assert out.getvalue().splitlines()[:2] == ["-1", "   0"]

    def test_fail_fast_reports_at_root(self):
        cursor = Cursor(-1)
        with pytest.raises(AtRootError):
            run_steps(cursor, demo_steps(back=6))
