"""Tests for the public TreeTestHelper fixture."""

from zippertree import Cursor
from zippertree.core.node import Node
from zippertree.testing import TreeTestHelper


def build():
    cursor = Cursor("r")
    cursor.create_branch("a")
    cursor.create_branch("a1")
    cursor.step_back(2)
    cursor.create_branch("b")
    return cursor


def test_summary():
    cursor = build()
    summary = TreeTestHelper(cursor).get_summary()
    assert summary == {
        'total_nodes': 4,
        'max_depth': 2,
        'root_children': ["a", "b"],
        'cursor_value': "b",
        'cursor_depth': 1,
    }


def test_values_at_depth():
    helper = TreeTestHelper(build())
    assert helper.values_at_depth(0) == ["r"]
    assert helper.values_at_depth(1) == ["a", "b"]
    assert helper.values_at_depth(2) == ["a1"]
    assert helper.values_at_depth(3) == []


def test_cursor_path_values():
    cursor = build()
    cursor.step_back()
    cursor.step_forward(0)
    cursor.step_forward(0)
    assert TreeTestHelper(cursor).cursor_path_values() == ["r", "a", "a1"]


def test_as_nested():
    assert TreeTestHelper(build()).as_nested() == ("r", [("a", [("a1", [])]), ("b", [])])


def test_contains_node():
    cursor = build()
    helper = TreeTestHelper(cursor)
    assert helper.contains_node(cursor.current)
    assert not helper.contains_node(Node(None, "b"))


def test_helper_does_not_move_cursor():
    cursor = build()
    before = cursor.current
    helper = TreeTestHelper(cursor)
    helper.get_summary()
    helper.as_nested()
    assert cursor.current is before
