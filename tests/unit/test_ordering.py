"""Unit tests for spatial output ordering."""

import pytest

from sway_workspace_nav.errors import ErrorCode, NavigationError
from sway_workspace_nav.ordering import (
    compare_outputs,
    focused_output_index,
    neighbor_output,
    sort_outputs,
)


@pytest.fixture
def grid(output):
    """Four outputs in a 2x2 grid, given in scrambled order."""
    return [
        output("bottom-right", 1920, 1080, "4"),
        output("top-left", 0, 0, "1", focused=True),
        output("bottom-left", 0, 1080, "3"),
        output("top-right", 1920, 0, "2"),
    ]


def test_sort_left_to_right_then_top_to_bottom(grid):
    ordered = sort_outputs(grid)
    assert [o.name for o in ordered] == ["top-left", "bottom-left", "top-right", "bottom-right"]


def test_sort_is_idempotent(grid):
    once = sort_outputs(grid)
    assert sort_outputs(once) == once


def test_ties_keep_input_order(output):
    first = output("mirror-a", 0, 0, "1")
    second = output("mirror-b", 0, 0, "2")
    assert [o.name for o in sort_outputs([first, second])] == ["mirror-a", "mirror-b"]
    assert [o.name for o in sort_outputs([second, first])] == ["mirror-b", "mirror-a"]


def test_compare_outputs(output):
    left = output("L", 0, 500, "1")
    right = output("R", 1920, 0, "2")
    below = output("B", 0, 1080, "3")
    assert compare_outputs(left, right) == -1
    assert compare_outputs(right, left) == 1
    assert compare_outputs(left, below) == -1
    assert compare_outputs(left, output("L2", 0, 500, "4")) == 0


def test_negative_positions_sort_first(output):
    ordered = sort_outputs([output("main", 0, 0, "1"), output("left", -1280, 0, "2")])
    assert [o.name for o in ordered] == ["left", "main"]


def test_focused_output_index(grid):
    assert focused_output_index(sort_outputs(grid)) == 0


def test_focused_output_index_empty():
    with pytest.raises(NavigationError) as exc_info:
        focused_output_index([])
    assert exc_info.value.code == ErrorCode.NO_OUTPUTS


def test_focused_output_index_without_focus(output):
    with pytest.raises(NavigationError) as exc_info:
        focused_output_index([output("A", 0, 0, "1")])
    assert exc_info.value.code == ErrorCode.NO_FOCUSED_OUTPUT


def test_neighbor_output_saturates(grid):
    ordered = sort_outputs(grid)
    assert neighbor_output(ordered, 1).name == "bottom-left"
    assert neighbor_output(ordered, -1).name == "top-left"
    assert neighbor_output(ordered, 10).name == "bottom-right"
