"""
Spatial ordering of outputs.

Outputs are ordered left to right, then top to bottom, by the origin of their
rect. This order defines the "previous" and "next" output for layout-aware
navigation.
"""

from functools import cmp_to_key
from typing import Iterable, List, Tuple

from .errors import ErrorCode, NavigationError
from .models import Output


def output_sort_key(output: Output) -> Tuple[int, int]:
    return (output.rect.x, output.rect.y)


def compare_outputs(a: Output, b: Output) -> int:
    """Total-order comparator on output positions: x first, then y."""
    key_a, key_b = output_sort_key(a), output_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_outputs(outputs: Iterable[Output]) -> List[Output]:
    """
    Order outputs by position.

    The sort is stable, so outputs sharing a position keep their input order
    and sorting an already sorted list returns it unchanged.
    """
    return sorted(outputs, key=cmp_to_key(compare_outputs))


def focused_output_index(ordered: List[Output]) -> int:
    """
    Return the index of the focused output in an ordered output list.

    Raises:
        NavigationError: If the list is empty or no output is focused
    """
    if not ordered:
        raise NavigationError(
            code=ErrorCode.NO_OUTPUTS,
            message="Output snapshot is empty",
            suggestion="Check that at least one output is enabled",
        )

    for index, output in enumerate(ordered):
        if output.focused:
            return index

    raise NavigationError(
        code=ErrorCode.NO_FOCUSED_OUTPUT,
        message="No focused output in snapshot",
        context={"outputs": [o.name for o in ordered]},
    )


def neighbor_output(ordered: List[Output], step: int) -> Output:
    """Output `step` positions away from the focused one, saturating at both ends."""
    index = focused_output_index(ordered) + step
    index = max(0, min(index, len(ordered) - 1))
    return ordered[index]
