"""
Workspace selection.

Pure functions that compute the target workspace number from a snapshot of
workspaces (and outputs, for layout-aware modes). Nothing here talks to the
window manager.
"""

import logging
from typing import List, Optional, Sequence

from .errors import ErrorCode, NavigationError
from .models import NavigationMode, Output, Workspace
from .ordering import neighbor_output, sort_outputs

logger = logging.getLogger(__name__)

FIRST_WORKSPACE = 1


def find_by(workspaces: Sequence[Workspace], current: int, step: int) -> int:
    """
    Linear navigation over all workspace numbers, ignoring outputs.

    Clamps to [1, highest existing number], except that stepping forward from
    the highest workspace goes past it so a new top workspace can be created.

    Args:
        workspaces: Workspace snapshot
        current: Number of the focused workspace
        step: Signed distance to move

    Returns:
        Target workspace number

    Raises:
        NavigationError: If the snapshot is empty
    """
    if not workspaces:
        raise NavigationError(
            code=ErrorCode.NO_WORKSPACES,
            message="Workspace snapshot is empty",
        )

    last = max(w.num for w in workspaces)
    target = current + step

    if current == last and step > 0:
        target = last + step
    elif target < FIRST_WORKSPACE:
        target = FIRST_WORKSPACE
    elif target > last:
        target = last

    return target


def find_on_output(workspaces: Sequence[Workspace], current: int, step: int, output: str) -> int:
    """
    Linear navigation inside the gap between other outputs' workspace numbers.

    The range runs from one past the nearest other-output number below
    `current` up to one before the nearest other-output number above it. With
    nothing above, the range is open so the output can grow a new workspace.

    Args:
        workspaces: Workspace snapshot
        current: Number of the focused workspace
        step: Signed distance to move
        output: Name of the output owning the focused workspace

    Returns:
        Target workspace number
    """
    other_nums = [w.num for w in workspaces if w.output != output]
    below = [n for n in other_nums if n < current]
    above = [n for n in other_nums if n > current]

    target = current + step
    first = max([0] + below) + 1
    last = min(above) - 1 if above else target

    if target < first:
        target = first
    elif target > last:
        target = last

    return target


def find_output(workspaces: Sequence[Workspace], current: int, step: int, output: str) -> int:
    """
    Jump to the nearest workspace shown on another output.

    Only visible workspaces of other outputs are candidates. Returns `current`
    when there is no candidate in the requested direction or `step` is zero.
    """
    candidates = sorted(w.num for w in workspaces if w.output != output and w.visible)

    if step < 0:
        below = [n for n in candidates if n < current]
        return below[-1] if below else current
    if step > 0:
        above = [n for n in candidates if n > current]
        return above[0] if above else current
    return current


def layout_aware(
    workspaces: Sequence[Workspace],
    current: int,
    output: str,
    step: int,
    outputs: Sequence[Output],
) -> int:
    """
    Step through the current output's workspaces, then on to the next output.

    Inside the output's sorted workspace numbers this moves one position. At
    the first (backward) or last (forward) position it switches to the
    neighbouring output in spatial order, saturating at the outermost outputs,
    and returns the workspace that output is showing.

    Args:
        workspaces: Workspace snapshot
        current: Number of the focused workspace
        output: Name of the output owning the focused workspace
        step: Signed distance to move
        outputs: Output snapshot (any order)

    Returns:
        Target workspace number

    Raises:
        NavigationError: If `current` is not on `output`, the outputs are
            empty or unfocused, or the computed index falls off the list
    """
    nums = sorted(w.num for w in workspaces if w.output == output)

    try:
        index = nums.index(current)
    except ValueError:
        raise NavigationError(
            code=ErrorCode.WORKSPACE_NOT_ON_OUTPUT,
            message=f"Workspace {current} is not on output {output}",
            context={"output": output, "workspaces": nums},
        ) from None

    if (index == 0 and step < 0) or (index == len(nums) - 1 and step > 0):
        neighbor = neighbor_output(sort_outputs(outputs), step)
        logger.debug(f"Edge of output {output} reached, switching to output {neighbor.name}")
        return neighbor.workspace_number()

    new_index = index + step
    if not 0 <= new_index < len(nums):
        raise NavigationError(
            code=ErrorCode.INDEX_OUT_OF_RANGE,
            message=f"Workspace index {new_index} out of range for output {output}",
            context={"output": output, "workspaces": nums, "index": new_index},
        )
    return nums[new_index]


def select_workspace(
    mode: NavigationMode,
    workspaces: Sequence[Workspace],
    current: int,
    output: str,
    outputs: Optional[List[Output]] = None,
) -> int:
    """
    Compute the target workspace number for a navigation mode.

    Raises:
        NavigationError: If a layout-aware mode gets no outputs, or the
            selected algorithm detects a broken snapshot
    """
    step = mode.step

    if mode in (NavigationMode.NEXT, NavigationMode.PREV):
        return find_by(workspaces, current, step)
    if mode in (NavigationMode.NEXT_ON_OUTPUT, NavigationMode.PREV_ON_OUTPUT):
        return find_on_output(workspaces, current, step, output)
    if mode in (NavigationMode.NEXT_OUTPUT, NavigationMode.PREV_OUTPUT):
        return find_output(workspaces, current, step, output)

    if not outputs:
        raise NavigationError(
            code=ErrorCode.NO_OUTPUTS,
            message=f"Mode {mode.value} needs the output snapshot, which is empty",
            suggestion="Check that at least one output is enabled",
        )
    return layout_aware(workspaces, current, output, step, outputs)
