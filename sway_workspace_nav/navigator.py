"""
Navigation driver.

Fetches one snapshot, computes the target workspace and applies it:
move the focused container, focus the workspace, or both.
"""

import logging
from dataclasses import dataclass
from typing import List

from .config import NavigatorConfig
from .errors import ErrorCode, NavigationError
from .models import NavigationMode, Output, Workspace
from .selector import select_workspace

logger = logging.getLogger(__name__)


@dataclass
class NavigationResult:
    """Outcome of one navigation."""
    mode: NavigationMode
    source: int
    target: int
    moved: bool = False
    focused: bool = False


def focused_workspace(workspaces: List[Workspace]) -> Workspace:
    """
    Return the single focused workspace of a snapshot.

    Raises:
        NavigationError: If no workspace, or more than one, is focused
    """
    focused = [w for w in workspaces if w.focused]
    if not focused:
        raise NavigationError(
            code=ErrorCode.NO_FOCUSED_WORKSPACE,
            message="No focused workspace in snapshot",
            context={"workspaces": [w.num for w in workspaces]},
        )
    if len(focused) > 1:
        raise NavigationError(
            code=ErrorCode.MULTIPLE_FOCUSED_WORKSPACES,
            message=f"Several workspaces report focus: {[w.num for w in focused]}",
        )
    return focused[0]


def prepare_outputs(outputs: List[Output], current_output: str) -> List[Output]:
    """
    Keep active outputs and make sure one of them is marked focused.

    i3 does not report focus on outputs, so the output owning the focused
    workspace is marked instead when nothing is flagged.
    """
    active = [o for o in outputs if o.active and o.current_workspace is not None]
    if active and not any(o.focused for o in active):
        active = [
            o.model_copy(update={"focused": True}) if o.name == current_output else o
            for o in active
        ]
    return active


class WorkspaceNavigator:
    """Runs one navigation against a window manager client."""

    def __init__(self, client, config: NavigatorConfig):
        """
        Initialize navigator.

        Args:
            client: Object providing fetch_workspaces, fetch_outputs and run_command
            config: Navigation options
        """
        self.client = client
        self.config = config

    def navigate(self) -> NavigationResult:
        """
        Compute the target workspace and apply it.

        Returns:
            NavigationResult with source and target workspace numbers

        Raises:
            NavigationError: On a broken snapshot or any IPC failure
        """
        mode = self.config.mode
        workspaces = self.client.fetch_workspaces()
        current = focused_workspace(workspaces)
        logger.debug(f"Focused workspace {current.num} on output {current.output}")

        outputs = None
        if mode.needs_outputs:
            outputs = prepare_outputs(self.client.fetch_outputs(), current.output)
            logger.debug(f"Outputs: {[(o.name, o.position) for o in outputs]}")

        target = select_workspace(mode, workspaces, current.num, current.output, outputs)
        logger.info(f"{mode.value}: workspace {current.num} -> {target}")

        result = NavigationResult(mode=mode, source=current.num, target=target)

        if self.config.move:
            self.client.run_command(f"move container to workspace number {target}")
            result.moved = True

        if self.config.focus:
            self.client.run_command(f"workspace number {target}")
            result.focused = True

        return result
