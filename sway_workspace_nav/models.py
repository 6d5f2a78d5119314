"""
Data models for workspace navigation.

All models use Pydantic v2 for validation and are immutable snapshots of
window manager state.
"""

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorCode, NavigationError


_LEADING_NUMBER = re.compile(r"^\s*(-?\d+)")


class NavigationMode(str, Enum):
    """Workspace navigation modes (values are the CLI spellings)."""
    NEXT = "next"
    PREV = "prev"
    NEXT_OUTPUT = "next-output"
    PREV_OUTPUT = "prev-output"
    NEXT_ON_OUTPUT = "next-on-output"
    PREV_ON_OUTPUT = "prev-on-output"
    NEXT_LAYOUT_AWARE = "next-layout-aware"
    PREV_LAYOUT_AWARE = "prev-layout-aware"

    @property
    def step(self) -> int:
        """+1 for forward modes, -1 for backward modes."""
        return 1 if self.value.startswith("next") else -1

    @property
    def needs_outputs(self) -> bool:
        """Whether the mode needs an output snapshot besides the workspaces."""
        return self.value.endswith("layout-aware")


class Workspace(BaseModel):
    """A workspace as reported by GET_WORKSPACES."""
    model_config = ConfigDict(frozen=True)

    num: int = Field(..., description="Workspace number (-1 for named workspaces on i3)")
    name: str = Field("", description="Workspace name")
    output: str = Field(..., description="Name of the owning output (e.g., DP-1)")
    visible: bool = Field(False, description="Whether the workspace is shown on its output")
    focused: bool = Field(False, description="Whether the workspace has focus")

    @classmethod
    def from_i3_workspace(cls, workspace: Any) -> "Workspace":
        """Create Workspace from i3ipc WorkspaceReply object."""
        return cls(
            num=workspace.num,
            name=workspace.name or "",
            output=workspace.output,
            visible=bool(workspace.visible),
            focused=bool(workspace.focused),
        )


class OutputRect(BaseModel):
    """Output geometry (position and size)."""
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int = 0
    height: int = 0


class Output(BaseModel):
    """A physical output as reported by GET_OUTPUTS."""
    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Output name from IPC (e.g., DP-1)")
    rect: OutputRect = Field(description="Output position and size")
    current_workspace: Optional[str] = Field(None, description="Workspace currently visible on this output")
    focused: bool = Field(False, description="Whether the output has focus (sway only)")
    active: bool = Field(True, description="Whether output is currently active")

    @property
    def position(self) -> tuple:
        return (self.rect.x, self.rect.y)

    def workspace_number(self) -> int:
        """
        Parse current_workspace as a workspace number.

        Uses the leading integer of the name, the way i3 numbers workspaces
        ("3" -> 3, "3:web" -> 3).

        Raises:
            NavigationError: If the output shows no workspace or its name has no number
        """
        match = _LEADING_NUMBER.match(self.current_workspace or "")
        if match is None:
            raise NavigationError(
                code=ErrorCode.INVALID_WORKSPACE_NUMBER,
                message=(
                    f"Output {self.name or self.position} shows workspace "
                    f"{self.current_workspace!r}, which is not a numbered workspace"
                ),
                suggestion=(
                    "Layout-aware navigation only lands on numbered workspaces. On a named "
                    "workspace at the outermost output the target is that same named "
                    "workspace; switch to a numbered one first"
                ),
                context={"output": self.name, "current_workspace": self.current_workspace},
            )
        return int(match.group(1))

    @classmethod
    def from_i3_output(cls, output: Any) -> "Output":
        """Create Output from i3ipc OutputReply object."""
        # sway adds "focused" to outputs; i3 does not
        ipc_data = getattr(output, "ipc_data", None) or {}
        return cls(
            name=output.name,
            rect=OutputRect(
                x=output.rect.x,
                y=output.rect.y,
                width=output.rect.width,
                height=output.rect.height,
            ),
            current_workspace=output.current_workspace,
            focused=bool(ipc_data.get("focused", False)),
            active=bool(output.active),
        )
