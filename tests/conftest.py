"""Pytest configuration and fixtures for sway-workspace-nav tests."""

import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest

# Make the package importable without installation
package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))

from sway_workspace_nav.errors import ErrorCode, NavigationError
from sway_workspace_nav.models import Output, OutputRect, Workspace


class FakeSwayClient:
    """In-memory stand-in for SwayClient that records issued commands."""

    def __init__(
        self,
        workspaces: List[Workspace],
        outputs: Optional[List[Output]] = None,
        rejected: tuple = (),
    ):
        self.workspaces = workspaces
        self.outputs = outputs or []
        self.rejected = rejected
        self.commands: List[str] = []
        self.output_fetches = 0

    def fetch_workspaces(self) -> List[Workspace]:
        return list(self.workspaces)

    def fetch_outputs(self) -> List[Output]:
        self.output_fetches += 1
        return list(self.outputs)

    def run_command(self, command: str) -> None:
        if command in self.rejected:
            raise NavigationError(
                code=ErrorCode.COMMAND_FAILED,
                message=f"Command '{command}' rejected: test rejection",
            )
        self.commands.append(command)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return None


@pytest.fixture
def ws() -> Callable[..., Workspace]:
    """Factory for Workspace models."""
    def make(num: int, output: str, visible: bool = False, focused: bool = False) -> Workspace:
        return Workspace(
            num=num,
            name=str(num),
            output=output,
            visible=visible or focused,
            focused=focused,
        )
    return make


@pytest.fixture
def output() -> Callable[..., Output]:
    """Factory for Output models."""
    def make(name: str, x: int, y: int, current: Optional[str], focused: bool = False, active: bool = True) -> Output:
        return Output(
            name=name,
            rect=OutputRect(x=x, y=y, width=1920, height=1080),
            current_workspace=current,
            focused=focused,
            active=active,
        )
    return make


@pytest.fixture
def two_output_workspaces(ws) -> List[Workspace]:
    """Workspaces 1-3 on DP-1 (left), 5-6 on HDMI-A-1 (right); 2 focused."""
    return [
        ws(1, "DP-1"),
        ws(2, "DP-1", focused=True),
        ws(3, "DP-1"),
        ws(5, "HDMI-A-1", visible=True),
        ws(6, "HDMI-A-1"),
    ]


@pytest.fixture
def fake_client_factory() -> Callable[..., FakeSwayClient]:
    return FakeSwayClient
