"""
Sway/i3 IPC client wrapper using the synchronous i3ipc connection.

The navigator runs once per keybinding and does a handful of blocking calls,
so the sync API is used rather than i3ipc.aio.
"""

import logging
from typing import List, Optional

import i3ipc

from .errors import ErrorCode, NavigationError, SwayIPCError
from .models import Output, Workspace

logger = logging.getLogger(__name__)


class SwayClient:
    """Blocking wrapper for Sway/i3 IPC communication."""

    def __init__(self, socket_path: Optional[str] = None):
        """
        Initialize client.

        Args:
            socket_path: IPC socket path (i3ipc discovers it when None)
        """
        self.socket_path = socket_path
        self.conn: Optional[i3ipc.Connection] = None

    def connect(self) -> None:
        """Establish connection to the window manager IPC socket."""
        if self.conn is not None:
            return

        try:
            self.conn = i3ipc.Connection(socket_path=self.socket_path)
        except Exception as e:
            raise SwayIPCError(ErrorCode.IPC_CONNECTION_FAILED, "connect", str(e)) from e
        logger.debug(f"Connected to IPC socket {self.conn.socket_path}")

    def close(self) -> None:
        """Close connection to the window manager."""
        if self.conn:
            self.conn.main_quit()
            self.conn = None

    def _connection(self) -> i3ipc.Connection:
        if self.conn is None:
            self.connect()
        return self.conn

    def fetch_workspaces(self) -> List[Workspace]:
        """Snapshot of all workspaces across all outputs."""
        conn = self._connection()
        try:
            replies = conn.get_workspaces()
        except Exception as e:
            raise SwayIPCError(ErrorCode.IPC_QUERY_FAILED, "get_workspaces", str(e)) from e
        return [Workspace.from_i3_workspace(w) for w in replies]

    def fetch_outputs(self) -> List[Output]:
        """Snapshot of all outputs, including inactive ones."""
        conn = self._connection()
        try:
            replies = conn.get_outputs()
        except Exception as e:
            raise SwayIPCError(ErrorCode.IPC_QUERY_FAILED, "get_outputs", str(e)) from e
        return [Output.from_i3_output(o) for o in replies]

    def run_command(self, command: str) -> None:
        """
        Run a window manager command.

        Args:
            command: Command text (e.g., "workspace number 3")

        Raises:
            NavigationError: If the IPC call fails or the command is rejected
        """
        conn = self._connection()
        logger.debug(f"Running command: {command}")
        try:
            replies = conn.command(command)
        except Exception as e:
            raise SwayIPCError(ErrorCode.IPC_QUERY_FAILED, "command", str(e)) from e

        errors = [r.error or "unknown error" for r in replies if not r.success]
        if errors:
            raise NavigationError(
                code=ErrorCode.COMMAND_FAILED,
                message=f"Command '{command}' rejected: {'; '.join(errors)}",
                context={"command": command, "errors": errors},
            )

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
