"""
Error handling for the workspace navigator.

Every failure is raised as a NavigationError carrying a structured code and
propagates to the CLI, which prints it and exits with the mapped status.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for the workspace navigator.

    Custom codes:
    - 1000-1099: Precondition violations (broken snapshot invariants)
    - 1400-1499: Window manager IPC errors
    """

    # Precondition violations (1000-1099)
    NO_WORKSPACES = 1000
    NO_FOCUSED_WORKSPACE = 1001
    MULTIPLE_FOCUSED_WORKSPACES = 1002
    NO_OUTPUTS = 1003
    NO_FOCUSED_OUTPUT = 1004
    WORKSPACE_NOT_ON_OUTPUT = 1005
    INDEX_OUT_OF_RANGE = 1006
    INVALID_WORKSPACE_NUMBER = 1007

    # IPC errors (1400-1499)
    IPC_CONNECTION_FAILED = 1400
    IPC_QUERY_FAILED = 1401
    COMMAND_FAILED = 1402

    @property
    def is_ipc_error(self) -> bool:
        return 1400 <= self.value < 1500


# Exit codes
EXIT_OK = 0
EXIT_PRECONDITION = 1
EXIT_IPC = 2


class NavigationError(Exception):
    """Base exception for workspace navigation failures."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize navigation error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"

    @property
    def exit_code(self) -> int:
        """Process exit status for this error (2 for IPC failures, 1 otherwise)."""
        return EXIT_IPC if self.code.is_ipc_error else EXIT_PRECONDITION

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to a dictionary.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class SwayIPCError(NavigationError):
    """Window manager IPC communication error."""

    def __init__(self, code: ErrorCode, operation: str, reason: str):
        """
        Initialize IPC error.

        Args:
            code: One of the IPC error codes
            operation: IPC operation that failed
            reason: Reason for failure
        """
        super().__init__(
            code=code,
            message=f"Sway IPC {operation} failed: {reason}",
            suggestion="Ensure Sway/i3 is running and the IPC socket is accessible",
            context={"operation": operation, "reason": reason}
        )
