"""
Runtime configuration for one navigator invocation.
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import NavigationMode

SOCKET_ENV_VARS = ("SWAYSOCK", "I3SOCK")


def socket_from_env() -> Optional[str]:
    """First non-empty IPC socket path from the environment, if any."""
    for name in SOCKET_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


class NavigatorConfig(BaseModel):
    """Options for a single navigation."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    mode: NavigationMode = Field(NavigationMode.NEXT, description="Navigation mode")
    socket_path: Optional[str] = Field(None, description="IPC socket path (None lets i3ipc discover it)")
    move: bool = Field(False, description="Move the focused container to the target workspace")
    focus: bool = Field(True, description="Focus the target workspace")
    print_number: bool = Field(False, description="Print the target workspace number")

    @field_validator('socket_path')
    @classmethod
    def normalize_socket_path(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank socket paths as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()
