"""Unit tests for configuration and error reporting."""

import pytest
from pydantic import ValidationError

from sway_workspace_nav.config import NavigatorConfig, socket_from_env
from sway_workspace_nav.errors import ErrorCode, NavigationError
from sway_workspace_nav.models import NavigationMode


def test_defaults():
    config = NavigatorConfig()
    assert config.mode is NavigationMode.NEXT
    assert config.focus is True
    assert config.move is False
    assert config.print_number is False
    assert config.socket_path is None


def test_mode_from_cli_spelling():
    assert NavigatorConfig(mode="prev-layout-aware").mode is NavigationMode.PREV_LAYOUT_AWARE


def test_blank_socket_path_is_unset():
    assert NavigatorConfig(socket_path="  ").socket_path is None
    assert NavigatorConfig(socket_path=" /tmp/sway.sock ").socket_path == "/tmp/sway.sock"


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        NavigatorConfig(wrap=True)


def test_socket_from_env_prefers_swaysock(monkeypatch):
    monkeypatch.setenv("SWAYSOCK", "/run/user/1000/sway-ipc.sock")
    monkeypatch.setenv("I3SOCK", "/run/user/1000/i3/ipc-socket")
    assert socket_from_env() == "/run/user/1000/sway-ipc.sock"


def test_socket_from_env_falls_back_to_i3sock(monkeypatch):
    monkeypatch.setenv("SWAYSOCK", "")
    monkeypatch.setenv("I3SOCK", "/run/user/1000/i3/ipc-socket")
    assert socket_from_env() == "/run/user/1000/i3/ipc-socket"


def test_socket_from_env_unset(monkeypatch):
    monkeypatch.delenv("SWAYSOCK", raising=False)
    monkeypatch.delenv("I3SOCK", raising=False)
    assert socket_from_env() is None


def test_error_to_dict():
    error = NavigationError(
        code=ErrorCode.NO_FOCUSED_OUTPUT,
        message="No focused output in snapshot",
        suggestion="Focus an output",
        context={"outputs": ["DP-1"]},
    )
    assert error.to_dict() == {
        "code": 1004,
        "name": "NO_FOCUSED_OUTPUT",
        "message": "No focused output in snapshot",
        "suggestion": "Focus an output",
        "context": {"outputs": ["DP-1"]},
    }
    assert str(error) == "[NO_FOCUSED_OUTPUT] No focused output in snapshot"
    assert error.exit_code == 1
