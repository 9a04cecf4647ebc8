"""Shared pytest fixtures for undoable_fsm tests."""

import logging
from typing import Any

import pytest

from undoable_fsm import StateMachine


SWITCH_CONFIG: dict[str, Any] = {
    "initial": "off",
    "states": {
        "off": {"transitions": {"turnOn": "on"}},
        "on": {"transitions": {"turnOff": "off"}},
    },
}

STUDENT_CONFIG: dict[str, Any] = {
    "initial": "normal",
    "states": {
        "normal": {
            "transitions": {
                "study": "busy",
            }
        },
        "busy": {
            "transitions": {
                "get_tired": "sleeping",
                "get_hungry": "hungry",
            }
        },
        "hungry": {
            "transitions": {
                "eat": "normal",
            }
        },
        "sleeping": {
            "transitions": {
                "get_hungry": "hungry",
                "get_up": "normal",
            }
        },
    },
}


@pytest.fixture
def switch_config() -> dict[str, Any]:
    """Two-state on/off configuration."""
    return SWITCH_CONFIG


@pytest.fixture
def student_config() -> dict[str, Any]:
    """Four-state configuration with a shared event across states."""
    return STUDENT_CONFIG


@pytest.fixture
def switch(switch_config) -> StateMachine:
    """StateMachine over the on/off configuration."""
    return StateMachine(switch_config)


@pytest.fixture
def student(student_config) -> StateMachine:
    """StateMachine over the four-state configuration."""
    return StateMachine(student_config)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
