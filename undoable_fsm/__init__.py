"""Finite state machine with undo/redo history.

This package provides StateMachine, its configuration models, and the
errors it raises.
"""

from undoable_fsm.config import MachineConfig, StateDefinition, load_config
from undoable_fsm.errors import ConfigurationError, InvalidStateError
from undoable_fsm.logging_utils import PackageFilter, setup_logging
from undoable_fsm.machine import StateMachine
from undoable_fsm.mode import TransitionMode

__all__ = [
    "ConfigurationError",
    "InvalidStateError",
    "MachineConfig",
    "PackageFilter",
    "StateDefinition",
    "StateMachine",
    "TransitionMode",
    "load_config",
    "setup_logging",
]
