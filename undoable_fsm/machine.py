"""StateMachine: event-driven finite state machine with undo/redo history.

This module provides StateMachine, which tracks a current state over a
MachineConfig, applies direct and event-driven transitions, and records
visited states so they can be undone and redone.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from undoable_fsm.config import MachineConfig
from undoable_fsm.errors import InvalidStateError
from undoable_fsm.mode import TransitionMode

logger = logging.getLogger(__name__)


class StateMachine:
    """Finite state machine with undo/redo history.

    History is kept in two stacks. ``past`` holds previously visited states
    (most recent last). ``future`` holds undone states (most recently undone
    first). A fresh transition clears ``future``. A redo does not push the
    state it leaves back onto ``past``.

    Instances are not thread-safe; callers must serialize mutating calls.

    Attributes:
        config: The MachineConfig this machine runs over.
        current_state: The active state identifier.
        past: Previously visited states, oldest first.
        future: Undone states, most recently undone first.

    Example:
        >>> fsm = StateMachine({
        ...     "initial": "off",
        ...     "states": {
        ...         "off": {"transitions": {"turnOn": "on"}},
        ...         "on": {"transitions": {"turnOff": "off"}},
        ...     },
        ... })
        >>> fsm.trigger("turnOn")
        >>> fsm.get_state()
        'on'
        >>> fsm.undo()
        True
        >>> fsm.get_state()
        'off'
    """

    def __init__(self, config: Union[MachineConfig, Mapping[str, Any], None]):
        """Initialize the machine at the configured initial state.

        The initial state is not checked against the declared states.

        Args:
            config: A MachineConfig or a mapping of the same shape.

        Raises:
            ConfigurationError: If config is None or malformed.
        """
        self._config = MachineConfig.coerce(config)
        self._current_state = self._config.initial
        self._past: List[str] = []
        self._future: List[str] = []

    @property
    def config(self) -> MachineConfig:
        """Get the configuration (read-only)."""
        return self._config

    @property
    def current_state(self) -> str:
        """Get the current state (read-only)."""
        return self._current_state

    @property
    def past(self) -> Tuple[str, ...]:
        """Get the undo stack, oldest first (read-only)."""
        return tuple(self._past)

    @property
    def future(self) -> Tuple[str, ...]:
        """Get the redo stack, next redo first (read-only)."""
        return tuple(self._future)

    def get_state(self) -> str:
        """Return the active state."""
        return self._current_state

    def change_state(self, target: Optional[str]) -> None:
        """Go to target state, recording the move in history.

        Pushes the current state onto the undo stack and discards any redo
        history.

        Args:
            target: Identifier of the state to go to.

        Raises:
            InvalidStateError: If target is not a defined state. State and
                history are left unchanged.
        """
        self._apply_transition(target, TransitionMode.NORMAL)

    def trigger(self, event: str) -> None:
        """Change state according to the transition rules for event.

        An event with no transition from the current state fails the same
        way as a request for an undefined state.

        Args:
            event: Event identifier.

        Raises:
            InvalidStateError: If the current state has no transition for event,
                or the transition target is not a defined state.
        """
        target = self._config.resolve_target(self._current_state, event)
        if target is None:
            logger.debug(f"No transition for event {event!r} from {self._current_state!r}")
        self.change_state(target)

    def reset(self) -> None:
        """Reset to the initial state without touching history."""
        logger.debug(f"Reset {self._current_state!r} -> {self._config.initial!r}")
        self._current_state = self._config.initial

    def get_states(self, event: Optional[str] = None) -> List[str]:
        """Return states that have a transition for event.

        Args:
            event: Event identifier. When None or empty, all states are returned.

        Returns:
            State identifiers in declaration order. Empty if none match.
        """
        if not event:
            return self._config.state_ids()

        return [
            state
            for state, definition in self._config.states.items()
            if event in definition.transitions
        ]

    def can_undo(self) -> bool:
        """Check if undo is available."""
        return bool(self._past)

    def can_redo(self) -> bool:
        """Check if redo is available."""
        return bool(self._future)

    def undo(self) -> bool:
        """Go back to the previous state.

        Returns:
            True if a state was undone, False if the undo stack is empty.
        """
        if not self._past:
            return False
        self._apply_transition(self._past[-1], TransitionMode.UNDO)
        return True

    def redo(self) -> bool:
        """Go forward to the most recently undone state.

        Returns:
            True if a state was redone, False if the redo stack is empty.
        """
        if not self._future:
            return False
        self._apply_transition(self._future[0], TransitionMode.REDO)
        return True

    def clear_history(self) -> None:
        """Clear undo and redo history."""
        self._past = []
        self._future = []
        logger.debug("History cleared")

    def _apply_transition(self, target: Optional[str], mode: TransitionMode) -> None:
        """Validate target, record history for mode, then move to target.

        Args:
            target: Identifier of the state to go to.
            mode: How the move is recorded in history.

        Raises:
            InvalidStateError: If target is not a defined state.
        """
        if not self._config.has_state(target):
            logger.warning(f"Rejected transition {self._current_state!r} -> {target!r}")
            raise InvalidStateError(target)

        if mode is TransitionMode.UNDO:
            self._past.pop()
            self._future.insert(0, self._current_state)
        elif mode is TransitionMode.REDO:
            self._future.pop(0)
        else:
            self._past.append(self._current_state)
            self._future = []

        logger.debug(f"Transition ({mode.value}): {self._current_state!r} -> {target!r}")
        self._current_state = target

    def __repr__(self) -> str:
        """String representation showing current state and history depth."""
        return (
            f"StateMachine(current_state={self._current_state}, "
            f"past={len(self._past)}, future={len(self._future)})"
        )
