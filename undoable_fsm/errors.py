"""Exceptions raised by the state machine."""

from typing import Any


class ConfigurationError(Exception):
    """Error raised when a machine configuration is missing or malformed."""

    pass


class InvalidStateError(Exception):
    """Error raised when a requested target is not a defined state.

    Attributes:
        state: The rejected target (may be None when an event has no transition).
    """

    def __init__(self, state: Any, message: str | None = None) -> None:
        self.state = state
        super().__init__(message or f"Wrong state: {state!r}")
