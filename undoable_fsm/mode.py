"""Transition mode enumeration for history recording.

This module provides TransitionMode enum, which tells the machine how a
state change should be recorded in the undo/redo history.
"""

from enum import Enum


class TransitionMode(Enum):
    """How a transition is recorded in history.

    - NORMAL: A fresh transition; current state is pushed onto past, future is cleared
    - UNDO: Replay of an undo; past is popped, current state goes to the front of future
    - REDO: Replay of a redo; front of future is consumed, nothing is pushed onto past

    Enum values are lowercase strings.
    """

    NORMAL = "normal"
    UNDO = "undo"
    REDO = "redo"
