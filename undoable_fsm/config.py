"""Machine configuration models and loaders.

This module provides the pydantic models describing a state machine
(StateDefinition, MachineConfig) and load_config() for reading a
configuration from a JSON or TOML file.

Validation is permissive: neither ``initial`` nor transition
targets are checked against the declared states. Existence is only checked
when a transition is requested.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import pydantic as pd

from undoable_fsm.errors import ConfigurationError

logger = logging.getLogger(__name__)


class StateDefinition(pd.BaseModel):
    """A single state and its outgoing transitions.

    Attributes:
        transitions: Mapping of event identifier to target state identifier.
    """

    transitions: Dict[str, str] = pd.Field(default_factory=dict)

    model_config = pd.ConfigDict(extra="ignore", frozen=True)


class MachineConfig(pd.BaseModel):
    """Immutable state machine configuration.

    Attributes:
        initial: Identifier of the starting state.
        states: Mapping of state identifier to StateDefinition, in declaration order.

    Example:
        >>> config = MachineConfig.coerce({
        ...     "initial": "off",
        ...     "states": {
        ...         "off": {"transitions": {"turnOn": "on"}},
        ...         "on": {"transitions": {"turnOff": "off"}},
        ...     },
        ... })
        >>> list(config.states)
        ['off', 'on']
    """

    initial: str
    states: Dict[str, StateDefinition]

    model_config = pd.ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def coerce(cls, value: Union["MachineConfig", Mapping[str, Any], None]) -> "MachineConfig":
        """Build a MachineConfig from a config instance or a plain mapping.

        Args:
            value: An existing MachineConfig, or a mapping of the same shape.

        Returns:
            The validated MachineConfig.

        Raises:
            ConfigurationError: If value is None or does not describe a machine.
        """
        if value is None:
            raise ConfigurationError("No configuration supplied")
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(value)
        except pd.ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def state_ids(self) -> list[str]:
        """Return all state identifiers in declaration order."""
        return list(self.states)

    def has_state(self, state: Any) -> bool:
        """Check whether state is a defined state identifier."""
        return isinstance(state, str) and state in self.states

    def resolve_target(self, state: str, event: Any) -> Optional[str]:
        """Look up the target of event from state.

        Args:
            state: Source state identifier.
            event: Event identifier.

        Returns:
            Target state identifier, or None if state is undefined or has no
            transition for event.
        """
        definition = self.states.get(state)
        if definition is None:
            return None
        return definition.transitions.get(event)


def load_config(path: Union[str, Path]) -> MachineConfig:
    """Load a machine configuration from a JSON or TOML file.

    Args:
        path: Path to a ``.json`` or ``.toml`` file.

    Returns:
        The validated MachineConfig.

    Raises:
        ConfigurationError: If the file cannot be read, has an unsupported
            suffix, or does not contain a valid configuration.
    """
    config_path = Path(path)
    suffix = config_path.suffix.lower()

    if suffix not in (".json", ".toml"):
        raise ConfigurationError(f"Unsupported config format: {config_path.name}")

    try:
        if suffix == ".toml":
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        else:
            data = json.loads(config_path.read_text(encoding="utf-8"))
    except (IOError, OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read config file {config_path}: {e}") from e
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Failed to parse config file {config_path}: {e}") from e

    logger.debug(f"Loaded machine config from {config_path}")
    return MachineConfig.coerce(data)
