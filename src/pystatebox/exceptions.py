"""Custom exception hierarchy for pystatebox."""

from __future__ import annotations


class StateboxError(Exception):
    """Base exception for all pystatebox errors."""


class StateboxConfigError(StateboxError):
    """Invalid store configuration or initial state."""


class InvalidChangeError(StateboxError, TypeError):
    """Change payload (or convenience call arguments) has the wrong shape."""


class UnknownRootKeyError(StateboxError, KeyError):
    """Change payload references a root key the store was not created with.

    The set of root keys is closed once the store exists, so this is fatal
    to the update that carried the key.  State is left unmodified.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No root key named {key!r} found in the current state")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message.
        return str(self.args[0])


class MissingChangeKindError(StateboxError, ValueError):
    """Change payload carries no change-kind tag while one is required."""

    def __init__(self, kind_field: str) -> None:
        self.kind_field = kind_field
        super().__init__(f"Missing {kind_field!r} in state changes")
