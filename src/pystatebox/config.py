"""Store configuration for pystatebox."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any

from pystatebox.exceptions import StateboxConfigError

Reducer = Callable[[Mapping[str, Any], Mapping[str, Any]], dict[str, Any]]

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _parse_flag(raw: str | None, default: bool) -> bool:
    """Read an on/off environment flag; unrecognized words keep *default*."""
    word = (raw or "").strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Store configuration.

    Parameters
    ----------
    require_change_kind : bool
        Reject change payloads without a non-empty change-kind tag.
    change_kind_field : str
        Name of the payload field holding the change-kind tag.  The field
        is never merged into state.
    reducer : callable or None
        Replacement for the default merge reducer, called as
        ``reducer(base_state, changes)``.  ``None`` selects
        :func:`pystatebox.state.reducer.merge`.
    """

    require_change_kind: bool = True
    change_kind_field: str = "kind"
    reducer: Reducer | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.change_kind_field, str) or not self.change_kind_field:
            raise StateboxConfigError("change_kind_field must be a non-empty string")
        if self.reducer is not None and not callable(self.reducer):
            raise StateboxConfigError("reducer must be callable")

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from environment variables.

        Reads ``STATEBOX_REQUIRE_CHANGE_KIND`` and
        ``STATEBOX_CHANGE_KIND_FIELD``.  Explicit keyword arguments override
        environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "require_change_kind" not in overrides:
            config_kwargs["require_change_kind"] = _parse_flag(env.get("STATEBOX_REQUIRE_CHANGE_KIND"), True)

        field_env = env.get("STATEBOX_CHANGE_KIND_FIELD")
        if field_env is not None and "change_kind_field" not in overrides:
            config_kwargs["change_kind_field"] = field_env.strip()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
