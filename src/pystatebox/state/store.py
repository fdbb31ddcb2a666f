"""Observable single-root state store.

Updates are merged by the reducer, committed, and then delivered to every
listener synchronously.  A listener may call back into the store: updates
are queued and delivered after the running pass, subscription changes are
staged until the running pass ends.
"""

from __future__ import annotations

import copy
import dataclasses
import functools
import logging
from collections import deque
from collections.abc import Mapping
from typing import Any

from pystatebox.config import Reducer, StoreConfig
from pystatebox.exceptions import InvalidChangeError, MissingChangeKindError, StateboxConfigError
from pystatebox.normalize import build_change
from pystatebox.state.events import Notification
from pystatebox.state.reducer import merge
from pystatebox.state.registry import Listener, ListenerRegistry, Subscription

_logger = logging.getLogger(__name__)


class Store:
    """In-memory observable store.

    Create instances through :func:`create_store`.
    """

    def __init__(self, initial_state: Mapping[str, Any], config: StoreConfig | None = None) -> None:
        if not isinstance(initial_state, Mapping):
            raise StateboxConfigError(f"initial_state must be a mapping, got {type(initial_state).__name__}")
        self._config = config or StoreConfig()
        self._kind_field = self._config.change_kind_field
        self._reducer: Reducer = self._config.reducer or functools.partial(merge, kind_field=self._kind_field)
        self._initial_state: dict[str, Any] = copy.deepcopy(dict(initial_state))
        self._state: dict[str, Any] = self._initial_state
        self._registry = ListenerRegistry()
        self._pending: deque[Notification] = deque()

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def state(self) -> dict[str, Any]:
        return self._state

    @property
    def initial_state(self) -> dict[str, Any]:
        return self._initial_state

    def get_state(self) -> dict[str, Any]:
        """Return the current state by reference; treat it as read-only."""
        return self._state

    def subscribe(self, listener: Listener) -> Subscription:
        """Register *listener* and return its one-shot unsubscribe handle."""
        return self._registry.add(listener)

    def apply_change(self, changes: Mapping[str, Any], reset: bool = False) -> None:
        """Merge *changes* into the state (or into the initial state if *reset*) and notify."""
        if not isinstance(changes, Mapping):
            raise InvalidChangeError(f"changes must be a mapping, got {type(changes).__name__}")
        if self._config.require_change_kind and not changes.get(self._kind_field):
            raise MissingChangeKindError(self._kind_field)

        base = self._initial_state if reset else self._state
        new_state = self._reducer(base, changes)

        notification = Notification(previous_state=self._state, state=new_state, changes=changes)
        self._state = new_state
        _logger.debug("Committed %s=%r reset=%s", self._kind_field, changes.get(self._kind_field), reset)

        if self._registry.iterating:
            self._pending.append(notification)
            _logger.debug("Notification deferred; %d pending", len(self._pending))
            return

        try:
            self._notify(notification)
            while self._pending:
                self._notify(self._pending.popleft())
        finally:
            if self._pending:
                _logger.warning("Dropping %d pending notification(s) after listener failure", len(self._pending))
                self._pending.clear()

    def reset_and_apply_change(self, changes: Mapping[str, Any]) -> None:
        """Merge *changes* onto the initial state, discarding earlier updates."""
        self.apply_change(changes, reset=True)

    def set_state(self, *args: Any) -> None:
        """Convenience front-end; see :func:`pystatebox.normalize.build_change`."""
        self.apply_change(build_change(*args, kind_field=self._kind_field))

    def reset_state(self, *args: Any) -> None:
        self.apply_change(build_change(*args, kind_field=self._kind_field), reset=True)

    # redux-style alias
    dispatch = set_state

    def _notify(self, notification: Notification) -> None:
        try:
            for listener in self._registry.begin_pass():
                # Current state, which may already include updates still queued for delivery.
                listener(notification.previous_state, self._state, notification.changes)
        finally:
            self._registry.end_pass()


def create_store(
    initial_state: Mapping[str, Any],
    config: StoreConfig | None = None,
    **options: Any,
) -> Store:
    """Create a :class:`Store`.

    *options* are :class:`StoreConfig` fields applied on top of *config*
    (or the defaults), e.g. ``create_store(state, require_change_kind=False)``.
    """
    if options:
        try:
            config = dataclasses.replace(config or StoreConfig(), **options)
        except TypeError as exc:
            raise StateboxConfigError(str(exc)) from exc
    return Store(initial_state, config)
