"""Listener registry with staged mutation during notification passes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

Listener = Callable[[Any, Any, Any], None]


class Subscription:
    """Handle returned by :meth:`ListenerRegistry.add`.

    Calling the handle (or :meth:`unsubscribe`) removes the registration the
    first time and does nothing afterwards.
    """

    __slots__ = ("_active", "_registry", "listener")

    def __init__(self, registry: ListenerRegistry, listener: Listener) -> None:
        self._registry = registry
        self._active = True
        self.listener = listener

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False
        self._registry._remove(self)  # noqa: SLF001

    def __call__(self) -> None:
        self.unsubscribe()

    def __repr__(self) -> str:
        return f"Subscription(listener={self.listener!r}, active={self._active})"


class ListenerRegistry:
    """Ordered listener registrations.

    While a pass is running the live list is frozen; adds and removes go to a
    staged copy that replaces the live list when the pass ends.
    """

    def __init__(self) -> None:
        self._listeners: list[Subscription] = []
        self._staged: list[Subscription] | None = None
        self._iterating = False

    @property
    def iterating(self) -> bool:
        return self._iterating

    def __len__(self) -> int:
        return len(self._writable())

    def _writable(self) -> list[Subscription]:
        if not self._iterating:
            return self._listeners
        if self._staged is None:
            self._staged = list(self._listeners)
        return self._staged

    def add(self, listener: Listener) -> Subscription:
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")
        subscription = Subscription(self, listener)
        self._writable().append(subscription)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        listeners = self._writable()
        # Identity match: the same callable may be registered more than once.
        for index, candidate in enumerate(listeners):
            if candidate is subscription:
                del listeners[index]
                return

    def begin_pass(self) -> Iterator[Listener]:
        """Mark a pass as running and iterate the registrations current now."""
        self._iterating = True
        snapshot = self._listeners
        return (subscription.listener for subscription in snapshot)

    def end_pass(self) -> None:
        self._iterating = False
        if self._staged is not None:
            self._listeners = self._staged
            self._staged = None
