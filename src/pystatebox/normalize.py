"""Convenience call shapes for building change payloads.

Three shapes are accepted:

* ``build_change(changes)`` - a ready change mapping, returned unchanged.
* ``build_change("KIND", changes)`` - a copy of *changes* tagged with the kind;
  ``changes`` may be ``None`` for a tag-only change.
* ``build_change("KIND", "root_key", partial)`` - a single root-key update.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pystatebox.exceptions import InvalidChangeError
from pystatebox.state.reducer import DEFAULT_KIND_FIELD


def build_change(*args: Any, kind_field: str = DEFAULT_KIND_FIELD) -> Mapping[str, Any]:
    """Normalize convenience arguments into a single change payload."""
    if not args or len(args) > 3:
        raise InvalidChangeError(f"Expected 1 to 3 arguments, got {len(args)}")

    first, *rest = args
    if not isinstance(first, str):
        if rest:
            raise InvalidChangeError("Extra arguments are only allowed after a change kind")
        if not isinstance(first, Mapping):
            raise InvalidChangeError(f"changes must be a mapping, got {type(first).__name__}")
        return first

    kind = first
    if len(rest) == 2:
        root_key, partial = rest
        if not isinstance(root_key, str):
            raise InvalidChangeError(f"root key must be a string, got {type(root_key).__name__}")
        changes: dict[str, Any] = {root_key: partial}
    elif rest and isinstance(rest[0], str):
        raise InvalidChangeError(f"Missing value for root key {rest[0]!r}")
    elif rest and rest[0] is not None:
        if not isinstance(rest[0], Mapping):
            raise InvalidChangeError(f"changes must be a mapping, got {type(rest[0]).__name__}")
        changes = dict(rest[0])
    else:
        changes = {}

    changes[kind_field] = kind
    return changes
