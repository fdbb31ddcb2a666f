"""Shallow merge reducer.

Root keys are closed: a change may only touch keys the base state already
has.  Each touched root value is merged one level deep; anything nested
below that is replaced wholesale.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pystatebox.exceptions import InvalidChangeError, UnknownRootKeyError

DEFAULT_KIND_FIELD = "kind"


def merge(
    base_state: Mapping[str, Any],
    changes: Mapping[str, Any],
    *,
    kind_field: str = DEFAULT_KIND_FIELD,
) -> dict[str, Any]:
    """Return a new state with *changes* merged onto *base_state*.

    Root keys missing from *changes* keep the same sub-object (by identity).
    Neither argument is mutated.

    Raises
    ------
    UnknownRootKeyError
        A key in *changes* (other than *kind_field*) is not a root key of
        *base_state*.
    InvalidChangeError
        A partial sub-object is not a mapping.  This only guards the merge
        operation itself; the contents of the state are never validated.
    """
    new_state = dict(base_state)
    for key, partial in changes.items():
        if key == kind_field:
            continue
        if key not in base_state:
            raise UnknownRootKeyError(key)
        if not isinstance(partial, Mapping):
            raise InvalidChangeError(f"Change for root key {key!r} must be a mapping, got {type(partial).__name__}")
        new_state[key] = {**base_state[key], **partial}
    return new_state
