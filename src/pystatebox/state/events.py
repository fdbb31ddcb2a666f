"""Notification records.

A :class:`Notification` is produced by every committed update.  Listeners
receive its ``previous_state`` and ``changes`` together with the store's
state at the moment they are called.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Notification(BaseModel):
    """A committed state transition awaiting delivery."""

    # Fields are typed Any so pydantic passes the objects through untouched;
    # listeners must receive the exact payload the caller submitted.
    model_config = ConfigDict(frozen=True)

    previous_state: Any
    state: Any
    changes: Any
