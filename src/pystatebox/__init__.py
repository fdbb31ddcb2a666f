"""pystatebox - Minimal observable state container."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pystatebox")
except PackageNotFoundError:
    __version__ = "0+local"
from pystatebox.config import StoreConfig
from pystatebox.exceptions import (
    InvalidChangeError,
    MissingChangeKindError,
    StateboxConfigError,
    StateboxError,
    UnknownRootKeyError,
)
from pystatebox.normalize import build_change
from pystatebox.state.events import Notification
from pystatebox.state.reducer import merge
from pystatebox.state.registry import Subscription
from pystatebox.state.store import Store, create_store

__all__ = [
    "__version__",
    "InvalidChangeError",
    "MissingChangeKindError",
    "Notification",
    "StateboxConfigError",
    "StateboxError",
    "Store",
    "StoreConfig",
    "Subscription",
    "UnknownRootKeyError",
    "build_change",
    "create_store",
    "merge",
]
