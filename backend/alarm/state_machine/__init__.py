from __future__ import annotations

from .controller import AlarmController
from .errors import StateStoreError, StateUnavailableError
from .state_store import FileStateStore, StateStore
from .transitions import Transition

__all__ = [
    "AlarmController",
    "FileStateStore",
    "StateStore",
    "StateStoreError",
    "StateUnavailableError",
    "Transition",
]
