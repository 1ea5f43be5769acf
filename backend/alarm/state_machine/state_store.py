from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import Protocol

from alarm.models import AlarmState, parse_state

from .errors import StateStoreError

logger = logging.getLogger(__name__)


class StateStore(Protocol):
    def save(self, state: AlarmState) -> None: ...

    def load(self) -> AlarmState: ...


class FileStateStore:
    """
    Single-record store: the whole file is the canonical state string.

    Every save replaces the whole file (write to a sibling temp file, then
    rename over the record). Anything `load` cannot read or recognize
    comes back as DISARMED so a damaged record never leaves the house armed
    with no way to disarm after a restart.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def save(self, state: AlarmState) -> None:
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            tmp_path.write_text(AlarmState(state).value, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StateStoreError(f"Failed to write alarm state to {self.path}: {exc}") from exc
        logger.info("Current alarm state: %s", AlarmState(state).value)

    def load(self) -> AlarmState:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No saved alarm state at %s; starting disarmed.", self.path)
            return AlarmState.DISARMED
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read saved alarm state at %s (%s); starting disarmed.", self.path, exc)
            return AlarmState.DISARMED

        state = parse_state(raw.strip())
        if state is None:
            logger.warning("Unrecognized saved alarm state %r in %s; starting disarmed.", raw, self.path)
            return AlarmState.DISARMED
        return state
