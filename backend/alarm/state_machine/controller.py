from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager

from alarm.gateways.actuator import ActuatorGateway
from alarm.models import ActuatorAction, AlarmState

from . import transitions
from .errors import StateStoreError, StateUnavailableError
from .state_store import StateStore

logger = logging.getLogger(__name__)


class AlarmController:
    """
    Owns the current alarm state for the lifetime of the process.

    All reads and writes of the state go through one lock. A mutating event
    decides its transition, applies it and persists it before the lock is
    released. The accompanying actuator action is queued, still under the
    lock, on a single worker thread: scripts run in the order of the
    transitions that caused them, and a slow script never holds the lock.

    Persistence is best-effort: a failed write is logged and the in-memory
    state stays authoritative. If anything else escapes a critical section the
    controller is marked degraded and every later call raises
    `StateUnavailableError`.
    """

    def __init__(
        self,
        *,
        store: StateStore,
        actuator: ActuatorGateway,
        is_dark: Callable[[], bool],
        initial_state: AlarmState = AlarmState.DISARMED,
    ) -> None:
        self._store = store
        self._actuator = actuator
        self._is_dark = is_dark
        self._state = AlarmState(initial_state)
        self._lock = threading.Lock()
        self._degraded = False
        self._actions = ThreadPoolExecutor(max_workers=1, thread_name_prefix="alarm-actuator")

    @classmethod
    def from_store(
        cls,
        *,
        store: StateStore,
        actuator: ActuatorGateway,
        is_dark: Callable[[], bool],
    ) -> AlarmController:
        initial_state = store.load()
        logger.info("Alarm controller starting in state %s", initial_state.value)
        return cls(store=store, actuator=actuator, is_dark=is_dark, initial_state=initial_state)

    @property
    def state(self) -> AlarmState:
        with self._locked():
            return self._state

    @property
    def is_degraded(self) -> bool:
        return self._degraded

    def status(self) -> str:
        return self.state.value

    def wait_for_actions(self, timeout: float | None = None) -> None:
        """Block until every actuator action queued so far has finished."""
        self._actions.submit(lambda: None).result(timeout=timeout)

    def shutdown(self) -> None:
        self._actions.shutdown(wait=True)

    def arm_disarm_toggle(self) -> AlarmState:
        return self._apply(transitions.arm_disarm_toggle)

    def arm_disarm_quiet_toggle(self) -> AlarmState:
        return self._apply(transitions.arm_disarm_quiet_toggle)

    def trigger_away(self) -> AlarmState:
        return self._apply(transitions.trigger_away)

    def trigger_home(self) -> AlarmState:
        return self._apply(transitions.trigger_home)

    def motion_downstairs(self) -> AlarmState:
        return self._motion(transitions.motion_downstairs)

    def motion_upstairs(self) -> AlarmState:
        return self._motion(transitions.motion_upstairs)

    @contextmanager
    def _locked(self) -> Iterator[None]:
        with self._lock:
            if self._degraded:
                raise StateUnavailableError("Alarm state is unavailable after a failed transition.")
            try:
                yield
            except Exception:
                self._degraded = True
                logger.exception("Unexpected error while holding the alarm state lock; controller degraded.")
                raise

    def _apply(self, rule: Callable[[AlarmState], transitions.Transition | None]) -> AlarmState:
        with self._locked():
            result = rule(self._state)
            if result is None:
                return self._state
            state_from = self._state
            self._state = result.state_to
            self._persist(result.state_to)
            if result.action:
                self._queue(result.action)
            state = self._state
        logger.info("Alarm state %s -> %s", state_from.value, state.value)
        return state

    def _motion(self, rule: Callable[..., ActuatorAction | None]) -> AlarmState:
        # Evaluated before taking the lock so a slow solar lookup cannot stall other events.
        is_dark = bool(self._is_dark())
        with self._locked():
            state = self._state
            action = rule(state, is_dark=is_dark)
            if action:
                self._queue(action)
        return state

    def _persist(self, state: AlarmState) -> None:
        try:
            self._store.save(state)
        except StateStoreError:
            logger.exception("Failed to persist alarm state %s; keeping it in memory only.", state.value)

    def _queue(self, action: ActuatorAction) -> None:
        self._actions.submit(self._invoke, action)

    def _invoke(self, action: ActuatorAction) -> None:
        try:
            self._actuator.invoke(action)
        except Exception:
            logger.exception("Actuator action %s raised; ignoring.", action)
