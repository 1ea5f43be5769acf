from __future__ import annotations

from dataclasses import dataclass

from alarm.models import ActuatorAction, AlarmState

from .constants import ARMED_STATES


@dataclass(frozen=True)
class Transition:
    state_to: AlarmState
    action: ActuatorAction | None = None


def arm_disarm_toggle(state: AlarmState) -> Transition:
    if state == AlarmState.DISARMED:
        return Transition(state_to=AlarmState.ARMED_AWAY, action=ActuatorAction.ARM_AWAY)
    # Armed in any mode, or sounding: the code always silences and disarms.
    return Transition(state_to=AlarmState.DISARMED, action=ActuatorAction.DISARM)


def arm_disarm_quiet_toggle(state: AlarmState) -> Transition:
    if state == AlarmState.DISARMED:
        return Transition(state_to=AlarmState.ARMED_HOME, action=ActuatorAction.ARM_QUIET)
    return Transition(state_to=AlarmState.DISARMED, action=ActuatorAction.DISARM_QUIET)


def trigger_away(state: AlarmState) -> Transition | None:
    if state in ARMED_STATES:
        return Transition(state_to=AlarmState.ALARM, action=ActuatorAction.ALARM)
    return None


def trigger_home(state: AlarmState) -> Transition | None:
    if state == AlarmState.ARMED_HOME:
        return Transition(state_to=AlarmState.ALARM, action=ActuatorAction.ALARM)
    return None


def motion_downstairs(state: AlarmState, *, is_dark: bool) -> ActuatorAction | None:
    if is_dark and state == AlarmState.DISARMED:
        return ActuatorAction.LIGHT_STAIRCASE
    return None


def motion_upstairs(state: AlarmState, *, is_dark: bool) -> ActuatorAction | None:
    if not is_dark:
        return None
    if state == AlarmState.DISARMED:
        return ActuatorAction.LIGHT_STAIRCASE
    if state in ARMED_STATES:
        return ActuatorAction.LIGHT_DESKLAMP
    return None

