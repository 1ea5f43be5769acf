from __future__ import annotations

from dataclasses import dataclass

from alarm.models import AlarmEvent
from alarm.state_machine import AlarmController
from config.domain_exceptions import ValidationError


class UnknownEvent(ValidationError):
    pass


@dataclass(frozen=True)
class EventResult:
    event: str
    state: str

    def as_dict(self) -> dict[str, str]:
        return {"event": self.event, "alarm_state": self.state}


def _handlers(controller: AlarmController):
    return {
        AlarmEvent.ARM_DISARM_TOGGLE: controller.arm_disarm_toggle,
        AlarmEvent.ARM_DISARM_QUIET_TOGGLE: controller.arm_disarm_quiet_toggle,
        AlarmEvent.TRIGGER_AWAY: controller.trigger_away,
        AlarmEvent.TRIGGER_HOME: controller.trigger_home,
        AlarmEvent.MOTION_DOWNSTAIRS: controller.motion_downstairs,
        AlarmEvent.MOTION_UPSTAIRS: controller.motion_upstairs,
    }


def dispatch_event(*, controller: AlarmController, event: str) -> EventResult:
    if event not in AlarmEvent.values:
        raise UnknownEvent(f"Unknown alarm event: {event}")
    handler = _handlers(controller)[AlarmEvent(event)]
    state = handler()
    return EventResult(event=str(event), state=state.value)
