from __future__ import annotations

from alarm.models import AlarmEvent

from .base import AlarmEventView


class ArmDisarmToggleView(AlarmEventView):
    event = AlarmEvent.ARM_DISARM_TOGGLE


class ArmDisarmQuietToggleView(AlarmEventView):
    event = AlarmEvent.ARM_DISARM_QUIET_TOGGLE


class TriggerAwayView(AlarmEventView):
    event = AlarmEvent.TRIGGER_AWAY


class TriggerHomeView(AlarmEventView):
    event = AlarmEvent.TRIGGER_HOME


class MotionDownstairsView(AlarmEventView):
    event = AlarmEvent.MOTION_DOWNSTAIRS


class MotionUpstairsView(AlarmEventView):
    event = AlarmEvent.MOTION_UPSTAIRS
