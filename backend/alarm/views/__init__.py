from __future__ import annotations

from .alarm_state import AlarmStatusView
from .events import (
    ArmDisarmQuietToggleView,
    ArmDisarmToggleView,
    MotionDownstairsView,
    MotionUpstairsView,
    TriggerAwayView,
    TriggerHomeView,
)

__all__ = [
    "AlarmStatusView",
    "ArmDisarmQuietToggleView",
    "ArmDisarmToggleView",
    "MotionDownstairsView",
    "MotionUpstairsView",
    "TriggerAwayView",
    "TriggerHomeView",
]
