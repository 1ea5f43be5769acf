from __future__ import annotations

from django.db import models


class AlarmState(models.TextChoices):
    """
    Alarm states and their canonical strings.

    The values are the persisted record format and the `/get_status` body;
    changing one breaks state files written by older versions.
    """

    DISARMED = "disarmed", "Disarmed"
    ARMED_HOME = "armed_home", "Armed home"
    ARMED_AWAY = "armed_away", "Armed away"
    ALARM = "alarm", "Alarm"


class AlarmEvent(models.TextChoices):
    ARM_DISARM_TOGGLE = "arm_disarm_toggle", "Arm/disarm toggle"
    ARM_DISARM_QUIET_TOGGLE = "arm_disarm_quiet_toggle", "Arm/disarm quiet toggle"
    TRIGGER_AWAY = "trigger_away", "Exterior breach"
    TRIGGER_HOME = "trigger_home", "Interior breach"
    MOTION_DOWNSTAIRS = "motion_downstairs", "Motion downstairs"
    MOTION_UPSTAIRS = "motion_upstairs", "Motion upstairs"


class ActuatorAction(models.TextChoices):
    ARM_AWAY = "arm_away", "Arm away"
    ARM_QUIET = "arm_quiet", "Arm home (quiet)"
    DISARM = "disarm", "Disarm"
    DISARM_QUIET = "disarm_quiet", "Disarm (quiet)"
    ALARM = "alarm", "Alarm"
    LIGHT_STAIRCASE = "light_staircase", "Staircase light"
    LIGHT_DESKLAMP = "light_desklamp", "Desk lamp"


def parse_state(raw: str) -> AlarmState | None:
    """Exact match against the canonical strings; anything else is None."""
    if raw in AlarmState.values:
        return AlarmState(raw)
    return None
