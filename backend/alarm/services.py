from __future__ import annotations

"""
Builds the process-wide alarm controller from Django settings.

`AlarmConfig.ready()` calls `build_controller()` once at startup and keeps the
result on the app config; views and management commands resolve it through
`get_alarm_controller()`.
"""

import functools

from django.apps import apps
from django.conf import settings

from .gateways.actuator import ActuatorGateway, NullActuatorGateway, ScriptActuatorGateway
from .solar import is_dark_now
from .state_machine import AlarmController, FileStateStore, StateUnavailableError


def build_actuator_gateway() -> ActuatorGateway:
    if not settings.ALARM_ACTUATORS_ENABLED:
        return NullActuatorGateway()
    return ScriptActuatorGateway(
        scripts=dict(settings.ALARM_SCRIPTS),
        cwd=settings.ALARM_SCRIPTS_DIR,
        timeout_seconds=settings.ALARM_SCRIPT_TIMEOUT_SECONDS,
    )


def build_controller() -> AlarmController:
    return AlarmController.from_store(
        store=FileStateStore(settings.ALARM_STATE_FILE),
        actuator=build_actuator_gateway(),
        is_dark=functools.partial(
            is_dark_now,
            latitude=settings.ALARM_HOME_LATITUDE,
            longitude=settings.ALARM_HOME_LONGITUDE,
        ),
    )


def get_alarm_controller() -> AlarmController:
    config = apps.get_app_config("alarm")
    if config.controller is None:
        raise StateUnavailableError("Alarm controller has not been initialized.")
    return config.controller
