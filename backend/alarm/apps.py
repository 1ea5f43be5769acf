from __future__ import annotations

import sys

from django.apps import AppConfig

# Commands that run beside the daemon and must not own a second controller.
NON_SERVER_COMMANDS = ["alarm_event", "makemigrations", "migrate", "collectstatic", "shell", "check", "pytest", " test"]


class AlarmConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "alarm"

    controller = None

    def ready(self) -> None:
        argv = " ".join(sys.argv).lower()
        if any(token in argv for token in NON_SERVER_COMMANDS):
            return

        from alarm.services import build_controller

        # One controller per process, seeded from the saved state file.
        self.controller = build_controller()
