from __future__ import annotations

from rest_framework.response import Response
from rest_framework.views import APIView

from alarm.services import get_alarm_controller
from alarm.state_machine import AlarmController
from alarm.use_cases import alarm_events

SUCCESS_BODY = "Success"


class AlarmControllerMixin:
    """
    Resolves the controller a view works against.

    Pass one through `as_view(controller=...)` to bypass the process-wide
    instance held by the alarm app config.
    """

    controller: AlarmController | None = None

    def get_controller(self) -> AlarmController:
        if self.controller is not None:
            return self.controller
        return get_alarm_controller()


class AlarmEventView(AlarmControllerMixin, APIView):
    event: str = ""

    def get(self, request, *args, **kwargs):
        alarm_events.dispatch_event(controller=self.get_controller(), event=self.event)
        return Response(SUCCESS_BODY)
