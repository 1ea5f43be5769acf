from __future__ import annotations

from django.conf import settings
from django.urls import path

from . import views


def _codes() -> list[str]:
    codes = [settings.ALARM_PRIMARY_CODE, settings.ALARM_SECONDARY_CODE]
    # Exact strings only; an unset code must not turn into a bare /code/ route.
    return list(dict.fromkeys(code for code in codes if code))


urlpatterns = [
    path("trigger_away", views.TriggerAwayView.as_view(), name="alarm-trigger-away"),
    path("trigger_home", views.TriggerHomeView.as_view(), name="alarm-trigger-home"),
    path(
        "trigger_motion_downstairs",
        views.MotionDownstairsView.as_view(),
        name="alarm-motion-downstairs",
    ),
    path(
        "trigger_motion_upstairs",
        views.MotionUpstairsView.as_view(),
        name="alarm-motion-upstairs",
    ),
    path("get_status", views.AlarmStatusView.as_view(), name="alarm-status"),
]

for index, code in enumerate(_codes()):
    urlpatterns += [
        path(f"code/{code}", views.ArmDisarmToggleView.as_view(), name=f"alarm-code-{index}"),
        path(f"codeQuiet/{code}", views.ArmDisarmQuietToggleView.as_view(), name=f"alarm-code-quiet-{index}"),
    ]
