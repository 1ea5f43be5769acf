from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from alarm.models import AlarmEvent

logger = logging.getLogger(__name__)

STATUS_PATH = "get_status"

EVENT_PATHS = {
    AlarmEvent.ARM_DISARM_TOGGLE: "code/{code}",
    AlarmEvent.ARM_DISARM_QUIET_TOGGLE: "codeQuiet/{code}",
    AlarmEvent.TRIGGER_AWAY: "trigger_away",
    AlarmEvent.TRIGGER_HOME: "trigger_home",
    AlarmEvent.MOTION_DOWNSTAIRS: "trigger_motion_downstairs",
    AlarmEvent.MOTION_UPSTAIRS: "trigger_motion_upstairs",
}


class DaemonGatewayError(RuntimeError):
    pass


class DaemonNotReachable(DaemonGatewayError):
    def __init__(self, error: str | None = None):
        self.error = error
        super().__init__(error or "Alarm daemon is not reachable.")


class DaemonRequestFailed(DaemonGatewayError):
    def __init__(self, status: int, body: str = ""):
        self.status = status
        self.body = body
        super().__init__(f"Alarm daemon answered HTTP {status}: {body or 'no body'}")


@dataclass(frozen=True)
class DaemonClient:
    """
    Sends events to the running daemon over its own HTTP routes.

    The daemon process owns the only controller; other processes must go
    through it instead of touching the state file.
    """

    base_url: str
    code: str
    timeout_seconds: float = 5.0

    def send_event(self, event: str) -> str:
        path = EVENT_PATHS[AlarmEvent(event)].format(code=quote(self.code, safe=""))
        return self._get(path)

    def get_status(self) -> str:
        return self._get(STATUS_PATH)

    def _get(self, path: str) -> str:
        url = f"{self.base_url.rstrip('/')}/{path}"
        request = Request(url, method="GET")
        logger.debug("Alarm daemon: GET %s (timeout=%ss)", url, self.timeout_seconds)
        try:
            with urlopen(request, timeout=self.timeout_seconds) as response:
                return response.read().decode("utf-8", errors="replace").strip()
        except HTTPError as exc:
            try:
                body = exc.read(256).decode("utf-8", errors="replace").strip()
            except OSError:
                body = ""
            raise DaemonRequestFailed(exc.code, body) from exc
        except URLError as exc:
            raise DaemonNotReachable(str(exc.reason)) from exc
