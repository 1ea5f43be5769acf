from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ActuatorGateway(Protocol):
    def invoke(self, action: str) -> None: ...


@dataclass(frozen=True)
class ScriptActuatorGateway:
    """
    Runs the external script mapped to an action and waits for it to exit.

    Fire-and-forget from the caller's point of view: output is discarded and
    launch failures are logged, never raised.
    """

    scripts: Mapping[str, str] = field(default_factory=dict)
    cwd: str | Path | None = None
    timeout_seconds: float | None = None

    def invoke(self, action: str) -> None:
        script = self.scripts.get(str(action))
        if not script:
            logger.warning("No script configured for actuator action %s", action)
            return
        try:
            result = subprocess.run(
                [script],
                cwd=self.cwd,
                capture_output=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.warning("Error executing script %s for action %s: %s", script, action, exc)
            return
        if result.returncode != 0:
            logger.warning("Script %s for action %s exited with code %s", script, action, result.returncode)
        else:
            logger.debug("Script %s for action %s finished", script, action)


@dataclass(frozen=True)
class NullActuatorGateway:
    def invoke(self, action: str) -> None:
        logger.info("Actuators disabled; skipping action %s", action)
