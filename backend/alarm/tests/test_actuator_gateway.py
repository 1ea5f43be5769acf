from __future__ import annotations

import subprocess
from unittest.mock import patch

from django.test import SimpleTestCase

from alarm.gateways.actuator import NullActuatorGateway, ScriptActuatorGateway
from alarm.models import ActuatorAction


class ScriptActuatorGatewayTests(SimpleTestCase):
    def setUp(self):
        self.gateway = ScriptActuatorGateway(
            scripts={ActuatorAction.ALARM.value: "./alarm.sh"},
            cwd="/opt/alarm",
            timeout_seconds=30,
        )

    @patch("alarm.gateways.actuator.subprocess.run")
    def test_invoke_runs_mapped_script(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(args=["./alarm.sh"], returncode=0)
        self.gateway.invoke(ActuatorAction.ALARM)
        mock_run.assert_called_once_with(
            ["./alarm.sh"],
            cwd="/opt/alarm",
            capture_output=True,
            timeout=30,
            check=False,
        )

    @patch("alarm.gateways.actuator.subprocess.run")
    def test_launch_failure_is_logged_not_raised(self, mock_run):
        mock_run.side_effect = FileNotFoundError("no such file")
        with self.assertLogs("alarm.gateways.actuator", level="WARNING") as logs:
            self.gateway.invoke(ActuatorAction.ALARM)
        self.assertIn("./alarm.sh", logs.output[0])

    @patch("alarm.gateways.actuator.subprocess.run")
    def test_timeout_is_logged_not_raised(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd=["./alarm.sh"], timeout=30)
        with self.assertLogs("alarm.gateways.actuator", level="WARNING"):
            self.gateway.invoke(ActuatorAction.ALARM)

    @patch("alarm.gateways.actuator.subprocess.run")
    def test_non_zero_exit_is_logged(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(args=["./alarm.sh"], returncode=2)
        with self.assertLogs("alarm.gateways.actuator", level="WARNING") as logs:
            self.gateway.invoke(ActuatorAction.ALARM)
        self.assertIn("exited with code 2", logs.output[0])

    @patch("alarm.gateways.actuator.subprocess.run")
    def test_unmapped_action_is_skipped(self, mock_run):
        with self.assertLogs("alarm.gateways.actuator", level="WARNING"):
            self.gateway.invoke(ActuatorAction.LIGHT_DESKLAMP)
        mock_run.assert_not_called()


class NullActuatorGatewayTests(SimpleTestCase):
    @patch("alarm.gateways.actuator.subprocess.run")
    def test_invoke_does_not_run_anything(self, mock_run):
        NullActuatorGateway().invoke(ActuatorAction.ALARM)
        mock_run.assert_not_called()
