from __future__ import annotations

from django.test import SimpleTestCase

from alarm.models import ActuatorAction, AlarmState
from alarm.state_machine import transitions
from alarm.state_machine.transitions import Transition


class ToggleTransitionTests(SimpleTestCase):
    def test_arm_disarm_toggle_arms_away_from_disarmed(self):
        self.assertEqual(
            transitions.arm_disarm_toggle(AlarmState.DISARMED),
            Transition(state_to=AlarmState.ARMED_AWAY, action=ActuatorAction.ARM_AWAY),
        )

    def test_arm_disarm_toggle_disarms_from_every_other_state(self):
        for state in (AlarmState.ARMED_HOME, AlarmState.ARMED_AWAY, AlarmState.ALARM):
            with self.subTest(state=state):
                self.assertEqual(
                    transitions.arm_disarm_toggle(state),
                    Transition(state_to=AlarmState.DISARMED, action=ActuatorAction.DISARM),
                )

    def test_quiet_toggle_arms_home_from_disarmed(self):
        self.assertEqual(
            transitions.arm_disarm_quiet_toggle(AlarmState.DISARMED),
            Transition(state_to=AlarmState.ARMED_HOME, action=ActuatorAction.ARM_QUIET),
        )

    def test_quiet_toggle_disarms_quietly_from_every_other_state(self):
        for state in (AlarmState.ARMED_HOME, AlarmState.ARMED_AWAY, AlarmState.ALARM):
            with self.subTest(state=state):
                self.assertEqual(
                    transitions.arm_disarm_quiet_toggle(state),
                    Transition(state_to=AlarmState.DISARMED, action=ActuatorAction.DISARM_QUIET),
                )


class TriggerTransitionTests(SimpleTestCase):
    def test_trigger_away_fires_from_either_armed_mode(self):
        for state in (AlarmState.ARMED_HOME, AlarmState.ARMED_AWAY):
            with self.subTest(state=state):
                self.assertEqual(
                    transitions.trigger_away(state),
                    Transition(state_to=AlarmState.ALARM, action=ActuatorAction.ALARM),
                )

    def test_trigger_away_ignored_when_disarmed_or_sounding(self):
        self.assertIsNone(transitions.trigger_away(AlarmState.DISARMED))
        self.assertIsNone(transitions.trigger_away(AlarmState.ALARM))

    def test_trigger_home_only_fires_when_armed_home(self):
        self.assertEqual(
            transitions.trigger_home(AlarmState.ARMED_HOME),
            Transition(state_to=AlarmState.ALARM, action=ActuatorAction.ALARM),
        )
        for state in (AlarmState.DISARMED, AlarmState.ARMED_AWAY, AlarmState.ALARM):
            with self.subTest(state=state):
                self.assertIsNone(transitions.trigger_home(state))


class MotionRuleTests(SimpleTestCase):
    def test_motion_downstairs_lights_staircase_when_dark_and_disarmed(self):
        self.assertEqual(
            transitions.motion_downstairs(AlarmState.DISARMED, is_dark=True),
            ActuatorAction.LIGHT_STAIRCASE,
        )

    def test_motion_downstairs_does_nothing_otherwise(self):
        self.assertIsNone(transitions.motion_downstairs(AlarmState.DISARMED, is_dark=False))
        for state in (AlarmState.ARMED_HOME, AlarmState.ARMED_AWAY, AlarmState.ALARM):
            with self.subTest(state=state):
                self.assertIsNone(transitions.motion_downstairs(state, is_dark=True))

    def test_motion_upstairs_lights_by_state_when_dark(self):
        self.assertEqual(
            transitions.motion_upstairs(AlarmState.DISARMED, is_dark=True),
            ActuatorAction.LIGHT_STAIRCASE,
        )
        self.assertEqual(
            transitions.motion_upstairs(AlarmState.ARMED_HOME, is_dark=True),
            ActuatorAction.LIGHT_DESKLAMP,
        )
        self.assertEqual(
            transitions.motion_upstairs(AlarmState.ARMED_AWAY, is_dark=True),
            ActuatorAction.LIGHT_DESKLAMP,
        )
        self.assertIsNone(transitions.motion_upstairs(AlarmState.ALARM, is_dark=True))

    def test_motion_upstairs_does_nothing_in_daylight(self):
        for state in AlarmState:
            with self.subTest(state=state):
                self.assertIsNone(transitions.motion_upstairs(state, is_dark=False))
