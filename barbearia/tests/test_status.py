"""
Tests for barbearia.status module.
"""

from __future__ import annotations

from django.test import TestCase

from barbearia.exceptions import InvalidTransition
from barbearia.status import AppointmentStatus, is_noop_transition, validate_transition


class ValidateTransitionTests(TestCase):
    """Tests for validate_transition."""

    def test_cannot_confirm_canceled_appointment(self) -> None:
        """Should refuse confirming a canceled appointment."""
        with self.assertRaises(InvalidTransition) as ctx:
            validate_transition(AppointmentStatus.CANCELED, AppointmentStatus.CONFIRMED)

        self.assertEqual(ctx.exception.code, "invalid_transition")
        self.assertEqual(ctx.exception.context["current_status"], "canceled")
        self.assertEqual(ctx.exception.context["requested_status"], "confirmed")

    def test_cannot_cancel_completed_appointment(self) -> None:
        """Should refuse canceling a completed appointment."""
        with self.assertRaises(InvalidTransition):
            validate_transition(AppointmentStatus.COMPLETED, AppointmentStatus.CANCELED)

    def test_accepts_plain_string_statuses(self) -> None:
        """Should accept plain strings as statuses."""
        with self.assertRaises(InvalidTransition):
            validate_transition("canceled", "confirmed")

    def test_other_transitions_are_allowed(self) -> None:
        """Should allow every other transition."""
        allowed = [
            (AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED),
            (AppointmentStatus.PENDING, AppointmentStatus.CANCELED),
            (AppointmentStatus.CONFIRMED, AppointmentStatus.COMPLETED),
            (AppointmentStatus.CANCELED, AppointmentStatus.COMPLETED),
            (AppointmentStatus.CONFIRMED, AppointmentStatus.NO_SHOW),
        ]
        for current, new in allowed:
            with self.subTest(current=current, new=new):
                validate_transition(current, new)

    def test_same_status_is_noop(self) -> None:
        """Should treat the same status as a no-op."""
        self.assertTrue(is_noop_transition(AppointmentStatus.CONFIRMED, "confirmed"))
        self.assertFalse(is_noop_transition(AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED))
