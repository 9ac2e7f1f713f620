"""
Tests for appointment status transitions.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from barbershop.application.exceptions import AppointmentValidationError, IllegalStateTransitionError
from barbershop.application.utils.lifecycle import AppointmentLifecycle
from barbershop.domain.entities.appointment import Appointment, AppointmentStatus

PENDING = AppointmentStatus.PENDING
CONFIRMED = AppointmentStatus.CONFIRMED
COMPLETED = AppointmentStatus.COMPLETED
CANCELLED = AppointmentStatus.CANCELLED


def _appointment(status: AppointmentStatus) -> Appointment:
    return Appointment(
        id="a1",
        employee_id="emp-1",
        client_id="client-1",
        service_name="Haircut",
        start=datetime(2026, 10, 26, 10, 0),
        duration_minutes=30,
        status=status,
        cancellation_reason="Client sick" if status == CANCELLED else None,
    )


@pytest.mark.parametrize(
    "current,target",
    [
        (PENDING, CONFIRMED),
        (CONFIRMED, PENDING),
        (PENDING, PENDING),
        (PENDING, COMPLETED),
        (CONFIRMED, COMPLETED),
        (CANCELLED, PENDING),
    ],
)
def test_allowed_transitions(current, target):
    updated = AppointmentLifecycle().apply_transition(_appointment(current), target)
    assert updated.status == target
    assert updated.cancellation_reason is None


@pytest.mark.parametrize("target", [PENDING, CONFIRMED, COMPLETED, CANCELLED])
def test_completed_is_terminal(target):
    with pytest.raises(IllegalStateTransitionError) as exc:
        AppointmentLifecycle().apply_transition(_appointment(COMPLETED), target, "reason")
    assert exc.value.reason == "Cannot modify a completed appointment"


@pytest.mark.parametrize("target", [CONFIRMED, COMPLETED, CANCELLED])
def test_cancelled_only_reactivates_to_pending(target):
    with pytest.raises(IllegalStateTransitionError) as exc:
        AppointmentLifecycle().apply_transition(_appointment(CANCELLED), target, "reason")
    assert exc.value.reason == "A cancelled appointment may only be reactivated to PENDING"


@pytest.mark.parametrize("reason", [None, "", "   "])
def test_cancelling_requires_a_reason(reason):
    with pytest.raises(AppointmentValidationError):
        AppointmentLifecycle().apply_transition(_appointment(PENDING), CANCELLED, reason)


def test_cancelling_keeps_trimmed_reason():
    updated = AppointmentLifecycle().apply_transition(_appointment(CONFIRMED), CANCELLED, "  Client sick ")
    assert updated.status == CANCELLED
    assert updated.cancellation_reason == "Client sick"


def test_reason_is_dropped_when_not_cancelling():
    updated = AppointmentLifecycle().apply_transition(_appointment(PENDING), CONFIRMED, "ignored")
    assert updated.cancellation_reason is None


def test_only_reactivation_needs_an_availability_check():
    lifecycle = AppointmentLifecycle()
    assert lifecycle.requires_availability_check(_appointment(CANCELLED), PENDING) is True
    assert lifecycle.requires_availability_check(_appointment(PENDING), CONFIRMED) is False
    assert lifecycle.requires_availability_check(_appointment(CONFIRMED), PENDING) is False


def test_reschedule_guards():
    lifecycle = AppointmentLifecycle()
    lifecycle.ensure_can_reschedule(_appointment(PENDING))
    lifecycle.ensure_can_reschedule(_appointment(CONFIRMED))
    with pytest.raises(IllegalStateTransitionError):
        lifecycle.ensure_can_reschedule(_appointment(COMPLETED))
    with pytest.raises(IllegalStateTransitionError):
        lifecycle.ensure_can_reschedule(_appointment(CANCELLED))


def test_delete_guard():
    lifecycle = AppointmentLifecycle()
    lifecycle.ensure_can_delete(_appointment(CANCELLED))
    with pytest.raises(IllegalStateTransitionError) as exc:
        lifecycle.ensure_can_delete(_appointment(COMPLETED))
    assert exc.value.reason == "Cannot delete a completed appointment"
