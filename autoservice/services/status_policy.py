"""
Appointment status transition policies.

The booking flow has always let an owner move an appointment to any status,
including reopening completed or cancelled ones. That behaviour is kept as
the default (``PermissiveTransitionPolicy``). ``TableTransitionPolicy`` is
available for deployments that want a guarded lifecycle and is selected with
the ``STRICT_STATUS_TRANSITIONS`` setting.
"""
from typing import Dict, FrozenSet, Optional
from autoservice.config import settings
from autoservice.exceptions import InvalidStatusTransition
from autoservice.models import AppointmentStatus


class TransitionPolicy:
    def allows(self, current: AppointmentStatus, new: AppointmentStatus) -> bool:
        raise NotImplementedError

    def check(self, current: AppointmentStatus, new: AppointmentStatus) -> None:
        if not self.allows(current, new):
            raise InvalidStatusTransition(
                f"Cannot change appointment status from {current.value} to {new.value}"
            )


class PermissiveTransitionPolicy(TransitionPolicy):
    """Any status may follow any status"""

    def allows(self, current: AppointmentStatus, new: AppointmentStatus) -> bool:
        return True


DEFAULT_TRANSITIONS: Dict[AppointmentStatus, FrozenSet[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: frozenset({
        AppointmentStatus.IN_PROGRESS,
        AppointmentStatus.COMPLETED,
        AppointmentStatus.CANCELLED,
    }),
    AppointmentStatus.IN_PROGRESS: frozenset({
        AppointmentStatus.COMPLETED,
        AppointmentStatus.CANCELLED,
    }),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
}


class TableTransitionPolicy(TransitionPolicy):
    """Allow only the transitions listed in a table. Same-status updates are no-ops."""

    def __init__(self, table: Optional[Dict[AppointmentStatus, FrozenSet[AppointmentStatus]]] = None):
        self.table = DEFAULT_TRANSITIONS if table is None else table

    def allows(self, current: AppointmentStatus, new: AppointmentStatus) -> bool:
        if current == new:
            return True
        return new in self.table.get(current, frozenset())


def get_transition_policy() -> TransitionPolicy:
    if settings.STRICT_STATUS_TRANSITIONS:
        return TableTransitionPolicy()
    return PermissiveTransitionPolicy()
