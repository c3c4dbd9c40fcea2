import pytest

from autoservice.exceptions import InvalidStatusTransition
from autoservice.models import AppointmentStatus
from autoservice.services.status_policy import (
    PermissiveTransitionPolicy, TableTransitionPolicy, get_transition_policy,
)


def test_default_policy_is_permissive():
    assert isinstance(get_transition_policy(), PermissiveTransitionPolicy)


@pytest.mark.parametrize("current", list(AppointmentStatus))
@pytest.mark.parametrize("new", list(AppointmentStatus))
def test_permissive_allows_everything(current, new):
    PermissiveTransitionPolicy().check(current, new)


def test_table_policy_blocks_reopening_completed():
    policy = TableTransitionPolicy()

    with pytest.raises(InvalidStatusTransition):
        policy.check(AppointmentStatus.COMPLETED, AppointmentStatus.SCHEDULED)


def test_table_policy_allows_forward_moves_and_noops():
    policy = TableTransitionPolicy()

    assert policy.allows(AppointmentStatus.SCHEDULED, AppointmentStatus.IN_PROGRESS)
    assert policy.allows(AppointmentStatus.IN_PROGRESS, AppointmentStatus.COMPLETED)
    assert policy.allows(AppointmentStatus.CANCELLED, AppointmentStatus.CANCELLED)
    assert not policy.allows(AppointmentStatus.IN_PROGRESS, AppointmentStatus.SCHEDULED)


def test_table_policy_accepts_custom_table():
    policy = TableTransitionPolicy({AppointmentStatus.SCHEDULED: frozenset({AppointmentStatus.CANCELLED})})

    assert policy.allows(AppointmentStatus.SCHEDULED, AppointmentStatus.CANCELLED)
    assert not policy.allows(AppointmentStatus.SCHEDULED, AppointmentStatus.COMPLETED)
