import pytest

from dispatch import check_transition, parse_target_status
from orders.errors import AlreadyTaken, AlreadyUnassigned, ValidationError
from orders.models import OrderStatus


@pytest.mark.parametrize("raw, expected", [
    ("taken", OrderStatus.TAKEN),
    ("TAKEN", OrderStatus.TAKEN),
    ("Taken", OrderStatus.TAKEN),
    ("unassigned", OrderStatus.UNASSIGNED),
    ("UNASSIGN", OrderStatus.UNASSIGNED),
    (OrderStatus.TAKEN, OrderStatus.TAKEN),
])
def test_parse_target_status(raw, expected):
    assert parse_target_status(raw) is expected


@pytest.mark.parametrize("raw", ["bogus", "", "SUCCESS", None, 1])
def test_parse_target_status_rejects_unknown(raw):
    with pytest.raises(ValidationError) as excinfo:
        parse_target_status(raw)
    assert str(excinfo.value).startswith("Unknown status")


def test_both_directions_are_allowed():
    check_transition(1, OrderStatus.UNASSIGNED, OrderStatus.TAKEN)
    check_transition(1, OrderStatus.TAKEN, OrderStatus.UNASSIGNED)


def test_same_status_is_a_conflict():
    with pytest.raises(AlreadyTaken) as excinfo:
        check_transition(7, OrderStatus.TAKEN, OrderStatus.TAKEN)
    assert excinfo.value.order_id == 7
    assert str(excinfo.value) == "ORDER_ALREADY_BEEN_TAKEN"

    with pytest.raises(AlreadyUnassigned):
        check_transition(7, OrderStatus.UNASSIGNED, OrderStatus.UNASSIGNED)
