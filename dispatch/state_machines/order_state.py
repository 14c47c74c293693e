from orders.errors import AlreadyTaken, AlreadyUnassigned, TransitionConflict, ValidationError
from orders.models import OrderStatus

# Spellings accepted from clients for a transition target.
# "unassign" is the legacy name of UNASSIGNED.
_TARGET_ALIASES = {
    "taken": OrderStatus.TAKEN,
    "unassigned": OrderStatus.UNASSIGNED,
    "unassign": OrderStatus.UNASSIGNED,
}

_CONFLICTS = {
    OrderStatus.TAKEN: AlreadyTaken,
    OrderStatus.UNASSIGNED: AlreadyUnassigned,
}


def parse_target_status(raw) -> OrderStatus:
    """
    Maps a client supplied status string onto the canonical enum.
    Matching is case-insensitive; anything unknown is a ValidationError.
    """
    if isinstance(raw, OrderStatus):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in _TARGET_ALIASES:
        return _TARGET_ALIASES[raw.strip().lower()]
    raise ValidationError(f"Unknown status: {raw}")


def conflict_for(target: OrderStatus) -> type:
    return _CONFLICTS[target]


def check_transition(order_id: int, current: OrderStatus, target: OrderStatus) -> None:
    """
    Called with the status observed under the row lock.
    Both UNASSIGNED -> TAKEN and TAKEN -> UNASSIGNED are allowed;
    asking for the status the order already has is a conflict.
    """
    if current == target:
        raise conflict_for(target)(order_id)


__all__ = ["parse_target_status", "conflict_for", "check_transition", "TransitionConflict"]
