#Expose the order status state machine:
#Target parsing (client spelling -> canonical status)
#Conflict detection on the status observed under the row lock

from .state_machines.order_state import parse_target_status, check_transition, conflict_for

__all__ = [
    "parse_target_status",
    "check_transition",
    "conflict_for",
]
