"""
Purpose: Shared error taxonomy for the Orders capability.
What it does:
- ValidationError: bad caller input (coordinates, paging, status target)
- OrderNotFound: the referenced order does not exist
- TransitionConflict (AlreadyTaken / AlreadyUnassigned): the requested
  status change collides with the current status
- PersistenceError (+ TransitionTimeout): storage-layer faults

Rule: no logging, no HTTP codes here. Callers decide how to surface them.
"""


class OrderError(Exception):
    """Base class for every failure raised by the orders core."""
    pass


class ValidationError(OrderError):
    """Raised when caller input is malformed. Client-side problem."""
    pass


class OrderNotFound(OrderError):
    """Raised when no order exists with the given id."""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"No order present with id {order_id}")


class TransitionConflict(OrderError):
    """Raised when the order is already in the requested status."""
    code = "ORDER_STATUS_CONFLICT"

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(self.code)


class AlreadyTaken(TransitionConflict):
    code = "ORDER_ALREADY_BEEN_TAKEN"


class AlreadyUnassigned(TransitionConflict):
    code = "ORDER_ALREADY_UNASSIGNED"


class PersistenceError(OrderError):
    """Raised on any storage-layer fault. Server-side problem."""
    pass


class TransitionTimeout(PersistenceError):
    """
    Raised when a status transition does not commit before its deadline.
    The transaction has been rolled back; the client may retry.
    """

    def __init__(self, order_id: int, timeout: float):
        self.order_id = order_id
        self.timeout = timeout
        super().__init__(
            f"status update for order {order_id} did not complete within {int(timeout * 1000)}ms"
        )
