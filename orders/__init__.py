"""
Purpose: Package entry + stable exports.

Orders domain package.

Public API:
- Domain models: OrderStatus, ResolvedOrder, OrderRecord
- Coordinate validation: LatLng, is_valid, canonicalize
- Error taxonomy: see orders.errors
"""
from .models import OrderStatus, ResolvedOrder, OrderRecord
from .coordinates import LatLng, is_valid, canonicalize, is_canonical
from .errors import (
    OrderError,
    ValidationError,
    OrderNotFound,
    TransitionConflict,
    AlreadyTaken,
    AlreadyUnassigned,
    PersistenceError,
    TransitionTimeout,
)

__all__ = [
    "OrderStatus",
    "ResolvedOrder",
    "OrderRecord",
    "LatLng",
    "is_valid",
    "canonicalize",
    "is_canonical",
    "OrderError",
    "ValidationError",
    "OrderNotFound",
    "TransitionConflict",
    "AlreadyTaken",
    "AlreadyUnassigned",
    "PersistenceError",
    "TransitionTimeout",
]
