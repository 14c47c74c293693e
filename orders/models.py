"""
Purpose: Domain models for the Orders capability.
What it does:
- Defines the order status enum (UNASSIGNED | TAKEN)
- Defines the read shapes handed back by the store:
  - ResolvedOrder (id, distance, status) for creation and listing
  - OrderRecord (id, origin, destination, distance, status) for a full read

Rule: No database access, no routing calls. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OrderStatus(Enum):
    UNASSIGNED = "UNASSIGNED"
    TAKEN = "TAKEN"


@dataclass(frozen=True)
class ResolvedOrder:
    """
    An order after its distance has been resolved and it has been persisted.
    """
    id: int
    distance: int
    status: OrderStatus = OrderStatus.UNASSIGNED


@dataclass(frozen=True)
class OrderRecord:
    id: int
    origin: str
    destination: str
    distance: int
    status: OrderStatus
