"""
Purpose: Persistent order table behind the HTTP endpoints.
What it does:
- create(): single atomic insert of a resolved order (status UNASSIGNED)
- take() / release(): status transitions under a per-row lock, bounded by a deadline
- list(): LIMIT/OFFSET paging over the table in id order

Concurrency:
Only one thing is contended, an order's status. A transition locks that one
row (SELECT ... FOR UPDATE), checks the status it sees, and writes the new
status conditioned on it. Whoever locks the row first wins; everyone after
sees the new status and gets a conflict. Listing and creation never lock.

Rule: every failure is raised to the caller as an orders.errors kind.
Nothing here logs-and-continues.
"""
from __future__ import annotations

import logging
import math
import sqlite3
import time
from typing import Callable, List, Optional

from django.db import DatabaseError, connections, transaction

from dispatch import check_transition, conflict_for, parse_target_status
from orders.coordinates import is_canonical
from orders.errors import (
    OrderNotFound,
    PersistenceError,
    TransitionTimeout,
    ValidationError,
)
from orders.models import OrderRecord, OrderStatus, ResolvedOrder

from .models import Order

logger = logging.getLogger(__name__)

DEFAULT_ORDER_PAGE = 1
DEFAULT_ORDER_LIMIT = 20
MAX_ORDER_LIMIT = 100

DEFAULT_TRANSITION_TIMEOUT = 2.0  # seconds

# Postgres SQLSTATEs raised when statement_timeout / lock_timeout fire
_TIMEOUT_SQLSTATES = {"57014", "55P03"}

# SQLite gave up waiting for the write lock ("database is locked")
_SQLITE_BUSY = getattr(sqlite3, "SQLITE_BUSY", 5)


class OrderStore:
    """
    Order table access with transactional status transitions.

    One instance is built at startup and shared by all request threads;
    Django gives each thread its own database connection.
    """
    def __init__(self, using: str = "default",
                 transition_timeout: float = DEFAULT_TRANSITION_TIMEOUT,
                 clock: Callable[[], float] = time.monotonic):
        if transition_timeout <= 0:
            raise ValueError("transition_timeout must be positive")
        self.using = using
        self.transition_timeout = transition_timeout
        self._clock = clock

    def _orders(self):
        return Order.objects.using(self.using)

    #----------------
    # creation / reads
    #----------------
    def create(self, origin: str, destination: str, distance: int) -> int:
        if not (is_canonical(origin) and is_canonical(destination)):
            raise ValidationError("origin and destination must be canonical lat,lng strings")
        if isinstance(distance, bool) or not isinstance(distance, int) or distance < 0:
            raise ValidationError(f"distance must be a non-negative integer, got {distance!r}")

        try:
            order = self._orders().create(
                origin=origin,
                destination=destination,
                distance=distance,
                status=OrderStatus.UNASSIGNED.value,
            )
        except DatabaseError as exc:
            raise PersistenceError(f"failed to insert order: {exc}") from exc

        logger.info("new order created: %d", order.id)
        return order.id

    def get(self, order_id: int) -> OrderRecord:
        try:
            row = (
                self._orders()
                .filter(pk=order_id)
                .values_list("id", "origin", "destination", "distance", "status")
                .first()
            )
        except DatabaseError as exc:
            raise PersistenceError(f"failed to read order {order_id}: {exc}") from exc

        if row is None:
            raise OrderNotFound(order_id)
        id_, origin, destination, distance, status = row
        return OrderRecord(
            id=id_,
            origin=origin,
            destination=destination,
            distance=distance,
            status=OrderStatus(status),
        )

    def count(self) -> int:
        try:
            return self._orders().count()
        except DatabaseError as exc:
            raise PersistenceError(f"failed to count orders: {exc}") from exc

    #----------------
    # status transitions
    #----------------
    def take(self, order_id: int) -> None:
        self.transition(order_id, OrderStatus.TAKEN)

    def release(self, order_id: int) -> None:
        self.transition(order_id, OrderStatus.UNASSIGNED)

    def transition(self, order_id: int, target) -> None:
        """
        Moves an order to `target` (UNASSIGNED <-> TAKEN).

        Raises OrderNotFound, AlreadyTaken / AlreadyUnassigned on a no-op
        collision, TransitionTimeout when the deadline passes before commit,
        and PersistenceError for anything else the database throws.
        Any raise inside the atomic block rolls the whole unit of work back.
        """
        target = parse_target_status(target)
        deadline = self._clock() + self.transition_timeout

        try:
            with transaction.atomic(using=self.using):
                self._bound_statements(deadline)

                current = (
                    self._orders()
                    .select_for_update()
                    .filter(pk=order_id)
                    .values_list("status", flat=True)
                    .first()
                )
                self._check_deadline(order_id, deadline)

                if current is None:
                    raise OrderNotFound(order_id)

                current = OrderStatus(current)
                check_transition(order_id, current, target)

                # compare-and-set on the status we observed under the lock
                updated = (
                    self._orders()
                    .filter(pk=order_id, status=current.value)
                    .update(status=target.value)
                )
                if updated != 1:
                    raise conflict_for(target)(order_id)

                self._check_deadline(order_id, deadline)
        except DatabaseError as exc:
            raise self._persistence_error(order_id, exc) from exc

        logger.info("order %d: %s -> %s", order_id, current.value, target.value)

    def _bound_statements(self, deadline: float) -> None:
        """
        Postgres only: cap every statement of this transaction, including the
        wait for the row lock, at the time left before the deadline. SET LOCAL
        semantics, so it ends with the transaction.
        """
        connection = connections[self.using]
        if connection.vendor != "postgresql":
            return
        with connection.cursor() as cursor:
            cursor.execute(
                "SELECT set_config('statement_timeout', %s, true)",
                [str(max(1, int((deadline - self._clock()) * 1000)))],
            )

    def _check_deadline(self, order_id: int, deadline: float) -> None:
        if self._clock() > deadline:
            raise TransitionTimeout(order_id, self.transition_timeout)

    def _persistence_error(self, order_id: int, exc: DatabaseError) -> PersistenceError:
        sqlstate = getattr(exc.__cause__, "sqlstate", None) or getattr(exc.__cause__, "pgcode", None)
        if sqlstate in _TIMEOUT_SQLSTATES or getattr(exc.__cause__, "sqlite_errorcode", None) == _SQLITE_BUSY:
            return TransitionTimeout(order_id, self.transition_timeout)
        return PersistenceError(f"failed to update order {order_id}: {exc}")

    #----------------
    # paging
    #----------------
    def list(self, limit: Optional[int] = None, page: Optional[int] = None) -> List[ResolvedOrder]:
        """
        Returns one page of orders in id order.

        `limit` is the page size (default 20, never more than 100) and `page`
        is 1-based (default 1). The table splits into ceil(N / limit) pages;
        asking past the last page, or listing an empty table, returns [].
        """
        limit = DEFAULT_ORDER_LIMIT if limit is None else limit
        page = DEFAULT_ORDER_PAGE if page is None else page
        for value in (limit, page):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValidationError("badly formatted parameter: page and limit should be positive integers")

        limit = min(limit, MAX_ORDER_LIMIT)

        total = self.count()
        if total == 0:
            return []

        total_pages = math.ceil(total / limit)
        logger.debug("total pages: %d. count %d limit %d page %d", total_pages, total, limit, page)
        if page > total_pages:
            return []

        offset = limit * (page - 1)
        try:
            rows = list(
                self._orders()
                .order_by("id")
                .values_list("id", "distance", "status")[offset:offset + limit]
            )
        except DatabaseError as exc:
            raise PersistenceError(f"failed to retrieve orders: {exc}") from exc

        return [
            ResolvedOrder(id=id_, distance=distance, status=OrderStatus(status))
            for id_, distance, status in rows
        ]
