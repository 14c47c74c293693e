import logging

from orders.models import OrderStatus, ResolvedOrder

logger = logging.getLogger(__name__)


class OrderPlacementService:
    """
    Order creation flow: resolve the driving distance, then persist.

    origin and destination arrive already validated and canonical.
    The distance lookup finishes before the insert starts, so a routing
    failure never leaves a row behind.
    """
    def __init__(self, store, resolver):
        self.store = store
        self.resolver = resolver

    def place(self, origin: str, destination: str) -> ResolvedOrder:
        logger.info("order origin: %s destination: %s", origin, destination)

        distance = self.resolver.resolve(origin, destination)
        order_id = self.store.create(origin, destination, distance)

        return ResolvedOrder(id=order_id, distance=distance, status=OrderStatus.UNASSIGNED)
