#Purpose: Distance resolution for order creation.
#Turns two canonical "lat,lng" strings into a single driving distance in meters.
#Uses OSRM /route with alternatives and keeps the shortest one.
#Sits outside any database transaction: it must finish before the order is inserted.

import logging

from orders.coordinates import LatLng
from orders.errors import ValidationError
from .osrm_client import OSRMClient, OSRMError

logger = logging.getLogger(__name__)


class DistanceResolutionError(Exception):
    """Raised when no driving distance could be computed between two points."""
    pass


class RouteDistanceResolver:
    """
    Distance Resolver backed by an OSRMClient.
    resolve(origin, destination) -> meters (int)
    """
    def __init__(self, client: OSRMClient):
        self.client = client

    def close(self) -> None:
        self.client.close()

    def resolve(self, origin: str, destination: str) -> int:
        try:
            coordinates = [LatLng.parse(origin).as_floats(), LatLng.parse(destination).as_floats()]
        except ValidationError as exc:
            raise DistanceResolutionError(str(exc)) from exc

        try:
            routes = self.client.compute_route(coordinates, alternatives=True)
        except OSRMError as exc:
            raise DistanceResolutionError(f"failed to retrieve distance: {exc}") from exc

        if not routes:
            raise DistanceResolutionError(f"no routes found between {origin} and {destination}")

        meters = int(round(min(route["distance"] for route in routes)))
        logger.info("computed route distance: %d (%s -> %s)", meters, origin, destination)
        return meters
