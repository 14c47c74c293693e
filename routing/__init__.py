#Marks routing as a package.
#Re-exports the public API (OSRMClient, RouteDistanceResolver)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .osrm_client import OSRMClient, OSRMError
from .route_service import RouteDistanceResolver, DistanceResolutionError

__all__ = [
    "OSRMClient",
    "OSRMError",
    "RouteDistanceResolver",
    "DistanceResolutionError",
]
