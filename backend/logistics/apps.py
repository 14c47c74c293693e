import atexit

from django.apps import AppConfig
from django.conf import settings


class LogisticsConfig(AppConfig):
    """
    Owns the long-lived collaborators of the order endpoints.
    They are built once at startup and read by the views through the app registry.
    """
    name = "logistics"
    default_auto_field = "django.db.models.AutoField"

    store = None
    resolver = None

    def ready(self):
        from routing import OSRMClient, RouteDistanceResolver
        from .store import OrderStore

        self.store = OrderStore(transition_timeout=settings.ORDER_TRANSITION_TIMEOUT_MS / 1000)
        self.resolver = RouteDistanceResolver(
            OSRMClient(
                base_url=settings.OSRM_BASE_URL,
                profile=settings.OSRM_PROFILE,
                timeout=settings.OSRM_TIMEOUT,
            )
        )
        atexit.register(self.resolver.close)
