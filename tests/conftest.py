import pytest
from django.apps import apps
from rest_framework.test import APIClient

from logistics.models import Order
from logistics.store import OrderStore
from routing import DistanceResolutionError

# Bangalore, roughly 3.5km apart by road
ORIGIN = "12.9734,77.5910"
DESTINATION = "12.9527,77.5848"


class FakeResolver:
    """Stands in for the OSRM-backed resolver. Records every lookup."""
    def __init__(self, meters=3527, error=None):
        self.meters = meters
        self.error = error
        self.calls = []

    def resolve(self, origin, destination):
        self.calls.append((origin, destination))
        if self.error is not None:
            raise self.error
        return self.meters

    def close(self):
        pass


@pytest.fixture
def store():
    return OrderStore()


@pytest.fixture
def make_orders():
    """Bulk insert `count` UNASSIGNED orders, returns their ids in order."""
    def _make(count, distance=1000):
        Order.objects.bulk_create(
            Order(origin=ORIGIN, destination=DESTINATION, distance=distance + i)
            for i in range(count)
        )
        return list(Order.objects.order_by("id").values_list("id", flat=True))
    return _make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def fake_resolver(monkeypatch):
    resolver = FakeResolver()
    monkeypatch.setattr(apps.get_app_config("logistics"), "resolver", resolver)
    return resolver


@pytest.fixture
def failing_resolver(monkeypatch):
    resolver = FakeResolver(error=DistanceResolutionError("failed to retrieve distance: OSRM error: NoRoute"))
    monkeypatch.setattr(apps.get_app_config("logistics"), "resolver", resolver)
    return resolver
