from django.apps import apps
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from orders import errors
from .placement import OrderPlacementService
from .serializers import (
    OrderCreateSerializer,
    OrderDetailSerializer,
    OrderListQuerySerializer,
    OrderStatusUpdateSerializer,
    ResolvedOrderSerializer,
)


class OrderDependenciesMixin:
    """
    Hands views the store and distance resolver built at startup
    (see LogisticsConfig.ready).
    """
    @property
    def store(self):
        return apps.get_app_config("logistics").store

    @property
    def resolver(self):
        return apps.get_app_config("logistics").resolver


def _parse_order_id(raw):
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise errors.ValidationError("order ID must be a valid integer")


class OrderCreateView(OrderDependenciesMixin, APIView):
    """
    POST /order
    Validates both coordinates, resolves the driving distance, stores the order.
    """
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = OrderPlacementService(self.store, self.resolver)
        resolved = service.place(
            serializer.validated_data["origin"],
            serializer.validated_data["destination"],
        )
        return Response(ResolvedOrderSerializer(resolved).data, status=status.HTTP_200_OK)


class OrderListView(OrderDependenciesMixin, APIView):
    """
    GET /orders?page=<n>&limit=<n>
    - limit: page size, default 20, capped at 100
    - page: 1-based, default 1; the table splits into ceil(N / limit) pages
    """
    def get(self, request):
        query = OrderListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        orders = self.store.list(
            limit=query.validated_data.get("limit"),
            page=query.validated_data.get("page"),
        )
        return Response(ResolvedOrderSerializer(orders, many=True).data)


class OrderDetailView(OrderDependenciesMixin, APIView):
    """
    GET /order/<id>: full order record
    PUT /order/<id> {"status": "taken"}: take (or release) the order
    """
    def get(self, request, pk):
        record = self.store.get(_parse_order_id(pk))
        return Response(OrderDetailSerializer(record).data)

    def put(self, request, pk):
        order_id = _parse_order_id(pk)

        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.store.transition(order_id, serializer.validated_data["status"])
        return Response({"status": "SUCCESS"})
