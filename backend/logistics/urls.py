from django.urls import path

from .views import OrderCreateView, OrderDetailView, OrderListView

urlpatterns = [
    path('order', OrderCreateView.as_view(), name='order-create'),
    path('orders', OrderListView.as_view(), name='order-list'),
    # ids are parsed in the view so a malformed id is a 400, not a 404
    path('order/<str:pk>', OrderDetailView.as_view(), name='order-detail'),
]
