"""
URL configuration for store endpoints.
"""

from django.urls import path

from api.v1.store import views

app_name = "store"

urlpatterns = [
    path("orders", views.OrdersView.as_view(), name="orders"),
    path("orders/<uuid:order_id>", views.OrderDetailView.as_view(), name="order-detail"),
    path("payments/events", views.PaymentEventView.as_view(), name="payment-events"),
    path("account/keys", views.UserKeysView.as_view(), name="user-keys"),
]
