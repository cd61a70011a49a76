"""
URL configuration for admin inventory endpoints.
"""

from django.urls import path

from api.v1.admin import views

app_name = "admin_api"

urlpatterns = [
    path("keys/stats", views.KeyStatsView.as_view(), name="key-stats"),
    path("keys", views.AddKeysView.as_view(), name="add-keys"),
    path("pools/<str:tier>", views.PoolView.as_view(), name="pool"),
    path("pools/<str:tier>/keys/<path:key>", views.PoolKeyView.as_view(), name="pool-key"),
    path("assignments/<str:order_id>", views.AssignmentView.as_view(), name="assignment"),
]
