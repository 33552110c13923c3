from django.urls import path

from apps.common.views import live_health, ready_health

urlpatterns = [
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]
