from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import UserViewSet, initialize_data

router = DefaultRouter()
router.register(r"users", UserViewSet, basename="user")

urlpatterns = [
    path("api/", include(router.urls)),
    path("api/init", initialize_data, name="init-data"),
    path("api/study/", include("scheduler.api.urls")),
]
