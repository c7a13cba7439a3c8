"""
Officers app URL configuration.

  /api/officers/        → list / create
  /api/officers/{id}/   → retrieve / partial_update / destroy
"""

from rest_framework.routers import DefaultRouter

from .views import OfficerViewSet

router = DefaultRouter()
router.register(
    prefix=r"officers",
    viewset=OfficerViewSet,
    basename="officer",
)

urlpatterns = router.urls
