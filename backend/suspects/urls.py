"""
Suspects app URL configuration.

  /api/suspects/        → list / create
  /api/suspects/{id}/   → retrieve / partial_update / destroy

The per-case listing ``/api/cases/{case_pk}/suspects/`` is registered
with the case routes in ``cases/urls.py``.
"""

from rest_framework.routers import DefaultRouter

from .views import SuspectViewSet

router = DefaultRouter()
router.register(
    prefix=r"suspects",
    viewset=SuspectViewSet,
    basename="suspect",
)

urlpatterns = router.urls
