"""
Evidence app URL configuration.

All routes are registered under the ``/api/`` prefix (included from
``casefile.urls``).

Route Hierarchy
---------------
  /api/evidence/                                → list / create
  /api/evidence/{id}/                           → retrieve / partial_update / destroy
  GET /api/evidence/{evidence_pk}/lab-reports/  → reports filed for the item

  /api/lab-reports/                             → list / create
  /api/lab-reports/{id}/                        → retrieve / partial_update / destroy
"""

from rest_framework.routers import DefaultRouter
from rest_framework_nested import routers as nested_routers

from .views import EvidenceLabReportViewSet, EvidenceViewSet, LabReportViewSet

router = DefaultRouter()
router.register(
    prefix=r"evidence",
    viewset=EvidenceViewSet,
    basename="evidence",
)
router.register(
    prefix=r"lab-reports",
    viewset=LabReportViewSet,
    basename="lab-report",
)

# Parent lookup kwarg → evidence_pk
reports_router = nested_routers.NestedDefaultRouter(
    parent_router=router,
    parent_prefix=r"evidence",
    lookup="evidence",
)
reports_router.register(
    prefix=r"lab-reports",
    viewset=EvidenceLabReportViewSet,
    basename="evidence-lab-report",
)

urlpatterns = [
    *router.urls,
    *reports_router.urls,
]
