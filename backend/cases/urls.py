"""
Cases app URL configuration.

All routes are registered under the ``/api/`` prefix (included from
``casefile.urls``).

Route Hierarchy
---------------
  /api/cases/                         → list / create
  /api/cases/{id}/                    → retrieve / partial_update / destroy

  ── Nested read-only lists ──────────────────────────────────────
  GET /api/cases/{case_pk}/evidence/  → evidence collected for the case
  GET /api/cases/{case_pk}/suspects/  → suspects named in the case
"""

from rest_framework.routers import DefaultRouter
from rest_framework_nested import routers as nested_routers

from evidence.views import CaseEvidenceViewSet
from suspects.views import CaseSuspectViewSet

from .views import CaseViewSet

router = DefaultRouter()
router.register(
    prefix=r"cases",
    viewset=CaseViewSet,
    basename="case",
)

# Parent lookup kwarg → case_pk
case_children_router = nested_routers.NestedDefaultRouter(
    parent_router=router,
    parent_prefix=r"cases",
    lookup="case",
)
case_children_router.register(
    prefix=r"evidence",
    viewset=CaseEvidenceViewSet,
    basename="case-evidence",
)
case_children_router.register(
    prefix=r"suspects",
    viewset=CaseSuspectViewSet,
    basename="case-suspect",
)

urlpatterns = [
    *router.urls,
    *case_children_router.urls,
]
