from fastapi import APIRouter

from staychill.dependencies import BackendDep, ViewContextDep
from staychill.mappers.dashboard import summarize_properties
from staychill.mappers.views import dashboard_view
from staychill.schemas.views import DashboardView

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardView)
async def get_dashboard(backend: BackendDep, context: ViewContextDep) -> DashboardView:
    properties = await backend.get_owner_properties()
    return dashboard_view(summarize_properties(properties), properties, context)
