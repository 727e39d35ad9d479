from fastapi import APIRouter, HTTPException

from staychill.catalog import get_all_locations, get_location_by_id
from staychill.dependencies import ViewContextDep
from staychill.mappers.destination_search import filter_locations
from staychill.mappers.views import destination_detail, destination_list
from staychill.schemas.views import DestinationDetailView, DestinationListView

router = APIRouter(prefix="/destinations", tags=["destinations"])


@router.get("", response_model=DestinationListView)
async def list_destinations(context: ViewContextDep, q: str = "") -> DestinationListView:
    matches = filter_locations(get_all_locations(), q, context.language)
    return destination_list(matches, q, context)


@router.get("/{location_id}", response_model=DestinationDetailView)
async def get_destination(location_id: str, context: ViewContextDep) -> DestinationDetailView:
    record = get_location_by_id(location_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Destination not found")
    return destination_detail(record, context)
