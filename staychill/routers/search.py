from fastapi import APIRouter, Query, Request

from staychill.dependencies import BackendDep
from staychill.mappers.search_params import (
    build_property_search,
    build_search_params,
    parse_search_params,
)
from staychill.mappers.views import property_card
from staychill.routes import search_results_route
from staychill.schemas.search import InitialFilters, PropertyFilters, SearchLink, SearchRequest
from staychill.schemas.views import PropertyCard

router = APIRouter(tags=["search"])


@router.post("/search", response_model=SearchLink)
async def build_search_link(request: SearchRequest) -> SearchLink:
    query = build_search_params(request.location, request.dateRange, request.guestCount)
    return SearchLink(query=query, route=search_results_route(query))


@router.get("/search/filters", response_model=InitialFilters)
async def initial_filters(request: Request) -> InitialFilters:
    return parse_search_params(request.url.query)


@router.post("/properties/search", response_model=list[PropertyCard])
async def search_properties(filters: PropertyFilters, backend: BackendDep) -> list[PropertyCard]:
    properties = await backend.search_properties(build_property_search(filters))
    return [property_card(p) for p in properties]


@router.get("/properties/featured", response_model=list[PropertyCard])
async def featured_properties(
    backend: BackendDep,
    limit: int = Query(default=3, ge=1, le=20),
) -> list[PropertyCard]:
    properties = await backend.get_featured_properties(limit)
    return [property_card(p) for p in properties]
