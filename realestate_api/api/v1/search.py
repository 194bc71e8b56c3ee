from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from realestate_api.core.deps import get_property_service
from realestate_api.schemas.envelope import Envelope, ok
from realestate_api.schemas.property import PropertyFilter, PropertyOut
from realestate_api.services.accessors import PropertyService

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/expensive", response_model=Envelope[List[PropertyOut]])
def expensive_properties(
    limit: int = Query(5, ge=1, description="How many properties to return"),
    service: PropertyService = Depends(get_property_service),
):
    items = service.most_expensive(limit)
    return ok(items, count=len(items))


@router.get("/by-year/{year}", response_model=Envelope[List[PropertyOut]])
def properties_by_year(year: int, service: PropertyService = Depends(get_property_service)):
    items = service.list_filtered(PropertyFilter(year=year))
    return ok(items, year=year, count=len(items))


@router.get("/price-range", response_model=Envelope[List[PropertyOut]])
def properties_by_price_range(
    min_price: Optional[float] = Query(None, ge=0, alias="minPrice"),
    max_price: Optional[float] = Query(None, ge=0, alias="maxPrice"),
    service: PropertyService = Depends(get_property_service),
):
    items = service.list_filtered(PropertyFilter(min_price=min_price, max_price=max_price))
    return ok(items, priceRange={"min": min_price, "max": max_price}, count=len(items))
