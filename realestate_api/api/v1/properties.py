from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from realestate_api.core.config import settings
from realestate_api.core.deps import get_property_service
from realestate_api.core.exceptions import NotFoundError
from realestate_api.schemas.envelope import Envelope, ok
from realestate_api.schemas.property import PropertyFilter, PropertyOut
from realestate_api.schemas.reports import Greeting
from realestate_api.services.accessors import PropertyService

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("/hello", response_model=Envelope[Greeting])
def hello():
    return ok(Greeting(
        message="Hello from the Real Estate API!",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
    ))


@router.get("", response_model=Envelope[List[PropertyOut]])
def list_properties(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    address: Optional[str] = Query(None, description="Case-insensitive substring of the address"),
    min_price: Optional[float] = Query(None, ge=0, alias="minPrice"),
    max_price: Optional[float] = Query(None, ge=0, alias="maxPrice"),
    year: Optional[int] = Query(None, description="Exact construction year"),
    owner_id: Optional[str] = Query(None, alias="ownerId"),
    code_internal: Optional[str] = Query(None, alias="codeInternal"),
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize",
                                     description="Omit to receive every match"),
    service: PropertyService = Depends(get_property_service),
):
    flt = PropertyFilter(
        name=name,
        address=address,
        min_price=min_price,
        max_price=max_price,
        year=year,
        owner_id=owner_id,
        code_internal=code_internal,
        page=page,
        page_size=page_size,
    )
    items = service.list_filtered(flt)
    total = service.count_filtered(flt) if flt.is_paginated else len(items)
    return ok(items, count=len(items), totalCount=total, page=page, pageSize=page_size)


@router.get("/count", response_model=Envelope[int])
def count_properties(service: PropertyService = Depends(get_property_service)):
    return ok(service.count())


@router.get("/{property_id}", response_model=Envelope[PropertyOut])
def get_property(property_id: str, service: PropertyService = Depends(get_property_service)):
    prop = service.get_by_id(property_id)
    if prop is None:
        raise NotFoundError(f"Property with id {property_id} not found")
    return ok(prop)
