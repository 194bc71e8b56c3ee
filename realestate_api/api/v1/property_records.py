from __future__ import annotations

from fastapi import APIRouter, Depends

from realestate_api.core.deps import get_image_service, get_trace_service
from realestate_api.schemas.envelope import Envelope, ok
from realestate_api.services.accessors import PropertyImageService, PropertyTraceService

router = APIRouter(tags=["property records"])


@router.get("/property-images/count", response_model=Envelope[int])
def count_property_images(service: PropertyImageService = Depends(get_image_service)):
    return ok(service.count())


@router.get("/property-traces/count", response_model=Envelope[int])
def count_property_traces(service: PropertyTraceService = Depends(get_trace_service)):
    return ok(service.count())
