from __future__ import annotations
from typing import List

from fastapi import APIRouter, Depends

from realestate_api.core.deps import get_owner_service
from realestate_api.schemas.envelope import Envelope, ok
from realestate_api.schemas.owner import OwnerOut
from realestate_api.services.accessors import OwnerService

router = APIRouter(prefix="/owners", tags=["owners"])


@router.get("", response_model=Envelope[List[OwnerOut]])
def list_owners(service: OwnerService = Depends(get_owner_service)):
    owners = service.list_all()
    return ok(owners, count=len(owners))


@router.get("/count", response_model=Envelope[int])
def count_owners(service: OwnerService = Depends(get_owner_service)):
    return ok(service.count())
