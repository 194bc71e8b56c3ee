from __future__ import annotations
from datetime import date
from typing import Optional

from realestate_api.schemas.base import CamelModel


class OwnerCreate(CamelModel):
    name: str
    address: str = ""
    photo: str = ""
    birthday: Optional[date] = None


class OwnerOut(OwnerCreate):
    id: str
