from __future__ import annotations
from datetime import datetime

from pydantic import Field

from realestate_api.schemas.base import CamelModel


class PropertyTraceCreate(CamelModel):
    id_property: str
    date_sale: datetime
    name: str
    value: float = Field(ge=0)
    tax: float = Field(ge=0)


class PropertyTraceOut(PropertyTraceCreate):
    id: str
