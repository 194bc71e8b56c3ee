from __future__ import annotations

from realestate_api.schemas.base import CamelModel


class PropertyImageCreate(CamelModel):
    id_property: str
    file: str
    enabled: bool = True


class PropertyImageOut(PropertyImageCreate):
    id: str
