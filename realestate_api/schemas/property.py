from __future__ import annotations
from typing import Optional

from pydantic import Field

from realestate_api.schemas.base import CamelModel


# --- Property models ---
class PropertyCreate(CamelModel):
    id_owner: str
    name: str
    address: str
    price: float = Field(ge=0)
    code_internal: str = ""
    year: int
    image: str = ""


class PropertyUpdate(CamelModel):
    # accepted shape only; no route applies updates
    id_owner: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    code_internal: Optional[str] = None
    year: Optional[int] = None
    image: Optional[str] = None


class PropertyOut(PropertyCreate):
    id: str


# --- Query shape ---
class PropertyFilter(CamelModel):
    """Optional constraints over the property table; unset means unconstrained."""
    name: Optional[str] = None
    address: Optional[str] = None
    min_price: Optional[float] = Field(default=None, ge=0)
    max_price: Optional[float] = Field(default=None, ge=0)
    year: Optional[int] = None
    owner_id: Optional[str] = None
    code_internal: Optional[str] = None
    page: int = Field(default=1, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1)

    @property
    def is_paginated(self) -> bool:
        return self.page_size is not None

    @property
    def offset(self) -> int:
        return (self.page - 1) * (self.page_size or 0)
