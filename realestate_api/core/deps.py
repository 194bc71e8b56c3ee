from __future__ import annotations
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from realestate_api.db.session import get_db
from realestate_api.services.accessors import (
    OwnerService,
    PropertyImageService,
    PropertyService,
    PropertyTraceService,
)
from realestate_api.services.seeder import DatabaseSeeder

DbSession = Annotated[Session, Depends(get_db)]


def get_property_service(db: DbSession) -> PropertyService:
    return PropertyService(db)


def get_owner_service(db: DbSession) -> OwnerService:
    return OwnerService(db)


def get_image_service(db: DbSession) -> PropertyImageService:
    return PropertyImageService(db)


def get_trace_service(db: DbSession) -> PropertyTraceService:
    return PropertyTraceService(db)


def get_seeder(db: DbSession) -> DatabaseSeeder:
    return DatabaseSeeder(db)
