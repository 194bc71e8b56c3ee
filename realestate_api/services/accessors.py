# realestate_api/services/accessors.py
"""One service per table: count, list and bulk insert.

Services flush but never commit; the request handler (or the seeder) owns
the transaction.
"""
from __future__ import annotations
import logging
from typing import Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from realestate_api.db.base import Base
from realestate_api.models.owner import Owner
from realestate_api.models.property import Property
from realestate_api.models.property_image import PropertyImage
from realestate_api.models.property_trace import PropertyTrace
from realestate_api.schemas.owner import OwnerCreate, OwnerOut
from realestate_api.schemas.property import PropertyCreate, PropertyFilter, PropertyOut
from realestate_api.schemas.property_image import PropertyImageCreate, PropertyImageOut
from realestate_api.schemas.property_trace import PropertyTraceCreate, PropertyTraceOut
from realestate_api.services.filters import apply_property_filter, property_predicate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
CreateT = TypeVar("CreateT", bound=BaseModel)
OutT = TypeVar("OutT", bound=BaseModel)


class CollectionService(Generic[ModelT, CreateT, OutT]):
    model: Type[ModelT]
    out_schema: Type[OutT]

    def __init__(self, db: Session):
        self.db = db

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(self.model)) or 0

    def list_all(self) -> List[OutT]:
        rows = self.db.scalars(select(self.model).order_by(self.model.seq)).all()
        return [self.out_schema.model_validate(r) for r in rows]

    def insert_many(self, records: Sequence[CreateT]) -> List[OutT]:
        rows = [self.model(**r.model_dump()) for r in records]
        if not rows:
            return []
        self.db.add_all(rows)
        self.db.flush()  # assigns ids
        logger.debug("Inserted %d rows into %s", len(rows), self.model.__tablename__)
        return [self.out_schema.model_validate(r) for r in rows]


class PropertyService(CollectionService[Property, PropertyCreate, PropertyOut]):
    model = Property
    out_schema = PropertyOut

    def list_filtered(self, flt: Optional[PropertyFilter]) -> List[PropertyOut]:
        rows = self.db.scalars(apply_property_filter(select(Property), flt)).all()
        return [PropertyOut.model_validate(r) for r in rows]

    def count_filtered(self, flt: Optional[PropertyFilter]) -> int:
        stmt = select(func.count()).select_from(Property).where(property_predicate(flt))
        return self.db.scalar(stmt) or 0

    def get_by_id(self, property_id: str) -> Optional[PropertyOut]:
        row = self.db.scalar(select(Property).where(Property.id == property_id))
        return PropertyOut.model_validate(row) if row else None

    def most_expensive(self, limit: int) -> List[PropertyOut]:
        stmt = select(Property).order_by(Property.price.desc(), Property.seq).limit(limit)
        return [PropertyOut.model_validate(r) for r in self.db.scalars(stmt).all()]

    def price_statistics(self) -> tuple[float, float, float]:
        """(minimum, average, maximum) price; zeros when there are no properties."""
        lo, avg, hi = self.db.execute(
            select(func.min(Property.price), func.avg(Property.price), func.max(Property.price))
        ).one()
        if lo is None:
            return 0.0, 0.0, 0.0
        return float(lo), float(avg), float(hi)


class OwnerService(CollectionService[Owner, OwnerCreate, OwnerOut]):
    model = Owner
    out_schema = OwnerOut


class PropertyImageService(CollectionService[PropertyImage, PropertyImageCreate, PropertyImageOut]):
    model = PropertyImage
    out_schema = PropertyImageOut


class PropertyTraceService(CollectionService[PropertyTrace, PropertyTraceCreate, PropertyTraceOut]):
    model = PropertyTrace
    out_schema = PropertyTraceOut
