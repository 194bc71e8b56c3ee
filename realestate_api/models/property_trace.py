from __future__ import annotations
from datetime import datetime

from sqlalchemy import DateTime, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from realestate_api.db.base import Base, DocumentMixin


class PropertyTrace(DocumentMixin, Base):
    __tablename__ = "property_traces"

    id_property: Mapped[str] = mapped_column(String(32), index=True)
    date_sale: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    name: Mapped[str] = mapped_column(String(256))
    value: Mapped[float] = mapped_column(Numeric(18, 2, asdecimal=False))
    tax: Mapped[float] = mapped_column(Numeric(18, 2, asdecimal=False))
