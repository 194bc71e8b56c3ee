from __future__ import annotations

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from realestate_api.db.base import Base, DocumentMixin


class PropertyImage(DocumentMixin, Base):
    __tablename__ = "property_images"

    id_property: Mapped[str] = mapped_column(String(32), index=True)
    file: Mapped[str] = mapped_column(String(512))
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
