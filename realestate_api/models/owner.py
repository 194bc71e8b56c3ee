from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from realestate_api.db.base import Base, DocumentMixin


class Owner(DocumentMixin, Base):
    __tablename__ = "owners"

    name: Mapped[str] = mapped_column(String(256))
    address: Mapped[str] = mapped_column(String(512), default="")
    photo: Mapped[str] = mapped_column(String(512), default="")
    birthday: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
