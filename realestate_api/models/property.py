from __future__ import annotations

from sqlalchemy import CheckConstraint, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from realestate_api.db.base import Base, DocumentMixin


class Property(DocumentMixin, Base):
    __tablename__ = "properties"

    # plain reference, no FK: owners are not checked on insert
    id_owner: Mapped[str] = mapped_column(String(32), index=True)

    name: Mapped[str] = mapped_column(String(256), index=True)
    address: Mapped[str] = mapped_column(String(512))
    price: Mapped[float] = mapped_column(Numeric(18, 2, asdecimal=False))
    code_internal: Mapped[str] = mapped_column(String(64), default="")
    year: Mapped[int] = mapped_column(Integer, index=True)
    image: Mapped[str] = mapped_column(String(512), default="")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_properties_price_non_negative"),
    )
