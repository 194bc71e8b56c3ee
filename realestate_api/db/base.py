# realestate_api/db/base.py
import uuid

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def new_id() -> str:
    return uuid.uuid4().hex


class Base(DeclarativeBase):
    pass


class DocumentMixin:
    """Opaque string identity, assigned on insert.

    ``seq`` is the storage key and grows with every insert, so ordering by it
    gives insertion order on any backend. Callers only ever see ``id``.
    """
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(32), unique=True, index=True, default=new_id)
