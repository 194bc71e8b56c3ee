# realestate_api/services/filters.py
from __future__ import annotations
from typing import List, Optional

from sqlalchemy import Select, and_, true
from sqlalchemy.sql.elements import ColumnElement

from realestate_api.models.property import Property
from realestate_api.schemas.property import PropertyFilter
from realestate_api.utils.strings import contains_pattern, norm_str

LIKE_ESCAPE = "\\"


def build_property_conditions(flt: Optional[PropertyFilter]) -> List[ColumnElement[bool]]:
    """Translate a filter into AND-able conditions over ``Property``.

    Text fields match case-insensitively anywhere in the column; price
    bounds are inclusive; year, owner and code are exact. Blank strings
    count as absent.
    """
    if flt is None:
        return []

    conditions: List[ColumnElement[bool]] = []

    name = norm_str(flt.name)
    if name is not None:
        conditions.append(Property.name.ilike(contains_pattern(name, LIKE_ESCAPE), escape=LIKE_ESCAPE))

    address = norm_str(flt.address)
    if address is not None:
        conditions.append(Property.address.ilike(contains_pattern(address, LIKE_ESCAPE), escape=LIKE_ESCAPE))

    if flt.min_price is not None:
        conditions.append(Property.price >= flt.min_price)

    if flt.max_price is not None:
        conditions.append(Property.price <= flt.max_price)

    if flt.year is not None:
        conditions.append(Property.year == flt.year)

    owner_id = norm_str(flt.owner_id)
    if owner_id is not None:
        conditions.append(Property.id_owner == owner_id)

    code = norm_str(flt.code_internal)
    if code is not None:
        conditions.append(Property.code_internal == code)

    return conditions


def property_predicate(flt: Optional[PropertyFilter]) -> ColumnElement[bool]:
    conditions = build_property_conditions(flt)
    if not conditions:
        return true()
    return and_(*conditions)


def apply_property_filter(stmt: Select, flt: Optional[PropertyFilter], paginate: bool = True) -> Select:
    # insertion order; offset/limit are only stable over a total order
    stmt = stmt.where(property_predicate(flt)).order_by(Property.seq)
    if paginate and flt is not None and flt.is_paginated:
        stmt = stmt.offset(flt.offset).limit(flt.page_size)
    return stmt
