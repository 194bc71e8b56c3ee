"""Tests for the property filter composer."""

import pytest
from sqlalchemy import select

from realestate_api.models.property import Property
from realestate_api.schemas.property import PropertyCreate, PropertyFilter
from realestate_api.services.accessors import PropertyService
from realestate_api.services.filters import apply_property_filter


def _matches(p, flt: PropertyFilter) -> bool:
    """Reference predicate evaluated in Python."""
    if flt.name and flt.name.strip() and flt.name.strip().lower() not in p.name.lower():
        return False
    if flt.address and flt.address.strip() and flt.address.strip().lower() not in p.address.lower():
        return False
    if flt.min_price is not None and p.price < flt.min_price:
        return False
    if flt.max_price is not None and p.price > flt.max_price:
        return False
    if flt.year is not None and p.year != flt.year:
        return False
    if flt.owner_id and p.id_owner != flt.owner_id:
        return False
    if flt.code_internal and p.code_internal != flt.code_internal:
        return False
    return True


FILTERS = [
    PropertyFilter(),
    PropertyFilter(name="casa"),
    PropertyFilter(name="CASA"),
    PropertyFilter(name="rosa"),
    PropertyFilter(address="bogotá"),
    PropertyFilter(address="Medellín"),
    PropertyFilter(min_price=320_000_000),
    PropertyFilter(max_price=320_000_000),
    PropertyFilter(min_price=280_000_000, max_price=450_000_000),
    PropertyFilter(year=2020),
    PropertyFilter(year=1999),
    PropertyFilter(name="casa", year=2021),
    PropertyFilter(name="apart", address="bogotá", max_price=200_000_000),
    PropertyFilter(code_internal="PROP004"),
    PropertyFilter(min_price=900_000_000),
]


@pytest.mark.parametrize("flt", FILTERS, ids=lambda f: repr(f.model_dump(exclude_defaults=True)))
def test_filter_returns_exact_matching_subset(seeded, flt):
    service = PropertyService(seeded)
    everything = service.list_all()

    got = {p.id for p in service.list_filtered(flt)}
    expected = {p.id for p in everything if _matches(p, flt)}

    assert got == expected


def test_absent_filter_is_full_listing(seeded):
    service = PropertyService(seeded)
    assert [p.id for p in service.list_filtered(None)] == [p.id for p in service.list_all()]
    assert len(service.list_filtered(PropertyFilter())) == 5


def test_price_bounds_are_inclusive(seeded):
    service = PropertyService(seeded)
    result = service.list_filtered(PropertyFilter(min_price=280_000_000, max_price=320_000_000))
    assert sorted(p.price for p in result) == [280_000_000, 320_000_000]


def test_substring_match_is_unanchored_and_case_insensitive(seeded):
    service = PropertyService(seeded)
    result = service.list_filtered(PropertyFilter(name="ZONA"))
    assert [p.name for p in result] == ["Apartamento Zona Rosa"]


def test_blank_text_filters_are_ignored(seeded):
    service = PropertyService(seeded)
    assert len(service.list_filtered(PropertyFilter(name="", address="   "))) == 5


def test_like_wildcards_match_literally(session):
    service = PropertyService(session)
    service.insert_many([
        PropertyCreate(id_owner="o1", name="Lote 100% urbanizado", address="Km 5", price=1, year=2000),
        PropertyCreate(id_owner="o1", name="Lote rural", address="Km_7", price=2, year=2000),
        PropertyCreate(id_owner="o1", name="Casa", address="Km 77", price=3, year=2000),
    ])
    session.commit()

    assert [p.name for p in service.list_filtered(PropertyFilter(name="%"))] == ["Lote 100% urbanizado"]
    assert [p.address for p in service.list_filtered(PropertyFilter(address="_"))] == ["Km_7"]


def test_owner_filter(seeded):
    service = PropertyService(seeded)
    owner_id = service.list_all()[0].id_owner

    result = service.list_filtered(PropertyFilter(owner_id=owner_id))

    assert result
    assert all(p.id_owner == owner_id for p in result)


def test_pagination_slices_matching_set(seeded):
    service = PropertyService(seeded)
    everything = [p.id for p in service.list_all()]

    page1 = service.list_filtered(PropertyFilter(page=1, page_size=2))
    page3 = service.list_filtered(PropertyFilter(page=3, page_size=2))
    past_end = service.list_filtered(PropertyFilter(page=4, page_size=2))

    assert [p.id for p in page1] == everything[:2]
    assert [p.id for p in page3] == everything[4:]
    assert past_end == []
    assert service.count_filtered(PropertyFilter(page=3, page_size=2)) == 5


def test_page_without_page_size_returns_everything(seeded):
    service = PropertyService(seeded)
    assert len(service.list_filtered(PropertyFilter(page=3))) == 5


def test_filtered_statement_orders_by_insertion_key():
    stmt = apply_property_filter(select(Property), PropertyFilter(year=2020, page=2, page_size=2))
    sql = str(stmt.compile(compile_kwargs={"literal_binds": True}))
    assert "ORDER BY properties.seq" in sql
    assert sql.index("ORDER BY") < sql.index("LIMIT")


def test_pages_concatenate_to_insertion_order(session):
    service = PropertyService(session)
    # prices descend while inserting, so a price-ordered scan would reverse them
    service.insert_many([
        PropertyCreate(id_owner="o1", name=f"Lote {n}", address="Km 1", price=100 - n, year=2000)
        for n in range(6)
    ])
    session.commit()

    pages = [
        service.list_filtered(PropertyFilter(min_price=0, page=page, page_size=2))
        for page in (1, 2, 3)
    ]

    assert [p.name for page in pages for p in page] == [f"Lote {n}" for n in range(6)]


def test_uppercase_accented_text_matches(seeded):
    service = PropertyService(seeded)
    result = service.list_filtered(PropertyFilter(address="MEDELLÍN"))
    assert [p.name for p in result] == ["Penthouse El Poblado"]
    assert [p.name for p in service.list_filtered(PropertyFilter(address="CHÍA"))] == [
        "Casa Campestre en La Sabana",
    ]
