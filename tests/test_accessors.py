"""Tests for the per-table services."""

from datetime import date

import pytest

from realestate_api.schemas.owner import OwnerCreate
from realestate_api.schemas.property import PropertyCreate
from realestate_api.schemas.property_image import PropertyImageCreate
from realestate_api.services.accessors import (
    OwnerService,
    PropertyImageService,
    PropertyService,
    PropertyTraceService,
)

SERVICES = [PropertyService, OwnerService, PropertyImageService, PropertyTraceService]


@pytest.mark.parametrize("service_cls", SERVICES, ids=lambda c: c.__name__)
def test_count_matches_list_all_on_empty_store(session, service_cls):
    service = service_cls(session)
    assert service.count() == len(service.list_all()) == 0


@pytest.mark.parametrize("service_cls", SERVICES, ids=lambda c: c.__name__)
def test_count_matches_list_all_after_seed(seeded, service_cls):
    service = service_cls(seeded)
    assert service.count() == len(service.list_all()) > 0


def test_insert_many_assigns_distinct_ids(session):
    owners = OwnerService(session).insert_many([
        OwnerCreate(name="Ana", address="Calle 1", photo="ana.jpg", birthday=date(1990, 1, 1)),
        OwnerCreate(name="Luis"),
    ])

    assert len(owners) == 2
    assert all(o.id for o in owners)
    assert owners[0].id != owners[1].id


def test_insert_many_with_no_records_is_a_noop(session):
    assert PropertyService(session).insert_many([]) == []
    assert PropertyService(session).count() == 0


def test_insert_does_not_check_owner_reference(session):
    service = PropertyService(session)
    (prop,) = service.insert_many([
        PropertyCreate(id_owner="no-such-owner", name="Bodega", address="Zona Franca", price=10, year=2010),
    ])
    session.commit()

    assert service.get_by_id(prop.id).id_owner == "no-such-owner"


def test_image_enabled_defaults_true(session):
    (img,) = PropertyImageService(session).insert_many([PropertyImageCreate(id_property="p1", file="a.jpg")])
    assert img.enabled is True


def test_get_by_id_missing_returns_none(seeded):
    assert PropertyService(seeded).get_by_id("does-not-exist") is None


def test_get_by_id_round_trip(seeded):
    service = PropertyService(seeded)
    first = service.list_all()[0]
    assert service.get_by_id(first.id) == first


def test_most_expensive_orders_by_price_desc(seeded):
    top = PropertyService(seeded).most_expensive(2)
    assert [p.price for p in top] == [850_000_000, 450_000_000]


def test_most_expensive_limit_larger_than_table(seeded):
    top = PropertyService(seeded).most_expensive(50)
    assert [p.price for p in top] == [850_000_000, 450_000_000, 320_000_000, 280_000_000, 180_000_000]


def test_most_expensive_ties_keep_insertion_order(session):
    service = PropertyService(session)
    service.insert_many([
        PropertyCreate(id_owner="o1", name=name, address="Km 2", price=500, year=2001)
        for name in ("Primero", "Segundo", "Tercero")
    ])
    service.insert_many([PropertyCreate(id_owner="o1", name="Caro", address="Km 3", price=900, year=2001)])
    session.commit()

    assert [p.name for p in service.most_expensive(3)] == ["Caro", "Primero", "Segundo"]
    assert [p.name for p in service.list_all()] == ["Primero", "Segundo", "Tercero", "Caro"]


def test_price_statistics(seeded):
    lo, avg, hi = PropertyService(seeded).price_statistics()
    assert lo == 180_000_000
    assert hi == 850_000_000
    assert avg == pytest.approx(416_000_000)


def test_price_statistics_empty_store(session):
    assert PropertyService(session).price_statistics() == (0.0, 0.0, 0.0)
