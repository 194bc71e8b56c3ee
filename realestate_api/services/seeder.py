# realestate_api/services/seeder.py
from __future__ import annotations
import logging
import threading
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from realestate_api.db.session import drop_models, init_models
from realestate_api.schemas.owner import OwnerCreate, OwnerOut
from realestate_api.schemas.property import PropertyCreate, PropertyOut
from realestate_api.schemas.property_image import PropertyImageCreate
from realestate_api.schemas.property_trace import PropertyTraceCreate
from realestate_api.schemas.reports import SeedResult
from realestate_api.services.accessors import (
    OwnerService,
    PropertyImageService,
    PropertyService,
    PropertyTraceService,
)

logger = logging.getLogger(__name__)

# Serializes seeding inside one process. Separate processes sharing an
# empty database can still both pass the owner-count check.
_seed_lock = threading.Lock()


# --- Fixture ---

def fixture_owners() -> List[OwnerCreate]:
    return [
        OwnerCreate(name="Juan Pérez", address="Calle 10 #15-20, Bogotá",
                    photo="juan_perez.jpg", birthday=date(1980, 5, 15)),
        OwnerCreate(name="María García", address="Carrera 25 #30-45, Medellín",
                    photo="maria_garcia.jpg", birthday=date(1975, 8, 22)),
        OwnerCreate(name="Carlos López", address="Avenida 68 #45-12, Cali",
                    photo="carlos_lopez.jpg", birthday=date(1985, 12, 3)),
    ]


def fixture_properties(owners: List[OwnerOut]) -> List[PropertyCreate]:
    o = [x.id for x in owners]
    return [
        PropertyCreate(id_owner=o[0], name="Casa Campestre en La Sabana", address="Vereda La Esperanza, Chía",
                       price=450_000_000, code_internal="PROP001", year=2020, image="casa_campestre.jpg"),
        PropertyCreate(id_owner=o[1], name="Apartamento Zona Rosa", address="Carrera 13 #85-32, Bogotá",
                       price=320_000_000, code_internal="PROP002", year=2019, image="apto_zona_rosa.jpg"),
        PropertyCreate(id_owner=o[0], name="Casa en Cedritos", address="Calle 147 #45-67, Bogotá",
                       price=280_000_000, code_internal="PROP003", year=2021, image="casa_cedritos.jpg"),
        PropertyCreate(id_owner=o[2], name="Penthouse El Poblado", address="Carrera 43A #15-25, Medellín",
                       price=850_000_000, code_internal="PROP004", year=2022, image="penthouse_poblado.jpg"),
        PropertyCreate(id_owner=o[1], name="Apartaestudio Chapinero", address="Carrera 15 #63-45, Bogotá",
                       price=180_000_000, code_internal="PROP005", year=2018, image="apartaestudio_chapinero.jpg"),
    ]


def fixture_images(props: List[PropertyOut]) -> List[PropertyImageCreate]:
    p = [x.id for x in props]
    files = [
        (p[0], "casa_campestre_1.jpg"),
        (p[0], "casa_campestre_2.jpg"),
        (p[1], "apto_zona_rosa_1.jpg"),
        (p[1], "apto_zona_rosa_2.jpg"),
        (p[2], "casa_cedritos_1.jpg"),
        (p[3], "penthouse_1.jpg"),
        (p[3], "penthouse_2.jpg"),
        (p[4], "apartaestudio_1.jpg"),
    ]
    return [PropertyImageCreate(id_property=pid, file=f, enabled=True) for pid, f in files]


def fixture_traces(props: List[PropertyOut], now: datetime) -> List[PropertyTraceCreate]:
    p = [x.id for x in props]
    return [
        PropertyTraceCreate(id_property=p[0], date_sale=now - timedelta(days=30),
                            name="Venta Inicial", value=450_000_000, tax=22_500_000),
        PropertyTraceCreate(id_property=p[1], date_sale=now - timedelta(days=45),
                            name="Compra", value=320_000_000, tax=16_000_000),
        PropertyTraceCreate(id_property=p[2], date_sale=now - timedelta(days=60),
                            name="Transferencia", value=280_000_000, tax=14_000_000),
        PropertyTraceCreate(id_property=p[3], date_sale=now - timedelta(days=15),
                            name="Venta Premium", value=850_000_000, tax=42_500_000),
    ]


class DatabaseSeeder:
    def __init__(self, db: Session):
        self.db = db
        self.owners = OwnerService(db)
        self.properties = PropertyService(db)
        self.images = PropertyImageService(db)
        self.traces = PropertyTraceService(db)

    def seed(self, now: Optional[datetime] = None) -> SeedResult:
        """
        Insert the fixture graph unless owners already exist.

        Owners go in first because properties embed their generated ids,
        and images/traces embed the property ids. Everything is committed
        once at the end; any failure rolls the whole seed back.
        """
        with _seed_lock:
            return self._seed(now or datetime.now(timezone.utc))

    def reset(self, now: Optional[datetime] = None) -> SeedResult:
        """Drop every table, recreate it, then seed, all under the seed lock."""
        bind = self.db.get_bind()
        with _seed_lock:
            self.db.rollback()
            self.db.close()
            logger.warning("Dropping all tables on %s", bind.url.render_as_string(hide_password=True))
            drop_models(bind)
            init_models(bind)
            return self._seed(now or datetime.now(timezone.utc))

    def _seed(self, now: datetime) -> SeedResult:
        # caller holds _seed_lock
        logger.info("Seeding started")
        if self.owners.count() > 0:
            logger.info("Database already has data, skipping seed")
            return SeedResult(seeded=False)

        try:
            owners = self.owners.insert_many(fixture_owners())
            logger.info("Created %d owners", len(owners))

            props = self.properties.insert_many(fixture_properties(owners))
            logger.info("Created %d properties", len(props))

            images = self.images.insert_many(fixture_images(props))
            logger.info("Created %d property images", len(images))

            traces = self.traces.insert_many(fixture_traces(props, now))
            logger.info("Created %d property traces", len(traces))

            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("Seeding failed, rolled back")
            raise

        logger.info("Seeding completed")
        return SeedResult(
            seeded=True,
            owners=len(owners),
            properties=len(props),
            property_images=len(images),
            property_traces=len(traces),
        )
