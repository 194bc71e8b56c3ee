from __future__ import annotations
import logging

from fastapi import APIRouter, Depends

from realestate_api.core.config import settings
from realestate_api.core.deps import DbSession, get_seeder
from realestate_api.db.session import list_tables
from realestate_api.schemas.envelope import Envelope, ok
from realestate_api.schemas.reports import DatabaseCheck
from realestate_api.services.accessors import OwnerService
from realestate_api.services.seeder import DatabaseSeeder

logger = logging.getLogger(__name__)

router = APIRouter(tags=["diagnostics"])


@router.get("/test-db", response_model=Envelope[DatabaseCheck])
def test_database(db: DbSession, seeder: DatabaseSeeder = Depends(get_seeder)):
    # Seed on first contact with an empty database
    if OwnerService(db).count() == 0:
        logger.warning("No data found, running seeder")
        seeder.seed()

    tables = list_tables(db.get_bind())
    has_data = OwnerService(db).count() > 0
    return ok(
        DatabaseCheck(
            database=settings.db_name,
            tables=tables,
            status="Database has data" if has_data else "Database is empty",
        ),
        message="Database connection OK",
    )


@router.post("/recreate-database", response_model=Envelope[DatabaseCheck])
def recreate_database(db: DbSession, seeder: DatabaseSeeder = Depends(get_seeder)):
    seeder.reset()
    return ok(
        DatabaseCheck(database=settings.db_name, tables=list_tables(db.get_bind()), status="Database recreated"),
        message="Database recreated",
    )
