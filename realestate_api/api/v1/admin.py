from __future__ import annotations

from fastapi import APIRouter, Depends

from realestate_api.core.deps import DbSession, get_seeder
from realestate_api.schemas.envelope import Envelope, ok
from realestate_api.schemas.reports import DatabaseStatus, SeedResult, SummaryReport
from realestate_api.services.reports import database_status, summary_report
from realestate_api.services.seeder import DatabaseSeeder

router = APIRouter(tags=["admin"])


@router.get("/status", response_model=Envelope[DatabaseStatus])
def get_database_status(db: DbSession):
    return ok(database_status(db))


@router.post("/seed-data", response_model=Envelope[SeedResult])
def seed_data(seeder: DatabaseSeeder = Depends(get_seeder)):
    result = seeder.seed()
    if result.seeded:
        return ok(result, message="Sample data created")
    return ok(result, message="Database already has data; seeding skipped")


@router.delete("/clear-data", response_model=Envelope[None])
def clear_data():
    return ok(
        message="Data clearing is not implemented",
        note="Use POST /recreate-database to drop and reseed every table",
    )


@router.get("/reports/summary", response_model=Envelope[SummaryReport])
def get_summary_report(db: DbSession):
    return ok(summary_report(db))
