# realestate_api/services/reports.py
from __future__ import annotations
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from realestate_api.core.config import settings
from realestate_api.schemas.reports import (
    CollectionCounts,
    DatabaseStatus,
    PriceStatistics,
    SummaryReport,
)
from realestate_api.services.accessors import (
    OwnerService,
    PropertyImageService,
    PropertyService,
    PropertyTraceService,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def collection_counts(db: Session) -> CollectionCounts:
    return CollectionCounts(
        properties=PropertyService(db).count(),
        owners=OwnerService(db).count(),
        property_images=PropertyImageService(db).count(),
        property_traces=PropertyTraceService(db).count(),
    )


def database_status(db: Session, database: str | None = None) -> DatabaseStatus:
    counts = collection_counts(db)
    return DatabaseStatus(
        database=database or settings.db_name,
        timestamp=_now(),
        collections=counts,
        total_records=counts.total,
    )


def summary_report(db: Session, currency: str | None = None) -> SummaryReport:
    counts = collection_counts(db)
    minimum, average, maximum = PropertyService(db).price_statistics()
    return SummaryReport(
        total_properties=counts.properties,
        total_owners=counts.owners,
        total_images=counts.property_images,
        total_traces=counts.property_traces,
        price_statistics=PriceStatistics(
            average=average,
            maximum=maximum,
            minimum=minimum,
            currency=currency or settings.price_currency,
        ),
        generated_at=_now(),
    )
