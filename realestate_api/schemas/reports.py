from __future__ import annotations
from datetime import datetime

from realestate_api.schemas.base import CamelModel


class CollectionCounts(CamelModel):
    properties: int
    owners: int
    property_images: int
    property_traces: int

    @property
    def total(self) -> int:
        return self.properties + self.owners + self.property_images + self.property_traces


class DatabaseStatus(CamelModel):
    database: str
    timestamp: datetime
    collections: CollectionCounts
    total_records: int


class PriceStatistics(CamelModel):
    average: float
    maximum: float
    minimum: float
    currency: str


class SummaryReport(CamelModel):
    total_properties: int
    total_owners: int
    total_images: int
    total_traces: int
    price_statistics: PriceStatistics
    generated_at: datetime


class SeedResult(CamelModel):
    seeded: bool
    owners: int = 0
    properties: int = 0
    property_images: int = 0
    property_traces: int = 0


class Greeting(CamelModel):
    message: str
    timestamp: datetime
    version: str


class DatabaseCheck(CamelModel):
    database: str
    tables: list[str]
    status: str
