from datetime import datetime
from typing import Union

from dodoclient._serialization import BaseModel, BaseParams

__all__ = [
    'Event',
    'EventInput',
    'UsageEventIngestParams',
    'UsageEventIngestResponse',
    'UsageEventListParams',
]

MetadataValue = Union[str, bool, int, float]


class Event(BaseModel):
    business_id: str
    customer_id: str
    event_id: str
    event_name: str
    timestamp: datetime
    metadata: dict[str, MetadataValue] | None = None


class EventInput(BaseModel):
    """One usage event; ``event_id`` makes ingestion idempotent."""

    customer_id: str
    event_id: str
    event_name: str
    metadata: dict[str, MetadataValue] | None = None
    timestamp: datetime | None = None


class UsageEventIngestParams(BaseParams):
    events: list[EventInput]


class UsageEventIngestResponse(BaseModel):
    ingested_count: int


class UsageEventListParams(BaseParams):
    customer_id: str | None = None
    end: datetime | None = None
    event_name: str | None = None
    meter_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None
    start: datetime | None = None
