from datetime import datetime

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.webhook_events import WebhookEventType

__all__ = [
    'WebhookCreateParams',
    'WebhookDetails',
    'WebhookHeadersResponse',
    'WebhookHeadersUpdateParams',
    'WebhookListParams',
    'WebhookSecret',
    'WebhookUpdateParams',
]


class WebhookDetails(BaseModel):
    id: str
    created_at: datetime
    description: str
    metadata: dict[str, str]
    updated_at: datetime
    url: str
    disabled: bool | None = None
    filter_types: list[OpenEnum[WebhookEventType]] | None = None
    rate_limit: int | None = None


class WebhookCreateParams(BaseParams):
    url: str
    description: str | None = None
    disabled: bool | None = None
    filter_types: list[OpenEnum[WebhookEventType]] | None = None
    headers: dict[str, str] | None = None
    idempotency_key: str | None = None
    metadata: dict[str, str] | None = None
    rate_limit: int | None = None


class WebhookUpdateParams(BaseParams):
    description: str | None = None
    disabled: bool | None = None
    filter_types: list[OpenEnum[WebhookEventType]] | None = None
    metadata: dict[str, str] | None = None
    rate_limit: int | None = None
    url: str | None = None


class WebhookListParams(BaseParams):
    iterator: str | None = None
    limit: int | None = None


class WebhookSecret(BaseModel):
    secret: str


class WebhookHeadersResponse(BaseModel):
    """Custom headers sent with each delivery; ``sensitive`` names are masked."""

    headers: dict[str, str]
    sensitive: list[str]


class WebhookHeadersUpdateParams(BaseParams):
    headers: dict[str, str]
