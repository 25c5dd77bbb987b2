from datetime import datetime

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import LicenseKeyStatus

__all__ = [
    'LicenseKey',
    'LicenseKeyInstance',
    'LicenseKeyInstanceListParams',
    'LicenseKeyInstanceUpdateParams',
    'LicenseKeyListParams',
    'LicenseKeyUpdateParams',
]


class LicenseKey(BaseModel):
    id: str
    business_id: str
    created_at: datetime
    customer_id: str
    instances_count: int
    key: str
    payment_id: str
    product_id: str
    status: OpenEnum[LicenseKeyStatus]
    activations_limit: int | None = None
    expires_at: datetime | None = None
    subscription_id: str | None = None


class LicenseKeyListParams(BaseParams):
    customer_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None
    product_id: str | None = None
    status: OpenEnum[LicenseKeyStatus] | None = None


class LicenseKeyUpdateParams(BaseParams):
    """Sending ``None`` for a field clears it, e.g. removes the expiry."""

    activations_limit: int | None = None
    disabled: bool | None = None
    expires_at: datetime | None = None


class LicenseKeyInstance(BaseModel):
    id: str
    business_id: str
    created_at: datetime
    license_key_id: str
    name: str


class LicenseKeyInstanceListParams(BaseParams):
    license_key_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None


class LicenseKeyInstanceUpdateParams(BaseParams):
    name: str
