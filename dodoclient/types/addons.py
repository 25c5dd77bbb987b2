"""Add-ons: extra items a subscription can carry next to its product."""

from datetime import datetime

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import Currency, TaxCategory

__all__ = [
    'Addon',
    'AddonCreateParams',
    'AddonListParams',
    'AddonUpdateImagesResponse',
    'AddonUpdateParams',
]


class Addon(BaseModel):
    id: str
    business_id: str
    created_at: datetime
    currency: OpenEnum[Currency]
    name: str
    price: int
    tax_category: OpenEnum[TaxCategory]
    updated_at: datetime
    description: str | None = None
    image: str | None = None


class AddonCreateParams(BaseParams):
    currency: OpenEnum[Currency]
    name: str
    price: int
    tax_category: OpenEnum[TaxCategory]
    description: str | None = None


class AddonUpdateParams(BaseParams):
    currency: OpenEnum[Currency] | None = None
    description: str | None = None
    image_id: str | None = None
    name: str | None = None
    price: int | None = None
    tax_category: OpenEnum[TaxCategory] | None = None


class AddonListParams(BaseParams):
    page_number: int | None = None
    page_size: int | None = None


class AddonUpdateImagesResponse(BaseModel):
    image_id: str
    url: str
