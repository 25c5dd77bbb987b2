"""Products and their three price shapes.

``price`` is a union told apart by its ``type`` key: ``one_time_price``,
``recurring_price`` or ``usage_based_price``.
"""

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import Field

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import Currency, Metadata, TaxCategory, TimeInterval

__all__ = [
    'AddMeterToPrice',
    'DigitalProductDelivery',
    'DigitalProductDeliveryFile',
    'LicenseKeyDuration',
    'OneTimePrice',
    'Price',
    'Product',
    'ProductCreateParams',
    'ProductImageUpdateParams',
    'ProductImageUpdateResponse',
    'ProductListParams',
    'ProductListResponse',
    'ProductUpdateFilesParams',
    'ProductUpdateFilesResponse',
    'ProductUpdateParams',
    'RecurringPrice',
    'ShortLink',
    'ShortLinkCreateParams',
    'ShortLinkCreateResponse',
    'ShortLinkListParams',
    'UsageBasedPrice',
]


class AddMeterToPrice(BaseModel):
    meter_id: str
    price_per_unit: str
    description: str | None = None
    free_threshold: int | None = None
    measurement_unit: str | None = None
    name: str | None = None


class _TaggedPrice(BaseModel):
    def model_post_init(self, __context: Any) -> None:
        # The tag is part of the payload even when left at its default.
        self.model_fields_set.add('type')


class OneTimePrice(_TaggedPrice):
    type: Literal['one_time_price'] = 'one_time_price'
    currency: OpenEnum[Currency]
    discount: int
    price: int
    purchasing_power_parity: bool
    pay_what_you_want: bool | None = None
    suggested_price: int | None = None
    tax_inclusive: bool | None = None


class RecurringPrice(_TaggedPrice):
    type: Literal['recurring_price'] = 'recurring_price'
    currency: OpenEnum[Currency]
    discount: int
    payment_frequency_count: int
    payment_frequency_interval: OpenEnum[TimeInterval]
    price: int
    purchasing_power_parity: bool
    subscription_period_count: int
    subscription_period_interval: OpenEnum[TimeInterval]
    tax_inclusive: bool | None = None
    trial_period_days: int | None = None


class UsageBasedPrice(_TaggedPrice):
    type: Literal['usage_based_price'] = 'usage_based_price'
    currency: OpenEnum[Currency]
    discount: int
    fixed_price: int
    payment_frequency_count: int
    payment_frequency_interval: OpenEnum[TimeInterval]
    purchasing_power_parity: bool
    subscription_period_count: int
    subscription_period_interval: OpenEnum[TimeInterval]
    meters: list[AddMeterToPrice] | None = None
    tax_inclusive: bool | None = None


Price = Annotated[
    Union[OneTimePrice, RecurringPrice, UsageBasedPrice], Field(discriminator='type')
]


class LicenseKeyDuration(BaseModel):
    count: int
    interval: OpenEnum[TimeInterval]


class DigitalProductDeliveryFile(BaseModel):
    file_id: str
    file_name: str
    url: str


class DigitalProductDelivery(BaseModel):
    external_url: str | None = None
    files: list[DigitalProductDeliveryFile] | None = None
    instructions: str | None = None


class Product(BaseModel):
    brand_id: str
    business_id: str
    created_at: datetime
    is_recurring: bool
    license_key_enabled: bool
    metadata: Metadata
    price: Price
    product_id: str
    tax_category: OpenEnum[TaxCategory]
    updated_at: datetime
    addons: list[str] | None = None
    description: str | None = None
    digital_product_delivery: DigitalProductDelivery | None = None
    image: str | None = None
    license_key_activation_message: str | None = None
    license_key_activations_limit: int | None = None
    license_key_duration: LicenseKeyDuration | None = None
    name: str | None = None


class ProductListResponse(BaseModel):
    """Summary row returned by the products listing."""

    business_id: str
    created_at: datetime
    is_recurring: bool
    metadata: Metadata
    product_id: str
    tax_category: OpenEnum[TaxCategory]
    updated_at: datetime
    currency: OpenEnum[Currency] | None = None
    description: str | None = None
    image: str | None = None
    name: str | None = None
    price: int | None = None
    price_detail: Price | None = None
    tax_inclusive: bool | None = None


class ProductCreateParams(BaseParams):
    name: str
    price: Price
    tax_category: OpenEnum[TaxCategory]
    addons: list[str] | None = None
    brand_id: str | None = None
    description: str | None = None
    digital_product_delivery: DigitalProductDelivery | None = None
    license_key_activation_message: str | None = None
    license_key_activations_limit: int | None = None
    license_key_duration: LicenseKeyDuration | None = None
    license_key_enabled: bool | None = None
    metadata: Metadata | None = None


class ProductUpdateParams(BaseParams):
    addons: list[str] | None = None
    brand_id: str | None = None
    description: str | None = None
    digital_product_delivery: DigitalProductDelivery | None = None
    image_id: str | None = None
    license_key_activation_message: str | None = None
    license_key_activations_limit: int | None = None
    license_key_duration: LicenseKeyDuration | None = None
    license_key_enabled: bool | None = None
    metadata: Metadata | None = None
    name: str | None = None
    price: Price | None = None
    tax_category: OpenEnum[TaxCategory] | None = None


class ProductListParams(BaseParams):
    archived: bool | None = None
    brand_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None
    recurring: bool | None = None


class ProductUpdateFilesParams(BaseParams):
    file_name: str


class ProductUpdateFilesResponse(BaseModel):
    file_id: str
    url: str


class ProductImageUpdateParams(BaseParams):
    force_update: bool | None = None


class ProductImageUpdateResponse(BaseModel):
    """Pre-signed URL to PUT the image bytes to."""

    url: str
    image_id: str | None = None


class ShortLinkCreateParams(BaseParams):
    slug: str
    static_checkout_params: dict[str, str] | None = None


class ShortLinkCreateResponse(BaseModel):
    full_url: str
    short_url: str


class ShortLinkListParams(BaseParams):
    page_number: int | None = None
    page_size: int | None = None
    product_id: str | None = None


class ShortLink(BaseModel):
    created_at: datetime
    full_url: str
    product_id: str
    short_url: str
