"""Payment resources and request parameters."""

from datetime import datetime

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.disputes import Dispute
from dodoclient.types.refunds import Refund
from dodoclient.types.shared import (
    BillingAddress,
    CountryCode,
    Currency,
    CustomerLimitedDetails,
    CustomerRequest,
    IntentStatus,
    Metadata,
    OneTimeProductCartItem,
    PaymentMethodTypes,
)

__all__ = [
    'CustomFieldResponse',
    'Payment',
    'PaymentCreateParams',
    'PaymentGetLineItemsResponse',
    'PaymentLineItem',
    'PaymentListParams',
    'PaymentListResponse',
    'PaymentNewResponse',
    'PaymentProductCart',
]


class PaymentProductCart(BaseModel):
    product_id: str
    quantity: int


class CustomFieldResponse(BaseModel):
    key: str
    value: str


class Payment(BaseModel):
    billing: BillingAddress
    brand_id: str
    business_id: str
    created_at: datetime
    currency: OpenEnum[Currency]
    customer: CustomerLimitedDetails
    digital_products_delivered: bool
    disputes: list[Dispute]
    metadata: Metadata
    payment_id: str
    refunds: list[Refund]
    settlement_amount: int
    settlement_currency: OpenEnum[Currency]
    total_amount: int
    card_issuing_country: OpenEnum[CountryCode] | None = None
    card_last_four: str | None = None
    card_network: str | None = None
    card_type: str | None = None
    checkout_session_id: str | None = None
    custom_field_responses: list[CustomFieldResponse] | None = None
    discount_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    payment_link: str | None = None
    payment_method: str | None = None
    payment_method_type: str | None = None
    product_cart: list[PaymentProductCart] | None = None
    settlement_tax: int | None = None
    status: OpenEnum[IntentStatus] | None = None
    subscription_id: str | None = None
    tax: int | None = None
    updated_at: datetime | None = None


class PaymentListResponse(BaseModel):
    """Summary row returned by the payments listing."""

    brand_id: str
    created_at: datetime
    currency: OpenEnum[Currency]
    customer: CustomerLimitedDetails
    digital_products_delivered: bool
    metadata: Metadata
    payment_id: str
    total_amount: int
    payment_method: str | None = None
    payment_method_type: str | None = None
    status: OpenEnum[IntentStatus] | None = None
    subscription_id: str | None = None


class PaymentNewResponse(BaseModel):
    client_secret: str
    customer: CustomerLimitedDetails
    metadata: Metadata
    payment_id: str
    total_amount: int
    discount_id: str | None = None
    expires_on: datetime | None = None
    payment_link: str | None = None
    product_cart: list[OneTimeProductCartItem] | None = None


class PaymentLineItem(BaseModel):
    amount: int
    items_id: str
    refundable_amount: int
    tax: int
    description: str | None = None
    name: str | None = None


class PaymentGetLineItemsResponse(BaseModel):
    currency: OpenEnum[Currency]
    items: list[PaymentLineItem]


class PaymentCreateParams(BaseParams):
    billing: BillingAddress
    customer: CustomerRequest
    product_cart: list[OneTimeProductCartItem]
    allowed_payment_method_types: list[OpenEnum[PaymentMethodTypes]] | None = None
    billing_currency: OpenEnum[Currency] | None = None
    discount_code: str | None = None
    force_3ds: bool | None = None
    metadata: Metadata | None = None
    payment_link: bool | None = None
    return_url: str | None = None
    show_saved_payment_methods: bool | None = None
    tax_id: str | None = None


class PaymentListParams(BaseParams):
    brand_id: str | None = None
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    customer_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None
    product_id: str | None = None
    status: OpenEnum[IntentStatus] | None = None
    subscription_id: str | None = None
