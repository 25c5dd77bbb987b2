"""Hosted checkout sessions.

A session is created from a product cart and answered with a URL the
customer is sent to. ``preview`` prices the same cart without creating
anything.
"""

from datetime import datetime
from enum import Enum

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import (
    BillingAddress,
    CountryCode,
    Currency,
    CustomerRequest,
    IntentStatus,
    Metadata,
    PaymentMethodTypes,
    TaxCategory,
)
from dodoclient.types.subscriptions import AttachAddon, OnDemandSubscription

__all__ = [
    'CheckoutBreakup',
    'CheckoutCustomField',
    'CheckoutPreviewAddon',
    'CheckoutPreviewMeter',
    'CheckoutPreviewProduct',
    'CheckoutSessionCreateParams',
    'CheckoutSessionCustomization',
    'CheckoutSessionFeatureFlags',
    'CheckoutSessionPreviewParams',
    'CheckoutSessionPreviewResponse',
    'CheckoutSessionProductCartItem',
    'CheckoutSessionResponse',
    'CheckoutSessionStatus',
    'CheckoutSessionSubscriptionData',
    'CheckoutTheme',
    'CheckoutThemeConfig',
    'CheckoutThemeModeConfig',
]


class CheckoutTheme(str, Enum):
    DARK = 'dark'
    LIGHT = 'light'
    SYSTEM = 'system'


class CheckoutSessionProductCartItem(BaseModel):
    product_id: str
    quantity: int
    addons: list[AttachAddon] | None = None
    # Pay-what-you-want price, only for products that allow it.
    amount: int | None = None


class CheckoutThemeModeConfig(BaseModel):
    """Colour overrides for one theme mode; any CSS colour string."""

    bg_primary: str | None = None
    bg_secondary: str | None = None
    border_primary: str | None = None
    border_secondary: str | None = None
    button_primary: str | None = None
    button_primary_hover: str | None = None
    button_secondary: str | None = None
    button_secondary_hover: str | None = None
    button_text_primary: str | None = None
    button_text_secondary: str | None = None
    input_focus_border: str | None = None
    text_error: str | None = None
    text_placeholder: str | None = None
    text_primary: str | None = None
    text_secondary: str | None = None
    text_success: str | None = None


class CheckoutThemeConfig(BaseModel):
    dark: CheckoutThemeModeConfig | None = None
    light: CheckoutThemeModeConfig | None = None
    font_primary_url: str | None = None
    font_secondary_url: str | None = None
    font_size: str | None = None
    font_weight: str | None = None
    pay_button_text: str | None = None
    radius: str | None = None


class CheckoutSessionCustomization(BaseModel):
    force_language: str | None = None
    show_on_demand_tag: bool | None = None
    show_order_details: bool | None = None
    theme: OpenEnum[CheckoutTheme] | None = None
    theme_config: CheckoutThemeConfig | None = None


class CheckoutSessionFeatureFlags(BaseModel):
    allow_currency_selection: bool | None = None
    allow_customer_editing_city: bool | None = None
    allow_customer_editing_country: bool | None = None
    allow_customer_editing_email: bool | None = None
    allow_customer_editing_name: bool | None = None
    allow_customer_editing_state: bool | None = None
    allow_customer_editing_street: bool | None = None
    allow_customer_editing_zipcode: bool | None = None
    allow_discount_code: bool | None = None
    allow_phone_number_collection: bool | None = None
    allow_tax_id: bool | None = None
    always_create_new_customer: bool | None = None


class CheckoutSessionSubscriptionData(BaseModel):
    on_demand: OnDemandSubscription | None = None
    trial_period_days: int | None = None


class CheckoutCustomField(BaseModel):
    field_type: str
    key: str
    label: str
    options: list[str] | None = None
    placeholder: str | None = None
    required: bool | None = None


class CheckoutSessionCreateParams(BaseParams):
    product_cart: list[CheckoutSessionProductCartItem]
    allowed_payment_method_types: list[OpenEnum[PaymentMethodTypes]] | None = None
    billing_address: BillingAddress | None = None
    billing_currency: OpenEnum[Currency] | None = None
    confirm: bool | None = None
    custom_fields: list[CheckoutCustomField] | None = None
    customer: CustomerRequest | None = None
    customization: CheckoutSessionCustomization | None = None
    discount_code: str | None = None
    feature_flags: CheckoutSessionFeatureFlags | None = None
    force_3ds: bool | None = None
    metadata: Metadata | None = None
    minimal_address: bool | None = None
    payment_method_id: str | None = None
    product_collection_id: str | None = None
    return_url: str | None = None
    short_link: bool | None = None
    show_saved_payment_methods: bool | None = None
    subscription_data: CheckoutSessionSubscriptionData | None = None
    tax_id: str | None = None


class CheckoutSessionPreviewParams(CheckoutSessionCreateParams):
    pass


class CheckoutSessionResponse(BaseModel):
    checkout_url: str
    session_id: str


class CheckoutSessionStatus(BaseModel):
    id: str
    created_at: datetime
    customer_email: str | None = None
    customer_name: str | None = None
    payment_id: str | None = None
    payment_status: OpenEnum[IntentStatus] | None = None


class CheckoutBreakup(BaseModel):
    discount: int
    subtotal: int
    total_amount: int
    tax: int | None = None


class CheckoutPreviewMeter(BaseModel):
    measurement_unit: str
    name: str
    price_per_unit: str
    description: str | None = None
    free_threshold: int | None = None


class CheckoutPreviewAddon(BaseModel):
    addon_id: str
    currency: OpenEnum[Currency]
    discounted_price: int
    name: str
    og_currency: OpenEnum[Currency]
    og_price: int
    quantity: int
    tax_category: OpenEnum[TaxCategory]
    tax_inclusive: bool
    tax_rate: int
    description: str | None = None
    discount_amount: int | None = None
    tax: int | None = None


class CheckoutPreviewProduct(BaseModel):
    """One priced cart line; ``og_*`` fields hold the price before conversion."""

    currency: OpenEnum[Currency]
    discounted_price: int
    is_subscription: bool
    is_usage_based: bool
    meters: list[CheckoutPreviewMeter]
    og_currency: OpenEnum[Currency]
    og_price: int
    product_id: str
    quantity: int
    tax_category: OpenEnum[TaxCategory]
    tax_inclusive: bool
    tax_rate: int
    addons: list[CheckoutPreviewAddon] | None = None
    description: str | None = None
    discount_amount: int | None = None
    discount_cycle: int | None = None
    name: str | None = None
    tax: int | None = None


class CheckoutSessionPreviewResponse(BaseModel):
    billing_country: OpenEnum[CountryCode]
    currency: OpenEnum[Currency]
    current_breakup: CheckoutBreakup
    product_cart: list[CheckoutPreviewProduct]
    total_price: int
    recurring_breakup: CheckoutBreakup | None = None
    tax_id_err_msg: str | None = None
    total_tax: int | None = None
