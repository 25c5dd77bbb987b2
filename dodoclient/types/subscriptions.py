"""Subscriptions and the parameters of their lifecycle calls."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, RootModel

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import (
    BillingAddress,
    Currency,
    CustomerLimitedDetails,
    CustomerRequest,
    Metadata,
    OneTimeProductCartItem,
    PaymentMethodTypes,
    SubscriptionStatus,
    TaxCategory,
    TimeInterval,
)

__all__ = [
    'AddonCartResponseItem',
    'AttachAddon',
    'ExistingPaymentMethod',
    'ImmediateCharge',
    'ImmediateChargeSummary',
    'NewPaymentMethod',
    'OnDemandSubscription',
    'PlanChangeAddonLineItem',
    'PlanChangeLineItem',
    'PlanChangeMeterLineItem',
    'PlanChangeSubscriptionLineItem',
    'ProrationBillingMode',
    'Subscription',
    'SubscriptionChangePlanParams',
    'SubscriptionChargeParams',
    'SubscriptionChargeResponse',
    'SubscriptionCreateParams',
    'SubscriptionListParams',
    'SubscriptionNewResponse',
    'SubscriptionPreviewChangePlanParams',
    'SubscriptionPreviewChangePlanResponse',
    'SubscriptionRetrieveUsageHistoryParams',
    'SubscriptionUpdateParams',
    'SubscriptionUpdatePaymentMethodParams',
    'SubscriptionUpdatePaymentMethodResponse',
    'UsageHistoryMeter',
    'UsageHistoryPeriod',
]


class AddonCartResponseItem(BaseModel):
    addon_id: str
    quantity: int


class AttachAddon(BaseModel):
    addon_id: str
    quantity: int


class ProrationBillingMode(str, Enum):
    PRORATED_IMMEDIATELY = 'prorated_immediately'
    FULL_IMMEDIATELY = 'full_immediately'
    DIFFERENCE_IMMEDIATELY = 'difference_immediately'


class Subscription(BaseModel):
    addons: list[AddonCartResponseItem] = []
    billing: BillingAddress
    cancel_at_next_billing_date: bool
    created_at: datetime
    currency: OpenEnum[Currency]
    customer: CustomerLimitedDetails
    metadata: Metadata
    next_billing_date: datetime
    on_demand: bool
    payment_frequency_count: int
    payment_frequency_interval: OpenEnum[TimeInterval]
    previous_billing_date: datetime
    product_id: str
    quantity: int
    recurring_pre_tax_amount: int
    status: OpenEnum[SubscriptionStatus]
    subscription_id: str
    subscription_period_count: int
    subscription_period_interval: OpenEnum[TimeInterval]
    tax_inclusive: bool
    trial_period_days: int
    cancelled_at: datetime | None = None
    discount_cycles_remaining: int | None = None
    discount_id: str | None = None
    expires_at: datetime | None = None
    payment_method_id: str | None = None
    tax_id: str | None = None


class OnDemandSubscription(BaseModel):
    mandate_only: bool
    adaptive_currency_fees_inclusive: bool | None = None
    product_currency: OpenEnum[Currency] | None = None
    product_description: str | None = None
    product_price: int | None = None


class SubscriptionCreateParams(BaseParams):
    billing: BillingAddress
    customer: CustomerRequest
    product_id: str
    quantity: int
    addons: list[AttachAddon] | None = None
    allowed_payment_method_types: list[OpenEnum[PaymentMethodTypes]] | None = None
    billing_currency: OpenEnum[Currency] | None = None
    discount_code: str | None = None
    metadata: Metadata | None = None
    on_demand: OnDemandSubscription | None = None
    payment_link: bool | None = None
    return_url: str | None = None
    show_saved_payment_methods: bool | None = None
    tax_id: str | None = None
    trial_period_days: int | None = None


class SubscriptionNewResponse(BaseModel):
    addons: list[AddonCartResponseItem] = []
    customer: CustomerLimitedDetails
    metadata: Metadata
    payment_id: str
    recurring_pre_tax_amount: int
    subscription_id: str
    client_secret: str | None = None
    discount_id: str | None = None
    expires_on: datetime | None = None
    one_time_product_cart: list[OneTimeProductCartItem] | None = None
    payment_link: str | None = None


class SubscriptionUpdateParams(BaseParams):
    billing: BillingAddress | None = None
    cancel_at_next_billing_date: bool | None = None
    disable_on_demand: dict[str, datetime] | None = None
    metadata: Metadata | None = None
    next_billing_date: datetime | None = None
    status: OpenEnum[SubscriptionStatus] | None = None
    tax_id: str | None = None


class SubscriptionListParams(BaseParams):
    brand_id: str | None = None
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    customer_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None
    status: OpenEnum[SubscriptionStatus] | None = None


class SubscriptionChangePlanParams(BaseParams):
    product_id: str
    proration_billing_mode: OpenEnum[ProrationBillingMode]
    quantity: int
    addons: list[AttachAddon] | None = None


class SubscriptionPreviewChangePlanParams(SubscriptionChangePlanParams):
    """Same body as a plan change; nothing is charged or switched."""


class PlanChangeSubscriptionLineItem(BaseModel):
    type: Literal['subscription']
    id: str
    currency: OpenEnum[Currency]
    product_id: str
    proration_factor: float
    quantity: int
    tax_inclusive: bool
    unit_price: int
    description: str | None = None
    name: str | None = None
    tax: int | None = None
    tax_rate: float | None = None


class PlanChangeAddonLineItem(BaseModel):
    type: Literal['addon']
    id: str
    currency: OpenEnum[Currency]
    name: str
    proration_factor: float
    quantity: int
    tax_category: OpenEnum[TaxCategory]
    tax_inclusive: bool
    tax_rate: float
    unit_price: int
    description: str | None = None
    tax: int | None = None


class PlanChangeMeterLineItem(BaseModel):
    type: Literal['meter']
    id: str
    chargeable_units: str
    currency: OpenEnum[Currency]
    free_threshold: int
    name: str
    price_per_unit: str
    subtotal: int
    tax_inclusive: bool
    tax_rate: float
    units_consumed: str
    description: str | None = None
    tax: int | None = None


PlanChangeLineItem = Annotated[
    Union[PlanChangeSubscriptionLineItem, PlanChangeAddonLineItem, PlanChangeMeterLineItem],
    Field(discriminator='type'),
]


class ImmediateChargeSummary(BaseModel):
    currency: OpenEnum[Currency]
    customer_credits: int
    settlement_amount: int
    settlement_currency: OpenEnum[Currency]
    total_amount: int
    settlement_tax: int | None = None
    tax: int | None = None


class ImmediateCharge(BaseModel):
    line_items: list[PlanChangeLineItem]
    summary: ImmediateChargeSummary


class SubscriptionPreviewChangePlanResponse(BaseModel):
    """What a plan change would charge now, and the subscription it would produce."""

    immediate_charge: ImmediateCharge
    new_plan: Subscription


class SubscriptionChargeParams(BaseParams):
    product_price: int
    adaptive_currency_fees_inclusive: bool | None = None
    metadata: Metadata | None = None
    product_currency: OpenEnum[Currency] | None = None
    product_description: str | None = None


class SubscriptionChargeResponse(BaseModel):
    payment_id: str


class SubscriptionRetrieveUsageHistoryParams(BaseParams):
    end_date: datetime | None = None
    meter_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None
    start_date: datetime | None = None


class UsageHistoryMeter(BaseModel):
    id: str
    chargeable_units: str
    consumed_units: str
    currency: OpenEnum[Currency]
    free_threshold: int
    name: str
    price_per_unit: str
    total_price: int


class UsageHistoryPeriod(BaseModel):
    end_date: datetime
    meters: list[UsageHistoryMeter]
    start_date: datetime


class NewPaymentMethod(BaseParams):
    type: Literal['new']
    return_url: str | None = None


class ExistingPaymentMethod(BaseParams):
    type: Literal['existing']
    payment_method_id: str


class SubscriptionUpdatePaymentMethodParams(
    RootModel[
        Annotated[
            Union[NewPaymentMethod, ExistingPaymentMethod], Field(discriminator='type')
        ]
    ]
):
    """Either a fresh payment method or a saved one, told apart by ``type``."""


class SubscriptionUpdatePaymentMethodResponse(BaseModel):
    payment_id: str | None = None
    client_secret: str | None = None
    expires_on: datetime | None = None
    payment_link: str | None = None
