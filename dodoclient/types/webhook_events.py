"""Payloads delivered to a merchant's webhook endpoint.

The ``data`` member of :class:`WebhookPayload` carries its own
``payload_type`` tag, which selects the model it is decoded into. Signature
verification is not performed here; the caller supplies it (see
:meth:`dodoclient.resources.webhooks.Webhooks.unwrap`).
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from dodoclient._serialization import BaseModel, OpenEnum
from dodoclient.types.disputes import GetDispute
from dodoclient.types.license_keys import LicenseKey
from dodoclient.types.payments import Payment
from dodoclient.types.refunds import Refund
from dodoclient.types.shared import Metadata
from dodoclient.types.subscriptions import Subscription

__all__ = [
    'CreditBalanceLowData',
    'CreditLedgerEntryData',
    'DisputeData',
    'LicenseKeyData',
    'PaymentData',
    'RefundData',
    'SubscriptionData',
    'WEBHOOK_HEADER_NAMES',
    'WebhookData',
    'WebhookEventType',
    'WebhookHeaders',
    'WebhookPayload',
]


class WebhookEventType(str, Enum):
    PAYMENT_SUCCEEDED = 'payment.succeeded'
    PAYMENT_FAILED = 'payment.failed'
    PAYMENT_PROCESSING = 'payment.processing'
    PAYMENT_CANCELLED = 'payment.cancelled'
    REFUND_SUCCEEDED = 'refund.succeeded'
    REFUND_FAILED = 'refund.failed'
    DISPUTE_OPENED = 'dispute.opened'
    DISPUTE_EXPIRED = 'dispute.expired'
    DISPUTE_ACCEPTED = 'dispute.accepted'
    DISPUTE_CANCELLED = 'dispute.cancelled'
    DISPUTE_CHALLENGED = 'dispute.challenged'
    DISPUTE_WON = 'dispute.won'
    DISPUTE_LOST = 'dispute.lost'
    SUBSCRIPTION_ACTIVE = 'subscription.active'
    SUBSCRIPTION_RENEWED = 'subscription.renewed'
    SUBSCRIPTION_ON_HOLD = 'subscription.on_hold'
    SUBSCRIPTION_CANCELLED = 'subscription.cancelled'
    SUBSCRIPTION_FAILED = 'subscription.failed'
    SUBSCRIPTION_EXPIRED = 'subscription.expired'
    SUBSCRIPTION_PLAN_CHANGED = 'subscription.plan_changed'
    SUBSCRIPTION_UPDATED = 'subscription.updated'
    LICENSE_KEY_CREATED = 'license_key.created'
    PAYOUT_NOT_INITIATED = 'payout.not_initiated'
    PAYOUT_ON_HOLD = 'payout.on_hold'
    PAYOUT_IN_PROGRESS = 'payout.in_progress'
    PAYOUT_FAILED = 'payout.failed'
    PAYOUT_SUCCESS = 'payout.success'
    CREDIT_ADDED = 'credit.added'
    CREDIT_DEDUCTED = 'credit.deducted'
    CREDIT_EXPIRED = 'credit.expired'
    CREDIT_ROLLED_OVER = 'credit.rolled_over'
    CREDIT_ROLLOVER_FORFEITED = 'credit.rollover_forfeited'
    CREDIT_OVERAGE_CHARGED = 'credit.overage_charged'
    CREDIT_MANUAL_ADJUSTMENT = 'credit.manual_adjustment'
    CREDIT_BALANCE_LOW = 'credit.balance_low'


class PaymentData(Payment):
    payload_type: Literal['Payment']


class SubscriptionData(Subscription):
    payload_type: Literal['Subscription']


class RefundData(Refund):
    payload_type: Literal['Refund']
    metadata: Metadata | None = None


class DisputeData(GetDispute):
    payload_type: Literal['Dispute']


class LicenseKeyData(LicenseKey):
    payload_type: Literal['LicenseKey']


class CreditLedgerEntryData(BaseModel):
    payload_type: Literal['CreditLedgerEntry']
    id: str
    amount: str
    balance_after: str
    balance_before: str
    business_id: str
    created_at: datetime
    credit_entitlement_id: str
    customer_id: str
    is_credit: bool
    overage_after: str
    overage_before: str
    transaction_type: str
    description: str | None = None
    grant_id: str | None = None
    reference_id: str | None = None
    reference_type: str | None = None


class CreditBalanceLowData(BaseModel):
    payload_type: Literal['CreditBalanceLow']
    available_balance: str
    credit_entitlement_id: str
    credit_entitlement_name: str
    customer_id: str
    subscription_credits_amount: str
    subscription_id: str
    threshold_amount: str
    threshold_percent: int


WebhookData = Annotated[
    Union[
        PaymentData,
        SubscriptionData,
        RefundData,
        DisputeData,
        LicenseKeyData,
        CreditLedgerEntryData,
        CreditBalanceLowData,
    ],
    Field(discriminator='payload_type'),
]


class WebhookPayload(BaseModel):
    business_id: str
    data: WebhookData
    timestamp: datetime
    type: OpenEnum[WebhookEventType]


class WebhookHeaders(BaseModel):
    """Delivery headers used for signature verification.

    The header names contain dashes, so the fields carry them as aliases.
    """

    webhook_id: str = Field(alias='webhook-id')
    webhook_signature: str = Field(alias='webhook-signature')
    webhook_timestamp: str = Field(alias='webhook-timestamp')


# Python field name -> header name
WEBHOOK_HEADER_NAMES = {
    name: field.alias for name, field in WebhookHeaders.model_fields.items()
}
