"""Customers, their portal sessions, saved payment methods and wallets."""

from datetime import datetime
from enum import Enum

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import Currency, PaymentMethodTypes

__all__ = [
    'Customer',
    'CustomerCreateParams',
    'CustomerGetPaymentMethodsResponse',
    'CustomerListParams',
    'CustomerPaymentMethod',
    'CustomerPaymentMethodCard',
    'CustomerPortalCreateParams',
    'CustomerPortalSession',
    'CustomerUpdateParams',
    'CustomerWallet',
    'CustomerWalletTransaction',
    'LedgerEntryCreateParams',
    'LedgerEntryListParams',
    'LedgerEntryType',
    'WalletEventType',
    'WalletListResponse',
]


class Customer(BaseModel):
    business_id: str
    created_at: datetime
    customer_id: str
    email: str
    name: str
    phone_number: str | None = None


class CustomerCreateParams(BaseParams):
    email: str
    name: str
    phone_number: str | None = None


class CustomerUpdateParams(BaseParams):
    name: str | None = None
    phone_number: str | None = None


class CustomerListParams(BaseParams):
    email: str | None = None
    page_number: int | None = None
    page_size: int | None = None


class CustomerPortalCreateParams(BaseParams):
    send_email: bool | None = None


class CustomerPortalSession(BaseModel):
    link: str


class CustomerPaymentMethodCard(BaseModel):
    card_holder_name: str | None = None
    card_issuing_country: str | None = None
    card_network: str | None = None
    card_type: str | None = None
    expiry_month: str | None = None
    expiry_year: str | None = None
    last4_digits: str | None = None


class CustomerPaymentMethod(BaseModel):
    payment_method: str
    payment_method_id: str
    card: CustomerPaymentMethodCard | None = None
    last_used_at: datetime | None = None
    payment_method_type: OpenEnum[PaymentMethodTypes] | None = None
    recurring_enabled: bool | None = None


class CustomerGetPaymentMethodsResponse(BaseModel):
    items: list[CustomerPaymentMethod]


class CustomerWallet(BaseModel):
    balance: int
    created_at: datetime
    currency: OpenEnum[Currency]
    customer_id: str
    updated_at: datetime


class WalletListResponse(BaseModel):
    items: list[CustomerWallet]
    total_balance_usd: int


class WalletEventType(str, Enum):
    PAYMENT = 'payment'
    PAYMENT_REVERSAL = 'payment_reversal'
    REFUND = 'refund'
    REFUND_REVERSAL = 'refund_reversal'
    DISPUTE = 'dispute'
    DISPUTE_REVERSAL = 'dispute_reversal'
    MERCHANT_ADJUSTMENT = 'merchant_adjustment'


class LedgerEntryType(str, Enum):
    CREDIT = 'credit'
    DEBIT = 'debit'


class CustomerWalletTransaction(BaseModel):
    id: str
    after_balance: int
    amount: int
    before_balance: int
    business_id: str
    created_at: datetime
    currency: OpenEnum[Currency]
    customer_id: str
    event_type: OpenEnum[WalletEventType]
    is_credit: bool
    reason: str | None = None
    reference_object_id: str | None = None


class LedgerEntryCreateParams(BaseParams):
    amount: int
    currency: OpenEnum[Currency]
    entry_type: OpenEnum[LedgerEntryType]
    idempotency_key: str | None = None
    reason: str | None = None


class LedgerEntryListParams(BaseParams):
    currency: OpenEnum[Currency] | None = None
    page_number: int | None = None
    page_size: int | None = None
