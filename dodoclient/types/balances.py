from datetime import datetime
from enum import Enum

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import Currency

__all__ = ['BalanceEventType', 'BalanceLedgerEntry', 'BalanceRetrieveLedgerParams']


class BalanceEventType(str, Enum):
    PAYMENT = 'payment'
    REFUND = 'refund'
    REFUND_REVERSAL = 'refund_reversal'
    DISPUTE = 'dispute'
    DISPUTE_REVERSAL = 'dispute_reversal'
    TAX = 'tax'
    TAX_REVERSAL = 'tax_reversal'
    PAYMENT_FEES = 'payment_fees'
    REFUND_FEES = 'refund_fees'
    REFUND_FEES_REVERSAL = 'refund_fees_reversal'
    DISPUTE_FEES = 'dispute_fees'
    PAYOUT = 'payout'
    PAYOUT_FEES = 'payout_fees'
    PAYOUT_REVERSAL = 'payout_reversal'
    PAYOUT_FEES_REVERSAL = 'payout_fees_reversal'
    DODO_CREDITS = 'dodo_credits'
    ADJUSTMENT = 'adjustment'
    CURRENCY_CONVERSION = 'currency_conversion'


class BalanceLedgerEntry(BaseModel):
    id: str
    amount: int
    business_id: str
    created_at: datetime
    currency: OpenEnum[Currency]
    event_type: OpenEnum[BalanceEventType]
    is_credit: bool
    usd_equivalent_amount: int
    after_balance: int | None = None
    before_balance: int | None = None
    description: str | None = None
    reference_object_id: str | None = None


class BalanceRetrieveLedgerParams(BaseParams):
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    currency: OpenEnum[Currency] | None = None
    event_type: OpenEnum[BalanceEventType] | None = None
    limit: int | None = None
    page_number: int | None = None
    page_size: int | None = None
    reference_object_id: str | None = None
