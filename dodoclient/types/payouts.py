from datetime import datetime
from enum import Enum

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import Currency

__all__ = ['Payout', 'PayoutListParams', 'PayoutStatus']


class PayoutStatus(str, Enum):
    NOT_INITIATED = 'not_initiated'
    IN_PROGRESS = 'in_progress'
    ON_HOLD = 'on_hold'
    FAILED = 'failed'
    SUCCESS = 'success'


class Payout(BaseModel):
    amount: int
    business_id: str
    chargebacks: int
    created_at: datetime
    currency: OpenEnum[Currency]
    fee: int
    payment_method: str
    payout_id: str
    refunds: int
    status: OpenEnum[PayoutStatus]
    tax: int
    updated_at: datetime
    name: str | None = None
    payout_document_url: str | None = None
    remarks: str | None = None


class PayoutListParams(BaseParams):
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    page_number: int | None = None
    page_size: int | None = None
