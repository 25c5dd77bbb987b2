from datetime import datetime

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import Currency, CustomerLimitedDetails, RefundStatus

__all__ = ['Refund', 'RefundCreateParams', 'RefundItem', 'RefundListParams']


class Refund(BaseModel):
    business_id: str
    created_at: datetime
    customer: CustomerLimitedDetails
    is_partial: bool
    payment_id: str
    refund_id: str
    status: OpenEnum[RefundStatus]
    amount: int | None = None
    currency: OpenEnum[Currency] | None = None
    reason: str | None = None


class RefundItem(BaseModel):
    item_id: str
    amount: int | None = None
    tax_inclusive: bool | None = None


class RefundCreateParams(BaseParams):
    payment_id: str
    items: list[RefundItem] | None = None
    reason: str | None = None


class RefundListParams(BaseParams):
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    customer_id: str | None = None
    page_number: int | None = None
    page_size: int | None = None
    status: OpenEnum[RefundStatus] | None = None
