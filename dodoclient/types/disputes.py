from datetime import datetime

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum
from dodoclient.types.shared import CustomerLimitedDetails, DisputeStage, DisputeStatus

__all__ = ['Dispute', 'DisputeListParams', 'GetDispute']


class Dispute(BaseModel):
    amount: str
    business_id: str
    created_at: datetime
    currency: str
    dispute_id: str
    dispute_stage: OpenEnum[DisputeStage]
    dispute_status: OpenEnum[DisputeStatus]
    payment_id: str
    remarks: str | None = None


class GetDispute(Dispute):
    """A dispute with the customer it was raised by."""

    customer: CustomerLimitedDetails
    reason: str | None = None


class DisputeListParams(BaseParams):
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    customer_id: str | None = None
    dispute_stage: OpenEnum[DisputeStage] | None = None
    dispute_status: OpenEnum[DisputeStatus] | None = None
    page_number: int | None = None
    page_size: int | None = None
