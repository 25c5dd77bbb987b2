from datetime import datetime
from enum import Enum

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum

__all__ = [
    'Discount',
    'DiscountCreateParams',
    'DiscountListParams',
    'DiscountType',
    'DiscountUpdateParams',
]


class DiscountType(str, Enum):
    PERCENTAGE = 'percentage'


class Discount(BaseModel):
    amount: int
    business_id: str
    code: str
    created_at: datetime
    discount_id: str
    restricted_to: list[str]
    times_used: int
    type: OpenEnum[DiscountType]
    expires_at: datetime | None = None
    name: str | None = None
    subscription_cycles: int | None = None
    usage_limit: int | None = None


class DiscountCreateParams(BaseParams):
    """Create a discount.

    ``amount`` is in basis points for percentage discounts (540 is 5.4%).
    When ``code`` is omitted or empty the server generates a random 16
    character uppercase code.
    """

    amount: int
    type: OpenEnum[DiscountType]
    code: str | None = None
    expires_at: datetime | None = None
    name: str | None = None
    restricted_to: list[str] | None = None
    subscription_cycles: int | None = None
    usage_limit: int | None = None


class DiscountUpdateParams(BaseParams):
    amount: int | None = None
    code: str | None = None
    expires_at: datetime | None = None
    name: str | None = None
    restricted_to: list[str] | None = None
    subscription_cycles: int | None = None
    type: OpenEnum[DiscountType] | None = None
    usage_limit: int | None = None


class DiscountListParams(BaseParams):
    page_number: int | None = None
    page_size: int | None = None
