from enum import Enum

from dodoclient._serialization import BaseModel, BaseParams, OpenEnum

__all__ = [
    'Brand',
    'BrandCreateParams',
    'BrandListResponse',
    'BrandUpdateImagesResponse',
    'BrandUpdateParams',
    'BrandVerificationStatus',
]


class BrandVerificationStatus(str, Enum):
    SUCCESS = 'Success'
    FAIL = 'Fail'
    REVIEW = 'Review'
    HOLD = 'Hold'


class Brand(BaseModel):
    brand_id: str
    business_id: str
    enabled: bool
    statement_descriptor: str
    verification_enabled: bool
    verification_status: OpenEnum[BrandVerificationStatus]
    description: str | None = None
    image: str | None = None
    name: str | None = None
    reason_for_hold: str | None = None
    support_email: str | None = None
    url: str | None = None


class BrandCreateParams(BaseParams):
    description: str | None = None
    name: str | None = None
    statement_descriptor: str | None = None
    support_email: str | None = None
    url: str | None = None


class BrandUpdateParams(BaseParams):
    image_id: str | None = None
    name: str | None = None
    statement_descriptor: str | None = None
    support_email: str | None = None


class BrandListResponse(BaseModel):
    """All brands of the business; this listing is not paginated."""

    items: list[Brand]


class BrandUpdateImagesResponse(BaseModel):
    image_id: str
    url: str
