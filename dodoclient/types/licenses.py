"""License activation, deactivation and validation.

These calls are made from customer-facing software and authenticate with the
license key itself rather than the API key.
"""

from datetime import datetime

from dodoclient._serialization import BaseModel, BaseParams
from dodoclient.types.shared import CustomerLimitedDetails

__all__ = [
    'LicenseActivateParams',
    'LicenseActivateResponse',
    'LicenseDeactivateParams',
    'LicenseProduct',
    'LicenseValidateParams',
    'LicenseValidateResponse',
]


class LicenseActivateParams(BaseParams):
    license_key: str
    name: str


class LicenseProduct(BaseModel):
    product_id: str
    name: str | None = None


class LicenseActivateResponse(BaseModel):
    id: str
    business_id: str
    created_at: datetime
    customer: CustomerLimitedDetails
    license_key_id: str
    name: str
    product: LicenseProduct


class LicenseDeactivateParams(BaseParams):
    license_key: str
    license_key_instance_id: str


class LicenseValidateParams(BaseParams):
    license_key: str
    license_key_instance_id: str | None = None


class LicenseValidateResponse(BaseModel):
    valid: bool
