"""Enums and records used across several resource groups."""

from enum import Enum
from typing import Annotated, Union

from dodoclient._serialization import BaseModel, FirstMatch, OpenEnum

__all__ = [
    'AttachExistingCustomer',
    'BillingAddress',
    'CountryCode',
    'Currency',
    'CustomerLimitedDetails',
    'CustomerRequest',
    'DisputeStage',
    'DisputeStatus',
    'IntentStatus',
    'LicenseKeyStatus',
    'Metadata',
    'NewCustomer',
    'OneTimeProductCartItem',
    'PaymentMethodTypes',
    'RefundStatus',
    'SubscriptionStatus',
    'TaxCategory',
    'TimeInterval',
]

Metadata = dict[str, str]


class Currency(str, Enum):
    AED = 'AED'
    ARS = 'ARS'
    AUD = 'AUD'
    BDT = 'BDT'
    BRL = 'BRL'
    CAD = 'CAD'
    CHF = 'CHF'
    CLP = 'CLP'
    CNY = 'CNY'
    COP = 'COP'
    CZK = 'CZK'
    DKK = 'DKK'
    EGP = 'EGP'
    EUR = 'EUR'
    GBP = 'GBP'
    HKD = 'HKD'
    HUF = 'HUF'
    IDR = 'IDR'
    ILS = 'ILS'
    INR = 'INR'
    JPY = 'JPY'
    KES = 'KES'
    KRW = 'KRW'
    MXN = 'MXN'
    MYR = 'MYR'
    NGN = 'NGN'
    NOK = 'NOK'
    NZD = 'NZD'
    PHP = 'PHP'
    PKR = 'PKR'
    PLN = 'PLN'
    RON = 'RON'
    SAR = 'SAR'
    SEK = 'SEK'
    SGD = 'SGD'
    THB = 'THB'
    TRY = 'TRY'
    TWD = 'TWD'
    USD = 'USD'
    VND = 'VND'
    ZAR = 'ZAR'


class CountryCode(str, Enum):
    AE = 'AE'
    AF = 'AF'
    AR = 'AR'
    AT = 'AT'
    AU = 'AU'
    BD = 'BD'
    BE = 'BE'
    BR = 'BR'
    CA = 'CA'
    CH = 'CH'
    CL = 'CL'
    CN = 'CN'
    CO = 'CO'
    CZ = 'CZ'
    DE = 'DE'
    DK = 'DK'
    EG = 'EG'
    ES = 'ES'
    FI = 'FI'
    FR = 'FR'
    GB = 'GB'
    GR = 'GR'
    HK = 'HK'
    HU = 'HU'
    ID = 'ID'
    IE = 'IE'
    IL = 'IL'
    IN = 'IN'
    IT = 'IT'
    JP = 'JP'
    KE = 'KE'
    KR = 'KR'
    MX = 'MX'
    MY = 'MY'
    NG = 'NG'
    NL = 'NL'
    NO = 'NO'
    NZ = 'NZ'
    PH = 'PH'
    PK = 'PK'
    PL = 'PL'
    PT = 'PT'
    RO = 'RO'
    SA = 'SA'
    SE = 'SE'
    SG = 'SG'
    TH = 'TH'
    TR = 'TR'
    TW = 'TW'
    US = 'US'
    VN = 'VN'
    ZA = 'ZA'


class TaxCategory(str, Enum):
    DIGITAL_PRODUCTS = 'digital_products'
    SAAS = 'saas'
    E_BOOK = 'e_book'
    EDTECH = 'edtech'


class TimeInterval(str, Enum):
    DAY = 'Day'
    WEEK = 'Week'
    MONTH = 'Month'
    YEAR = 'Year'


class PaymentMethodTypes(str, Enum):
    ACH = 'ach'
    AFFIRM = 'affirm'
    AFTERPAY_CLEARPAY = 'afterpay_clearpay'
    ALI_PAY = 'ali_pay'
    AMAZON_PAY = 'amazon_pay'
    APPLE_PAY = 'apple_pay'
    BACS = 'bacs'
    BANCONTACT_CARD = 'bancontact_card'
    BLIK = 'blik'
    CASHAPP = 'cashapp'
    CREDIT = 'credit'
    DEBIT = 'debit'
    EPS = 'eps'
    GOOGLE_PAY = 'google_pay'
    IDEAL = 'ideal'
    KLARNA = 'klarna'
    MULTIBANCO = 'multibanco'
    PAYPAL = 'paypal'
    PRZELEWY24 = 'przelewy24'
    SEPA = 'sepa'
    UPI_COLLECT = 'upi_collect'
    UPI_INTENT = 'upi_intent'
    VENMO = 'venmo'


class IntentStatus(str, Enum):
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'
    CANCELLED = 'cancelled'
    PROCESSING = 'processing'
    REQUIRES_CUSTOMER_ACTION = 'requires_customer_action'
    REQUIRES_MERCHANT_ACTION = 'requires_merchant_action'
    REQUIRES_PAYMENT_METHOD = 'requires_payment_method'
    REQUIRES_CONFIRMATION = 'requires_confirmation'
    REQUIRES_CAPTURE = 'requires_capture'
    PARTIALLY_CAPTURED = 'partially_captured'
    PARTIALLY_CAPTURED_AND_CAPTURABLE = 'partially_captured_and_capturable'


class RefundStatus(str, Enum):
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'
    PENDING = 'pending'
    REVIEW = 'review'


class DisputeStage(str, Enum):
    PRE_DISPUTE = 'pre_dispute'
    DISPUTE = 'dispute'
    PRE_ARBITRATION = 'pre_arbitration'


class DisputeStatus(str, Enum):
    DISPUTE_OPENED = 'dispute_opened'
    DISPUTE_EXPIRED = 'dispute_expired'
    DISPUTE_ACCEPTED = 'dispute_accepted'
    DISPUTE_CANCELLED = 'dispute_cancelled'
    DISPUTE_CHALLENGED = 'dispute_challenged'
    DISPUTE_WON = 'dispute_won'
    DISPUTE_LOST = 'dispute_lost'


class SubscriptionStatus(str, Enum):
    PENDING = 'pending'
    ACTIVE = 'active'
    ON_HOLD = 'on_hold'
    CANCELLED = 'cancelled'
    FAILED = 'failed'
    EXPIRED = 'expired'


class LicenseKeyStatus(str, Enum):
    ACTIVE = 'active'
    EXPIRED = 'expired'
    DISABLED = 'disabled'


class BillingAddress(BaseModel):
    country: OpenEnum[CountryCode]
    city: str | None = None
    state: str | None = None
    street: str | None = None
    zipcode: str | None = None


class CustomerLimitedDetails(BaseModel):
    customer_id: str
    email: str
    name: str
    phone_number: str | None = None


class AttachExistingCustomer(BaseModel):
    customer_id: str


class NewCustomer(BaseModel):
    email: str
    name: str | None = None
    create_new_customer: bool | None = None
    phone_number: str | None = None


# Customer reference in create calls: an existing id, or details for a new one.
CustomerRequest = Annotated[Union[AttachExistingCustomer, NewCustomer], FirstMatch]


class OneTimeProductCartItem(BaseModel):
    product_id: str
    quantity: int
    amount: int | None = None
