"""dodoclient - typed Python client for the Dodo Payments REST API.

The client wraps every resource group of the API with pydantic models for
requests and responses, sync and async methods, and auto-paging helpers for
list endpoints.

Quick Start:
    >>> from dodoclient import DodoPayments
    >>>
    >>> client = DodoPayments(api_key='sk_test_...', environment='test_mode')
    >>> for payment in client.payments.list(page_size=50).auto_paging_iter():
    ...     print(payment.payment_id, payment.total_amount)

CLI Usage:
    $ dodoclient payments --page-size 20
    $ dodoclient invoice pay_123 --output invoice.pdf
    $ dodoclient countries
"""

from dodoclient._client import DodoPayments
from dodoclient._types import NOT_GIVEN, NotGiven, PageRequest, RequestOptions
from dodoclient._version import __version__
from dodoclient.config import ClientSettings, Environment, get_settings
from dodoclient.exceptions import (
    APIConnectionError,
    APIError,
    APIResponseValidationError,
    APIStatusError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    DodoPaymentsError,
    InternalServerError,
    InvalidParametersError,
    NotFoundError,
    PaginationError,
    PermissionDeniedError,
    RateLimitError,
    UnprocessableEntityError,
    WebhookVerificationError,
)
from dodoclient.pagination import CursorPagePagination, DefaultPageNumberPagination

__all__ = [
    # Client
    'DodoPayments',
    'RequestOptions',
    'PageRequest',
    'NOT_GIVEN',
    'NotGiven',
    # Pagination
    'DefaultPageNumberPagination',
    'CursorPagePagination',
    # Configuration
    'ClientSettings',
    'Environment',
    'get_settings',
    # Exceptions
    'DodoPaymentsError',
    'ConfigurationError',
    'APIError',
    'APIConnectionError',
    'APITimeoutError',
    'APIResponseValidationError',
    'APIStatusError',
    'BadRequestError',
    'AuthenticationError',
    'PermissionDeniedError',
    'NotFoundError',
    'ConflictError',
    'UnprocessableEntityError',
    'RateLimitError',
    'InternalServerError',
    'PaginationError',
    'InvalidParametersError',
    'WebhookVerificationError',
    '__version__',
]
