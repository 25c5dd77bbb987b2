"""Custom exceptions for the Dodo Payments client.

This module defines the hierarchy of exceptions raised by the client so
callers can catch every SDK failure with :class:`DodoPaymentsError`, or pick
out specific HTTP statuses through the :class:`APIStatusError` subclasses.
"""

from http import HTTPStatus
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx
    from pydantic import ValidationError

__all__ = [
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
    'ERROR_DESCRIPTIONS',
    'status_error_class',
]


class DodoPaymentsError(Exception):
    """Base exception for all client errors.

    Every exception raised by this package inherits from this class, making it
    easy to handle all SDK failures with a single except clause.

    Example:
        try:
            client.payments.retrieve('pay_123')
        except DodoPaymentsError as e:
            print(f"Dodo Payments error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(DodoPaymentsError):
    """Error in client configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class APIError(DodoPaymentsError):
    """Base exception for failures of an HTTP round trip.

    Attributes:
        request: The httpx Request that was being sent, if one was built.
    """

    def __init__(self, message: str, *, request: 'httpx.Request | None' = None):
        self.request = request
        super().__init__(message)


class APIConnectionError(APIError):
    """The transport could not complete the round trip.

    Raised for DNS, TCP and TLS failures. No HTTP status is involved.

    Attributes:
        cause: The underlying transport exception.
    """

    def __init__(
        self,
        message: str = 'Connection error',
        *,
        request: 'httpx.Request | None' = None,
        cause: Exception | None = None,
    ):
        self.cause = cause
        if cause:
            message += f': {cause}'
        super().__init__(message, request=request)


class APITimeoutError(APIConnectionError):
    """The transport gave up waiting for the server."""

    def __init__(
        self,
        *,
        request: 'httpx.Request | None' = None,
        cause: Exception | None = None,
    ):
        super().__init__('Request timed out', request=request, cause=cause)


class APIResponseValidationError(APIError):
    """The response body does not match the declared response shape.

    Attributes:
        response: The httpx Response object, when the data came from one.
        status_code: HTTP status of the response, if any.
        body: The decoded body that failed validation.
        cause: The pydantic ValidationError with the field-level details.
    """

    def __init__(
        self,
        type_name: str,
        *,
        body: Any = None,
        response: 'httpx.Response | None' = None,
        cause: 'ValidationError | None' = None,
    ):
        self.type_name = type_name
        self.body = body
        self.response = response
        self.status_code = response.status_code if response is not None else None
        self.cause = cause
        message = f"Response data does not match '{type_name}'"
        if cause is not None:
            message += f': {cause.error_count()} validation error(s)'
        super().__init__(message, request=_request_of(response))


class APIStatusError(APIError):
    """The API answered with a non-2xx status.

    This exception provides detailed error information from the API response,
    including the HTTP status code, error message, and full response body.

    Attributes:
        status_code: The HTTP status code of the response.
        response: The httpx Response object.
        detail: Parsed error detail from the response body (if available).
        body: Raw response body text.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response: 'httpx.Response',
        detail: Any | None = None,
        body: str = '',
    ):
        self.status_code = status_code
        self.response = response
        self.detail = detail
        self.body = body
        super().__init__(message, request=_request_of(response))

    @classmethod
    def from_response(cls, response: 'httpx.Response') -> 'APIStatusError':
        """Build the matching subclass from an error response."""
        status_code = response.status_code
        body = response.text
        detail = None
        try:
            json_body = response.json()
            if isinstance(json_body, dict):
                detail = json_body.get(
                    'message', json_body.get('detail', json_body)
                )
            else:
                detail = json_body
        except ValueError:
            detail = body if body else None

        error_cls = status_error_class(status_code)
        message = f'{ERROR_DESCRIPTIONS[error_cls]} (HTTP {status_code})'
        if detail:
            if isinstance(detail, list):
                message += f': {"; ".join(str(item) for item in detail)}'
            else:
                message += f': {detail}'

        return error_cls(
            message,
            status_code=status_code,
            response=response,
            detail=detail,
            body=body,
        )

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(status_code={self.status_code}, '
            f'detail={self.detail!r})'
        )


class BadRequestError(APIStatusError):
    """HTTP 400."""


class AuthenticationError(APIStatusError):
    """HTTP 401."""


class PermissionDeniedError(APIStatusError):
    """HTTP 403."""


class NotFoundError(APIStatusError):
    """HTTP 404."""


class ConflictError(APIStatusError):
    """HTTP 409."""


class UnprocessableEntityError(APIStatusError):
    """HTTP 422."""


class RateLimitError(APIStatusError):
    """HTTP 429."""


class InternalServerError(APIStatusError):
    """A registered HTTP 5xx status (500-511)."""


class PaginationError(DodoPaymentsError):
    """A page was asked for its successor but has none.

    Attributes:
        page_type: Name of the page class.
    """

    def __init__(self, page_type: str, reason: str | None = None):
        self.page_type = page_type
        self.reason = reason
        message = f'{page_type} has no next page'
        if reason:
            message += f': {reason}'
        super().__init__(message)


class InvalidParametersError(DodoPaymentsError):
    """A parameter bag could not be turned into a request.

    Attributes:
        params_type: Name of the expected parameter model.
        cause: The underlying validation exception.
    """

    def __init__(self, params_type: str, cause: Exception | None = None):
        self.params_type = params_type
        self.cause = cause
        message = f"Invalid parameters for '{params_type}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class WebhookVerificationError(DodoPaymentsError):
    """A webhook delivery was rejected by the caller's verifier.

    Attributes:
        webhook_id: Value of the ``webhook-id`` header, when present.
        cause: The exception raised by the verifier, if it raised.
    """

    def __init__(self, webhook_id: str | None = None, cause: Exception | None = None):
        self.webhook_id = webhook_id
        self.cause = cause
        message = 'Webhook signature verification failed'
        if webhook_id:
            message += f" for delivery '{webhook_id}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


_STATUS_ERRORS: dict[int, type[APIStatusError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}

_REGISTERED_STATUSES = frozenset(status.value for status in HTTPStatus)

ERROR_DESCRIPTIONS: MappingProxyType[type[DodoPaymentsError], str] = MappingProxyType(
    {
        APIStatusError: 'API status error',
        BadRequestError: 'Bad request',
        AuthenticationError: 'Authentication failed',
        PermissionDeniedError: 'Permission denied',
        NotFoundError: 'Not found',
        ConflictError: 'Conflict',
        UnprocessableEntityError: 'Unprocessable entity',
        RateLimitError: 'Rate limit exceeded',
        InternalServerError: 'Internal server error',
        APIConnectionError: 'Connection error',
        APITimeoutError: 'Request timed out',
        APIResponseValidationError: 'Invalid response data',
    }
)


def status_error_class(status_code: int) -> type[APIStatusError]:
    """Pick the exception class for an error status code.

    Examples:
        >>> status_error_class(404).__name__
        'NotFoundError'
        >>> status_error_class(503).__name__
        'InternalServerError'
        >>> status_error_class(599).__name__
        'APIStatusError'
    """
    if status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[status_code]
    # Unregistered codes such as 599 fall through to the generic class.
    if status_code >= 500 and status_code in _REGISTERED_STATUSES:
        return InternalServerError
    return APIStatusError


def _request_of(response: 'httpx.Response | None') -> 'httpx.Request | None':
    # httpx raises RuntimeError from .request when the response was built by hand
    if response is None:
        return None
    try:
        return response.request
    except RuntimeError:
        return None
