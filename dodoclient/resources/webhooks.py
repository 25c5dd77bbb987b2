"""Webhook endpoint management and decoding of delivered events.

Deliveries are signed by the platform, but this client does not implement
signature checking. :meth:`Webhooks.unwrap` takes the verifier from the
caller and refuses to decode a payload it rejects.

Example:
    >>> def verify(body, headers):
    ...     return my_standard_webhooks.verify(body, headers.model_dump(by_alias=True))
    >>> event = client.webhooks.unwrap(request.body, request.headers, verify=verify)
    >>> event.type
    <WebhookEventType.PAYMENT_SUCCEEDED: 'payment.succeeded'>
"""

import json
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from dodoclient._serialization import coerce
from dodoclient._types import RequestOptions
from dodoclient.exceptions import APIResponseValidationError, WebhookVerificationError
from dodoclient.pagination import CursorPagePagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.webhook_events import WebhookHeaders, WebhookPayload
from dodoclient.types.webhooks import (
    WebhookCreateParams,
    WebhookDetails,
    WebhookHeadersResponse,
    WebhookHeadersUpdateParams,
    WebhookListParams,
    WebhookSecret,
    WebhookUpdateParams,
)

if TYPE_CHECKING:
    from dodoclient._base_client import BaseClient

__all__ = ['Verifier', 'WebhookHeadersResource', 'Webhooks']

logger = logging.getLogger(__name__)

# (raw body, delivery headers) -> whether the signature is valid
Verifier = Callable[[str | bytes, WebhookHeaders], bool]


class WebhookHeadersResource(APIResource):
    """Custom headers attached to every delivery of one endpoint."""

    def retrieve(
        self, webhook_id: str, *, options: RequestOptions | None = None
    ) -> WebhookHeadersResponse:
        return self._client.request(
            'get',
            'webhooks/%1$s/headers',
            path_params=[webhook_id],
            options=options,
            cast_to=WebhookHeadersResponse,
        )

    async def aretrieve(
        self, webhook_id: str, *, options: RequestOptions | None = None
    ) -> WebhookHeadersResponse:
        return await self._client.arequest(
            'get',
            'webhooks/%1$s/headers',
            path_params=[webhook_id],
            options=options,
            cast_to=WebhookHeadersResponse,
        )

    def update(
        self,
        webhook_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        self._client.request(
            'patch',
            'webhooks/%1$s/headers',
            path_params=[webhook_id],
            body=self._payload(WebhookHeadersUpdateParams, params, fields),
            options=options,
        )

    async def aupdate(
        self,
        webhook_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        await self._client.arequest(
            'patch',
            'webhooks/%1$s/headers',
            path_params=[webhook_id],
            body=self._payload(WebhookHeadersUpdateParams, params, fields),
            options=options,
        )


class Webhooks(APIResource):
    def __init__(self, client: 'BaseClient') -> None:
        super().__init__(client)
        self.headers = WebhookHeadersResource(client)

    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> WebhookDetails:
        return self._client.request(
            'post',
            'webhooks',
            body=self._payload(WebhookCreateParams, params, fields),
            options=options,
            cast_to=WebhookDetails,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> WebhookDetails:
        return await self._client.arequest(
            'post',
            'webhooks',
            body=self._payload(WebhookCreateParams, params, fields),
            options=options,
            cast_to=WebhookDetails,
        )

    def retrieve(
        self, webhook_id: str, *, options: RequestOptions | None = None
    ) -> WebhookDetails:
        return self._client.request(
            'get',
            'webhooks/%1$s',
            path_params=[webhook_id],
            options=options,
            cast_to=WebhookDetails,
        )

    async def aretrieve(
        self, webhook_id: str, *, options: RequestOptions | None = None
    ) -> WebhookDetails:
        return await self._client.arequest(
            'get',
            'webhooks/%1$s',
            path_params=[webhook_id],
            options=options,
            cast_to=WebhookDetails,
        )

    def update(
        self,
        webhook_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> WebhookDetails:
        return self._client.request(
            'patch',
            'webhooks/%1$s',
            path_params=[webhook_id],
            body=self._payload(WebhookUpdateParams, params, fields),
            options=options,
            cast_to=WebhookDetails,
        )

    async def aupdate(
        self,
        webhook_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> WebhookDetails:
        return await self._client.arequest(
            'patch',
            'webhooks/%1$s',
            path_params=[webhook_id],
            body=self._payload(WebhookUpdateParams, params, fields),
            options=options,
            cast_to=WebhookDetails,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> CursorPagePagination[WebhookDetails]:
        """List endpoints; the listing is cursor based (``iterator``, ``limit``)."""
        return self._client.request(
            'get',
            'webhooks',
            query=self._payload(WebhookListParams, params, fields),
            options=options,
            cast_to=WebhookDetails,
            page=CursorPagePagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> CursorPagePagination[WebhookDetails]:
        return await self._client.arequest(
            'get',
            'webhooks',
            query=self._payload(WebhookListParams, params, fields),
            options=options,
            cast_to=WebhookDetails,
            page=CursorPagePagination,
        )

    def delete(self, webhook_id: str, *, options: RequestOptions | None = None) -> None:
        self._client.request(
            'delete', 'webhooks/%1$s', path_params=[webhook_id], options=options
        )

    async def adelete(self, webhook_id: str, *, options: RequestOptions | None = None) -> None:
        await self._client.arequest(
            'delete', 'webhooks/%1$s', path_params=[webhook_id], options=options
        )

    def retrieve_secret(
        self, webhook_id: str, *, options: RequestOptions | None = None
    ) -> WebhookSecret:
        return self._client.request(
            'get',
            'webhooks/%1$s/secret',
            path_params=[webhook_id],
            options=options,
            cast_to=WebhookSecret,
        )

    async def aretrieve_secret(
        self, webhook_id: str, *, options: RequestOptions | None = None
    ) -> WebhookSecret:
        return await self._client.arequest(
            'get',
            'webhooks/%1$s/secret',
            path_params=[webhook_id],
            options=options,
            cast_to=WebhookSecret,
        )

    def unsafe_unwrap(self, payload: str | bytes | Mapping[str, Any]) -> WebhookPayload:
        """Decode a delivered event without checking its signature.

        Raises:
            APIResponseValidationError: If the payload is not valid JSON or
                does not match :class:`WebhookPayload`.
        """
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except ValueError as e:
                raise APIResponseValidationError('JSON', body=payload) from e
        return coerce(WebhookPayload, payload)

    def unwrap(
        self,
        payload: str | bytes,
        headers: Mapping[str, str],
        *,
        verify: Verifier,
    ) -> WebhookPayload:
        """Verify a delivery with ``verify`` and decode it.

        Args:
            payload: The raw request body, exactly as received.
            headers: The request headers; ``webhook-id``,
                ``webhook-signature`` and ``webhook-timestamp`` are required,
                matched case-insensitively.
            verify: Signature check supplied by the caller.

        Raises:
            WebhookVerificationError: If a delivery header is missing, or
                ``verify`` returns a falsy value or raises.
        """
        try:
            delivery = WebhookHeaders.model_validate(
                {key.lower(): value for key, value in headers.items()}
            )
        except ValidationError as e:
            raise WebhookVerificationError(cause=e) from e

        try:
            verified = verify(payload, delivery)
        except Exception as e:
            raise WebhookVerificationError(delivery.webhook_id, cause=e) from e
        if not verified:
            logger.warning(f'Rejected webhook delivery {delivery.webhook_id}')
            raise WebhookVerificationError(delivery.webhook_id)
        return self.unsafe_unwrap(payload)
