"""One-time payments."""

from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.payments import (
    Payment,
    PaymentCreateParams,
    PaymentGetLineItemsResponse,
    PaymentListParams,
    PaymentListResponse,
    PaymentNewResponse,
)

__all__ = ['Payments']


class Payments(APIResource):
    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> PaymentNewResponse:
        """Create a payment and, optionally, a hosted payment link."""
        return self._client.request(
            'post',
            'payments',
            body=self._payload(PaymentCreateParams, params, fields),
            options=options,
            cast_to=PaymentNewResponse,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> PaymentNewResponse:
        return await self._client.arequest(
            'post',
            'payments',
            body=self._payload(PaymentCreateParams, params, fields),
            options=options,
            cast_to=PaymentNewResponse,
        )

    def retrieve(self, payment_id: str, *, options: RequestOptions | None = None) -> Payment:
        return self._client.request(
            'get', 'payments/%1$s', path_params=[payment_id], options=options, cast_to=Payment
        )

    async def aretrieve(
        self, payment_id: str, *, options: RequestOptions | None = None
    ) -> Payment:
        return await self._client.arequest(
            'get', 'payments/%1$s', path_params=[payment_id], options=options, cast_to=Payment
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[PaymentListResponse]:
        """List payments, newest first, one numbered page at a time."""
        return self._client.request(
            'get',
            'payments',
            query=self._payload(PaymentListParams, params, fields),
            options=options,
            cast_to=PaymentListResponse,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[PaymentListResponse]:
        return await self._client.arequest(
            'get',
            'payments',
            query=self._payload(PaymentListParams, params, fields),
            options=options,
            cast_to=PaymentListResponse,
            page=DefaultPageNumberPagination,
        )

    def retrieve_line_items(
        self, payment_id: str, *, options: RequestOptions | None = None
    ) -> PaymentGetLineItemsResponse:
        return self._client.request(
            'get',
            'payments/%1$s/line-items',
            path_params=[payment_id],
            options=options,
            cast_to=PaymentGetLineItemsResponse,
        )

    async def aretrieve_line_items(
        self, payment_id: str, *, options: RequestOptions | None = None
    ) -> PaymentGetLineItemsResponse:
        return await self._client.arequest(
            'get',
            'payments/%1$s/line-items',
            path_params=[payment_id],
            options=options,
            cast_to=PaymentGetLineItemsResponse,
        )
