from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.refunds import Refund, RefundCreateParams, RefundListParams

__all__ = ['Refunds']


class Refunds(APIResource):
    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Refund:
        """Refund a payment, in full or for the listed ``items`` only."""
        return self._client.request(
            'post',
            'refunds',
            body=self._payload(RefundCreateParams, params, fields),
            options=options,
            cast_to=Refund,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Refund:
        return await self._client.arequest(
            'post',
            'refunds',
            body=self._payload(RefundCreateParams, params, fields),
            options=options,
            cast_to=Refund,
        )

    def retrieve(self, refund_id: str, *, options: RequestOptions | None = None) -> Refund:
        return self._client.request(
            'get', 'refunds/%1$s', path_params=[refund_id], options=options, cast_to=Refund
        )

    async def aretrieve(
        self, refund_id: str, *, options: RequestOptions | None = None
    ) -> Refund:
        return await self._client.arequest(
            'get', 'refunds/%1$s', path_params=[refund_id], options=options, cast_to=Refund
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Refund]:
        return self._client.request(
            'get',
            'refunds',
            query=self._payload(RefundListParams, params, fields),
            options=options,
            cast_to=Refund,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Refund]:
        return await self._client.arequest(
            'get',
            'refunds',
            query=self._payload(RefundListParams, params, fields),
            options=options,
            cast_to=Refund,
            page=DefaultPageNumberPagination,
        )
