from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.payouts import Payout, PayoutListParams

__all__ = ['Payouts']


class Payouts(APIResource):
    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Payout]:
        return self._client.request(
            'get',
            'payouts',
            query=self._payload(PayoutListParams, params, fields),
            options=options,
            cast_to=Payout,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Payout]:
        return await self._client.arequest(
            'get',
            'payouts',
            query=self._payload(PayoutListParams, params, fields),
            options=options,
            cast_to=Payout,
            page=DefaultPageNumberPagination,
        )
