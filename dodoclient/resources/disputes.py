from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.disputes import Dispute, DisputeListParams, GetDispute

__all__ = ['Disputes']


class Disputes(APIResource):
    def retrieve(
        self, dispute_id: str, *, options: RequestOptions | None = None
    ) -> GetDispute:
        return self._client.request(
            'get', 'disputes/%1$s', path_params=[dispute_id], options=options, cast_to=GetDispute
        )

    async def aretrieve(
        self, dispute_id: str, *, options: RequestOptions | None = None
    ) -> GetDispute:
        return await self._client.arequest(
            'get', 'disputes/%1$s', path_params=[dispute_id], options=options, cast_to=GetDispute
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Dispute]:
        return self._client.request(
            'get',
            'disputes',
            query=self._payload(DisputeListParams, params, fields),
            options=options,
            cast_to=Dispute,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Dispute]:
        return await self._client.arequest(
            'get',
            'disputes',
            query=self._payload(DisputeListParams, params, fields),
            options=options,
            cast_to=Dispute,
            page=DefaultPageNumberPagination,
        )
