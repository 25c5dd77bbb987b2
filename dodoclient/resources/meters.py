from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.meters import Meter, MeterCreateParams, MeterListParams

__all__ = ['Meters']


class Meters(APIResource):
    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Meter:
        return self._client.request(
            'post',
            'meters',
            body=self._payload(MeterCreateParams, params, fields),
            options=options,
            cast_to=Meter,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Meter:
        return await self._client.arequest(
            'post',
            'meters',
            body=self._payload(MeterCreateParams, params, fields),
            options=options,
            cast_to=Meter,
        )

    def retrieve(self, id: str, *, options: RequestOptions | None = None) -> Meter:
        return self._client.request(
            'get', 'meters/%1$s', path_params=[id], options=options, cast_to=Meter
        )

    async def aretrieve(self, id: str, *, options: RequestOptions | None = None) -> Meter:
        return await self._client.arequest(
            'get', 'meters/%1$s', path_params=[id], options=options, cast_to=Meter
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Meter]:
        return self._client.request(
            'get',
            'meters',
            query=self._payload(MeterListParams, params, fields),
            options=options,
            cast_to=Meter,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Meter]:
        return await self._client.arequest(
            'get',
            'meters',
            query=self._payload(MeterListParams, params, fields),
            options=options,
            cast_to=Meter,
            page=DefaultPageNumberPagination,
        )

    def archive(self, id: str, *, options: RequestOptions | None = None) -> None:
        self._client.request('delete', 'meters/%1$s', path_params=[id], options=options)

    async def aarchive(self, id: str, *, options: RequestOptions | None = None) -> None:
        await self._client.arequest('delete', 'meters/%1$s', path_params=[id], options=options)

    def unarchive(self, id: str, *, options: RequestOptions | None = None) -> None:
        self._client.request(
            'post', 'meters/%1$s/unarchive', path_params=[id], options=options
        )

    async def aunarchive(self, id: str, *, options: RequestOptions | None = None) -> None:
        await self._client.arequest(
            'post', 'meters/%1$s/unarchive', path_params=[id], options=options
        )
