"""Brands: the storefront identities a business sells under."""

from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.brands import (
    Brand,
    BrandCreateParams,
    BrandListResponse,
    BrandUpdateImagesResponse,
    BrandUpdateParams,
)

__all__ = ['Brands']


class Brands(APIResource):
    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Brand:
        return self._client.request(
            'post',
            'brands',
            body=self._payload(BrandCreateParams, params, fields),
            options=options,
            cast_to=Brand,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Brand:
        return await self._client.arequest(
            'post',
            'brands',
            body=self._payload(BrandCreateParams, params, fields),
            options=options,
            cast_to=Brand,
        )

    def retrieve(self, id: str, *, options: RequestOptions | None = None) -> Brand:
        return self._client.request(
            'get', 'brands/%1$s', path_params=[id], options=options, cast_to=Brand
        )

    async def aretrieve(self, id: str, *, options: RequestOptions | None = None) -> Brand:
        return await self._client.arequest(
            'get', 'brands/%1$s', path_params=[id], options=options, cast_to=Brand
        )

    def update(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Brand:
        return self._client.request(
            'patch',
            'brands/%1$s',
            path_params=[id],
            body=self._payload(BrandUpdateParams, params, fields),
            options=options,
            cast_to=Brand,
        )

    async def aupdate(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Brand:
        return await self._client.arequest(
            'patch',
            'brands/%1$s',
            path_params=[id],
            body=self._payload(BrandUpdateParams, params, fields),
            options=options,
            cast_to=Brand,
        )

    def list(self, *, options: RequestOptions | None = None) -> BrandListResponse:
        """Return every brand in one response; there is no paging."""
        return self._client.request(
            'get', 'brands', options=options, cast_to=BrandListResponse
        )

    async def alist(self, *, options: RequestOptions | None = None) -> BrandListResponse:
        return await self._client.arequest(
            'get', 'brands', options=options, cast_to=BrandListResponse
        )

    def update_images(
        self, id: str, *, options: RequestOptions | None = None
    ) -> BrandUpdateImagesResponse:
        return self._client.request(
            'put',
            'brands/%1$s/images',
            path_params=[id],
            options=options,
            cast_to=BrandUpdateImagesResponse,
        )

    async def aupdate_images(
        self, id: str, *, options: RequestOptions | None = None
    ) -> BrandUpdateImagesResponse:
        return await self._client.arequest(
            'put',
            'brands/%1$s/images',
            path_params=[id],
            options=options,
            cast_to=BrandUpdateImagesResponse,
        )
