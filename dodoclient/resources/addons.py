from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.addons import (
    Addon,
    AddonCreateParams,
    AddonListParams,
    AddonUpdateImagesResponse,
    AddonUpdateParams,
)

__all__ = ['Addons']


class Addons(APIResource):
    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Addon:
        return self._client.request(
            'post',
            'addons',
            body=self._payload(AddonCreateParams, params, fields),
            options=options,
            cast_to=Addon,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Addon:
        return await self._client.arequest(
            'post',
            'addons',
            body=self._payload(AddonCreateParams, params, fields),
            options=options,
            cast_to=Addon,
        )

    def retrieve(self, id: str, *, options: RequestOptions | None = None) -> Addon:
        return self._client.request(
            'get', 'addons/%1$s', path_params=[id], options=options, cast_to=Addon
        )

    async def aretrieve(self, id: str, *, options: RequestOptions | None = None) -> Addon:
        return await self._client.arequest(
            'get', 'addons/%1$s', path_params=[id], options=options, cast_to=Addon
        )

    def update(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Addon:
        return self._client.request(
            'patch',
            'addons/%1$s',
            path_params=[id],
            body=self._payload(AddonUpdateParams, params, fields),
            options=options,
            cast_to=Addon,
        )

    async def aupdate(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Addon:
        return await self._client.arequest(
            'patch',
            'addons/%1$s',
            path_params=[id],
            body=self._payload(AddonUpdateParams, params, fields),
            options=options,
            cast_to=Addon,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Addon]:
        return self._client.request(
            'get',
            'addons',
            query=self._payload(AddonListParams, params, fields),
            options=options,
            cast_to=Addon,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Addon]:
        return await self._client.arequest(
            'get',
            'addons',
            query=self._payload(AddonListParams, params, fields),
            options=options,
            cast_to=Addon,
            page=DefaultPageNumberPagination,
        )

    def update_images(
        self, id: str, *, options: RequestOptions | None = None
    ) -> AddonUpdateImagesResponse:
        """Reserve an image for an add-on and get the URL to upload it to."""
        return self._client.request(
            'put',
            'addons/%1$s/images',
            path_params=[id],
            options=options,
            cast_to=AddonUpdateImagesResponse,
        )

    async def aupdate_images(
        self, id: str, *, options: RequestOptions | None = None
    ) -> AddonUpdateImagesResponse:
        return await self._client.arequest(
            'put',
            'addons/%1$s/images',
            path_params=[id],
            options=options,
            cast_to=AddonUpdateImagesResponse,
        )
