"""License keys and the instances activated against them."""

from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.license_keys import (
    LicenseKey,
    LicenseKeyInstance,
    LicenseKeyInstanceListParams,
    LicenseKeyInstanceUpdateParams,
    LicenseKeyListParams,
    LicenseKeyUpdateParams,
)

__all__ = ['LicenseKeyInstances', 'LicenseKeys']


class LicenseKeys(APIResource):
    def retrieve(self, id: str, *, options: RequestOptions | None = None) -> LicenseKey:
        return self._client.request(
            'get', 'license_keys/%1$s', path_params=[id], options=options, cast_to=LicenseKey
        )

    async def aretrieve(self, id: str, *, options: RequestOptions | None = None) -> LicenseKey:
        return await self._client.arequest(
            'get', 'license_keys/%1$s', path_params=[id], options=options, cast_to=LicenseKey
        )

    def update(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> LicenseKey:
        return self._client.request(
            'patch',
            'license_keys/%1$s',
            path_params=[id],
            body=self._payload(LicenseKeyUpdateParams, params, fields),
            options=options,
            cast_to=LicenseKey,
        )

    async def aupdate(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> LicenseKey:
        return await self._client.arequest(
            'patch',
            'license_keys/%1$s',
            path_params=[id],
            body=self._payload(LicenseKeyUpdateParams, params, fields),
            options=options,
            cast_to=LicenseKey,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[LicenseKey]:
        return self._client.request(
            'get',
            'license_keys',
            query=self._payload(LicenseKeyListParams, params, fields),
            options=options,
            cast_to=LicenseKey,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[LicenseKey]:
        return await self._client.arequest(
            'get',
            'license_keys',
            query=self._payload(LicenseKeyListParams, params, fields),
            options=options,
            cast_to=LicenseKey,
            page=DefaultPageNumberPagination,
        )


class LicenseKeyInstances(APIResource):
    def retrieve(
        self, id: str, *, options: RequestOptions | None = None
    ) -> LicenseKeyInstance:
        return self._client.request(
            'get',
            'license_key_instances/%1$s',
            path_params=[id],
            options=options,
            cast_to=LicenseKeyInstance,
        )

    async def aretrieve(
        self, id: str, *, options: RequestOptions | None = None
    ) -> LicenseKeyInstance:
        return await self._client.arequest(
            'get',
            'license_key_instances/%1$s',
            path_params=[id],
            options=options,
            cast_to=LicenseKeyInstance,
        )

    def update(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> LicenseKeyInstance:
        return self._client.request(
            'patch',
            'license_key_instances/%1$s',
            path_params=[id],
            body=self._payload(LicenseKeyInstanceUpdateParams, params, fields),
            options=options,
            cast_to=LicenseKeyInstance,
        )

    async def aupdate(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> LicenseKeyInstance:
        return await self._client.arequest(
            'patch',
            'license_key_instances/%1$s',
            path_params=[id],
            body=self._payload(LicenseKeyInstanceUpdateParams, params, fields),
            options=options,
            cast_to=LicenseKeyInstance,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[LicenseKeyInstance]:
        return self._client.request(
            'get',
            'license_key_instances',
            query=self._payload(LicenseKeyInstanceListParams, params, fields),
            options=options,
            cast_to=LicenseKeyInstance,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[LicenseKeyInstance]:
        return await self._client.arequest(
            'get',
            'license_key_instances',
            query=self._payload(LicenseKeyInstanceListParams, params, fields),
            options=options,
            cast_to=LicenseKeyInstance,
            page=DefaultPageNumberPagination,
        )
