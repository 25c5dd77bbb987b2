"""License activation endpoints, called from the licensed software."""

from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.licenses import (
    LicenseActivateParams,
    LicenseActivateResponse,
    LicenseDeactivateParams,
    LicenseValidateParams,
    LicenseValidateResponse,
)

__all__ = ['Licenses']


class Licenses(APIResource):
    def activate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> LicenseActivateResponse:
        """Register a new instance (e.g. a machine) against a license key."""
        return self._client.request(
            'post',
            'licenses/activate',
            body=self._payload(LicenseActivateParams, params, fields),
            options=options,
            cast_to=LicenseActivateResponse,
        )

    async def aactivate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> LicenseActivateResponse:
        return await self._client.arequest(
            'post',
            'licenses/activate',
            body=self._payload(LicenseActivateParams, params, fields),
            options=options,
            cast_to=LicenseActivateResponse,
        )

    def deactivate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> None:
        return self._client.request(
            'post',
            'licenses/deactivate',
            body=self._payload(LicenseDeactivateParams, params, fields),
            options=options,
        )

    async def adeactivate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> None:
        return await self._client.arequest(
            'post',
            'licenses/deactivate',
            body=self._payload(LicenseDeactivateParams, params, fields),
            options=options,
        )

    def validate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> LicenseValidateResponse:
        return self._client.request(
            'post',
            'licenses/validate',
            body=self._payload(LicenseValidateParams, params, fields),
            options=options,
            cast_to=LicenseValidateResponse,
        )

    async def avalidate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> LicenseValidateResponse:
        return await self._client.arequest(
            'post',
            'licenses/validate',
            body=self._payload(LicenseValidateParams, params, fields),
            options=options,
            cast_to=LicenseValidateResponse,
        )
