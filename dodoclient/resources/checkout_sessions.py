from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.checkout_sessions import (
    CheckoutSessionCreateParams,
    CheckoutSessionPreviewParams,
    CheckoutSessionPreviewResponse,
    CheckoutSessionResponse,
    CheckoutSessionStatus,
)

__all__ = ['CheckoutSessions']


class CheckoutSessions(APIResource):
    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> CheckoutSessionResponse:
        """Create a hosted checkout; send the customer to ``checkout_url``."""
        return self._client.request(
            'post',
            'checkouts',
            body=self._payload(CheckoutSessionCreateParams, params, fields),
            options=options,
            cast_to=CheckoutSessionResponse,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> CheckoutSessionResponse:
        return await self._client.arequest(
            'post',
            'checkouts',
            body=self._payload(CheckoutSessionCreateParams, params, fields),
            options=options,
            cast_to=CheckoutSessionResponse,
        )

    def retrieve(
        self, id: str, *, options: RequestOptions | None = None
    ) -> CheckoutSessionStatus:
        """Look up a session and the payment it produced, if any."""
        return self._client.request(
            'get',
            'checkouts/%1$s',
            path_params=[id],
            options=options,
            cast_to=CheckoutSessionStatus,
        )

    async def aretrieve(
        self, id: str, *, options: RequestOptions | None = None
    ) -> CheckoutSessionStatus:
        return await self._client.arequest(
            'get',
            'checkouts/%1$s',
            path_params=[id],
            options=options,
            cast_to=CheckoutSessionStatus,
        )

    def preview(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> CheckoutSessionPreviewResponse:
        """Price a cart the way ``create`` would, without creating a session."""
        return self._client.request(
            'post',
            'checkouts/preview',
            body=self._payload(CheckoutSessionPreviewParams, params, fields),
            options=options,
            cast_to=CheckoutSessionPreviewResponse,
        )

    async def apreview(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> CheckoutSessionPreviewResponse:
        return await self._client.arequest(
            'post',
            'checkouts/preview',
            body=self._payload(CheckoutSessionPreviewParams, params, fields),
            options=options,
            cast_to=CheckoutSessionPreviewResponse,
        )
