from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.discounts import (
    Discount,
    DiscountCreateParams,
    DiscountListParams,
    DiscountUpdateParams,
)

__all__ = ['Discounts']


class Discounts(APIResource):
    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Discount:
        return self._client.request(
            'post',
            'discounts',
            body=self._payload(DiscountCreateParams, params, fields),
            options=options,
            cast_to=Discount,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Discount:
        return await self._client.arequest(
            'post',
            'discounts',
            body=self._payload(DiscountCreateParams, params, fields),
            options=options,
            cast_to=Discount,
        )

    def retrieve(self, discount_id: str, *, options: RequestOptions | None = None) -> Discount:
        return self._client.request(
            'get', 'discounts/%1$s', path_params=[discount_id], options=options, cast_to=Discount
        )

    async def aretrieve(
        self, discount_id: str, *, options: RequestOptions | None = None
    ) -> Discount:
        return await self._client.arequest(
            'get', 'discounts/%1$s', path_params=[discount_id], options=options, cast_to=Discount
        )

    def update(
        self,
        discount_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Discount:
        return self._client.request(
            'patch',
            'discounts/%1$s',
            path_params=[discount_id],
            body=self._payload(DiscountUpdateParams, params, fields),
            options=options,
            cast_to=Discount,
        )

    async def aupdate(
        self,
        discount_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Discount:
        return await self._client.arequest(
            'patch',
            'discounts/%1$s',
            path_params=[discount_id],
            body=self._payload(DiscountUpdateParams, params, fields),
            options=options,
            cast_to=Discount,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Discount]:
        return self._client.request(
            'get',
            'discounts',
            query=self._payload(DiscountListParams, params, fields),
            options=options,
            cast_to=Discount,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Discount]:
        return await self._client.arequest(
            'get',
            'discounts',
            query=self._payload(DiscountListParams, params, fields),
            options=options,
            cast_to=Discount,
            page=DefaultPageNumberPagination,
        )

    def delete(self, discount_id: str, *, options: RequestOptions | None = None) -> None:
        self._client.request(
            'delete', 'discounts/%1$s', path_params=[discount_id], options=options
        )

    async def adelete(self, discount_id: str, *, options: RequestOptions | None = None) -> None:
        await self._client.arequest(
            'delete', 'discounts/%1$s', path_params=[discount_id], options=options
        )

    def retrieve_by_code(self, code: str, *, options: RequestOptions | None = None) -> Discount:
        """Look a discount up by the code customers type at checkout."""
        return self._client.request(
            'get', 'discounts/code/%1$s', path_params=[code], options=options, cast_to=Discount
        )

    async def aretrieve_by_code(
        self, code: str, *, options: RequestOptions | None = None
    ) -> Discount:
        return await self._client.arequest(
            'get', 'discounts/code/%1$s', path_params=[code], options=options, cast_to=Discount
        )
