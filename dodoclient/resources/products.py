"""Products, with their images and short links as sub-resources."""

from typing import TYPE_CHECKING, Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.products import (
    Product,
    ProductCreateParams,
    ProductImageUpdateParams,
    ProductImageUpdateResponse,
    ProductListParams,
    ProductListResponse,
    ProductUpdateFilesParams,
    ProductUpdateFilesResponse,
    ProductUpdateParams,
    ShortLink,
    ShortLinkCreateParams,
    ShortLinkCreateResponse,
    ShortLinkListParams,
)

if TYPE_CHECKING:
    from dodoclient._base_client import BaseClient

__all__ = ['ProductImages', 'ProductShortLinks', 'Products']


class ProductImages(APIResource):
    def update(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> ProductImageUpdateResponse:
        """Reserve an image slot for a product.

        The response carries a pre-signed URL; the image bytes are uploaded
        there directly, not through this client. ``force_update`` replaces an
        existing image.
        """
        return self._client.request(
            'put',
            'products/%1$s/images',
            path_params=[id],
            query=self._payload(ProductImageUpdateParams, params, fields),
            options=options,
            cast_to=ProductImageUpdateResponse,
        )

    async def aupdate(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> ProductImageUpdateResponse:
        return await self._client.arequest(
            'put',
            'products/%1$s/images',
            path_params=[id],
            query=self._payload(ProductImageUpdateParams, params, fields),
            options=options,
            cast_to=ProductImageUpdateResponse,
        )


class ProductShortLinks(APIResource):
    def create(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> ShortLinkCreateResponse:
        """Create a short checkout link for a product under ``slug``."""
        return self._client.request(
            'post',
            'products/%1$s/short_links',
            path_params=[id],
            body=self._payload(ShortLinkCreateParams, params, fields),
            options=options,
            cast_to=ShortLinkCreateResponse,
        )

    async def acreate(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> ShortLinkCreateResponse:
        return await self._client.arequest(
            'post',
            'products/%1$s/short_links',
            path_params=[id],
            body=self._payload(ShortLinkCreateParams, params, fields),
            options=options,
            cast_to=ShortLinkCreateResponse,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[ShortLink]:
        """List short links across products; filter with ``product_id``."""
        return self._client.request(
            'get',
            'products/short_links',
            query=self._payload(ShortLinkListParams, params, fields),
            options=options,
            cast_to=ShortLink,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[ShortLink]:
        return await self._client.arequest(
            'get',
            'products/short_links',
            query=self._payload(ShortLinkListParams, params, fields),
            options=options,
            cast_to=ShortLink,
            page=DefaultPageNumberPagination,
        )


class Products(APIResource):
    def __init__(self, client: 'BaseClient') -> None:
        super().__init__(client)
        self.images = ProductImages(client)
        self.short_links = ProductShortLinks(client)

    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Product:
        return self._client.request(
            'post',
            'products',
            body=self._payload(ProductCreateParams, params, fields),
            options=options,
            cast_to=Product,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Product:
        return await self._client.arequest(
            'post',
            'products',
            body=self._payload(ProductCreateParams, params, fields),
            options=options,
            cast_to=Product,
        )

    def retrieve(self, id: str, *, options: RequestOptions | None = None) -> Product:
        return self._client.request(
            'get', 'products/%1$s', path_params=[id], options=options, cast_to=Product
        )

    async def aretrieve(self, id: str, *, options: RequestOptions | None = None) -> Product:
        return await self._client.arequest(
            'get', 'products/%1$s', path_params=[id], options=options, cast_to=Product
        )

    def update(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        """Patch a product. The API answers with no content."""
        self._client.request(
            'patch',
            'products/%1$s',
            path_params=[id],
            body=self._payload(ProductUpdateParams, params, fields),
            options=options,
        )

    async def aupdate(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        await self._client.arequest(
            'patch',
            'products/%1$s',
            path_params=[id],
            body=self._payload(ProductUpdateParams, params, fields),
            options=options,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[ProductListResponse]:
        return self._client.request(
            'get',
            'products',
            query=self._payload(ProductListParams, params, fields),
            options=options,
            cast_to=ProductListResponse,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[ProductListResponse]:
        return await self._client.arequest(
            'get',
            'products',
            query=self._payload(ProductListParams, params, fields),
            options=options,
            cast_to=ProductListResponse,
            page=DefaultPageNumberPagination,
        )

    def archive(self, id: str, *, options: RequestOptions | None = None) -> None:
        self._client.request('delete', 'products/%1$s', path_params=[id], options=options)

    async def aarchive(self, id: str, *, options: RequestOptions | None = None) -> None:
        await self._client.arequest(
            'delete', 'products/%1$s', path_params=[id], options=options
        )

    def unarchive(self, id: str, *, options: RequestOptions | None = None) -> None:
        self._client.request(
            'post', 'products/%1$s/unarchive', path_params=[id], options=options
        )

    async def aunarchive(self, id: str, *, options: RequestOptions | None = None) -> None:
        await self._client.arequest(
            'post', 'products/%1$s/unarchive', path_params=[id], options=options
        )

    def update_files(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> ProductUpdateFilesResponse:
        """Register a digital-delivery file; upload its bytes to the returned URL."""
        return self._client.request(
            'put',
            'products/%1$s/files',
            path_params=[id],
            body=self._payload(ProductUpdateFilesParams, params, fields),
            options=options,
            cast_to=ProductUpdateFilesResponse,
        )

    async def aupdate_files(
        self,
        id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> ProductUpdateFilesResponse:
        return await self._client.arequest(
            'put',
            'products/%1$s/files',
            path_params=[id],
            body=self._payload(ProductUpdateFilesParams, params, fields),
            options=options,
            cast_to=ProductUpdateFilesResponse,
        )
