from dodoclient._serialization import OpenEnum
from dodoclient._types import RequestOptions
from dodoclient.resources._resource import APIResource
from dodoclient.types.shared import CountryCode

__all__ = ['Misc']


class Misc(APIResource):
    def list_supported_countries(
        self, *, options: RequestOptions | None = None
    ) -> list[OpenEnum[CountryCode]]:
        """Countries a checkout can be billed to."""
        return self._client.request(
            'get',
            'checkout/supported_countries',
            options=options,
            cast_to=list[OpenEnum[CountryCode]],
        )

    async def alist_supported_countries(
        self, *, options: RequestOptions | None = None
    ) -> list[OpenEnum[CountryCode]]:
        return await self._client.arequest(
            'get',
            'checkout/supported_countries',
            options=options,
            cast_to=list[OpenEnum[CountryCode]],
        )
