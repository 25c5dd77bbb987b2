"""Usage events consumed by meters."""

from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.usage_events import (
    Event,
    UsageEventIngestParams,
    UsageEventIngestResponse,
    UsageEventListParams,
)

__all__ = ['UsageEvents']


class UsageEvents(APIResource):
    def ingest(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> UsageEventIngestResponse:
        """Send a batch of events. Re-sent ``event_id`` values are ignored."""
        return self._client.request(
            'post',
            'events/ingest',
            body=self._payload(UsageEventIngestParams, params, fields),
            options=options,
            cast_to=UsageEventIngestResponse,
        )

    async def aingest(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> UsageEventIngestResponse:
        return await self._client.arequest(
            'post',
            'events/ingest',
            body=self._payload(UsageEventIngestParams, params, fields),
            options=options,
            cast_to=UsageEventIngestResponse,
        )

    def retrieve(self, event_id: str, *, options: RequestOptions | None = None) -> Event:
        return self._client.request(
            'get', 'events/%1$s', path_params=[event_id], options=options, cast_to=Event
        )

    async def aretrieve(self, event_id: str, *, options: RequestOptions | None = None) -> Event:
        return await self._client.arequest(
            'get', 'events/%1$s', path_params=[event_id], options=options, cast_to=Event
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Event]:
        return self._client.request(
            'get',
            'events',
            query=self._payload(UsageEventListParams, params, fields),
            options=options,
            cast_to=Event,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Event]:
        return await self._client.arequest(
            'get',
            'events',
            query=self._payload(UsageEventListParams, params, fields),
            options=options,
            cast_to=Event,
            page=DefaultPageNumberPagination,
        )
